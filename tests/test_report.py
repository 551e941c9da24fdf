import csv
import json

from bricklayer.export.report import make_report, write_report
from bricklayer.planners.build_order import plan
from bricklayer.utils.spec_schema import Strategy


def test_report_counts_strides_and_types(layout, robot_config, wall_config):
    order = plan(Strategy.NAIVE, layout, robot_config, wall_config)
    report = make_report(Strategy.NAIVE, layout, order)

    assert report.complete
    assert report.total_bricks == report.placed == 352
    assert report.unplaced_ids == []
    assert report.stride_count == 96
    assert sum(report.bricks_per_stride.values()) == 352
    assert report.bricks_per_stride[0] == 4
    assert report.bricks_per_type == {"full": 320, "half": 32}


def test_report_of_empty_plan(layout):
    report = make_report(Strategy.OPTIMIZED, layout, [])
    assert not report.complete
    assert report.stride_count == 0
    assert len(report.unplaced_ids) == len(layout)


def test_write_report(tmp_path, layout, robot_config, wall_config):
    order = plan(Strategy.OPTIMIZED, layout, robot_config, wall_config)
    report = make_report(Strategy.OPTIMIZED, layout, order)
    csv_path, json_path = write_report(report, order, str(tmp_path / "session"))

    with open(csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == len(order)
    assert rows[0]["step"] == "0"
    assert rows[0]["id"] == order[0].id
    assert rows[-1]["stride"] == str(order[-1].stride)

    with open(json_path) as f:
        data = json.load(f)
    assert data["strategy"] == "optimized"
    assert data["complete"] is True
    assert data["stride_count"] == report.stride_count
