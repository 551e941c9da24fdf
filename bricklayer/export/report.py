from typing import List, Tuple
from collections import Counter
import csv, json, os

from ..utils.spec_schema import Brick, PlanReport, Strategy

ORDER_FIELDS = ["step", "id", "course", "index_in_course", "type", "x", "y", "width", "height", "stride"]


def make_report(strategy: Strategy, bricks: List[Brick], order: List[Brick]) -> PlanReport:
    placed = {b.id for b in order}
    per_stride = Counter(b.stride for b in order)
    per_type = Counter(b.type.value for b in order)
    return PlanReport(
        strategy=strategy,
        total_bricks=len(bricks),
        placed=len(order),
        unplaced_ids=[b.id for b in bricks if b.id not in placed],
        stride_count=len(per_stride),
        bricks_per_stride=dict(sorted(per_stride.items())),
        bricks_per_type=dict(sorted(per_type.items())),
    )


def write_report(report: PlanReport, order: List[Brick], outdir: str) -> Tuple[str, str]:
    os.makedirs(outdir, exist_ok=True)
    # CSV
    csv_path = os.path.join(outdir, "build_order.csv")
    with open(csv_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=ORDER_FIELDS)
        w.writeheader()
        for step, b in enumerate(order):
            row = b.model_dump(mode="json", include=set(ORDER_FIELDS))
            row["step"] = step
            w.writerow(row)
    # JSON
    json_path = os.path.join(outdir, "report.json")
    with open(json_path, "w") as f:
        json.dump(report.model_dump(mode="json"), f, indent=2)
    return csv_path, json_path
