# bricklayer/api.py
import os
import time
import uuid
from typing import Optional

from fastapi import FastAPI
from pydantic import BaseModel, Field

from .utils.spec_schema import RobotConfig, Strategy, WallConfig
from .geometry.wall_generator import generate_wall
from .planners.build_order import plan
from .export.report import make_report, write_report

app = FastAPI(title="Bricklayer (Wall Layout + Stride Planning)")


class WallIn(BaseModel):
    wall: WallConfig = Field(default_factory=WallConfig)


class PlanIn(BaseModel):
    strategy: Strategy = Strategy.OPTIMIZED
    wall: WallConfig = Field(default_factory=WallConfig)
    robot: RobotConfig = Field(default_factory=RobotConfig)
    write_outputs: Optional[bool] = True


def _output_root() -> str:
    return os.getenv("BRICKLAYER_OUTPUT_DIR", "outputs")


@app.post("/wall")
def wall_layout(inp: WallIn):
    bricks = generate_wall(inp.wall)
    return {
        "wall": inp.wall.model_dump(),
        "counts": {
            "bricks": len(bricks),
            "courses": len({b.course for b in bricks}),
        },
        "bricks": [b.model_dump(mode="json") for b in bricks],
    }


@app.post("/plan")
def plan_build(inp: PlanIn):
    ts = time.strftime("%Y%m%d_%H%M%S")
    session_id = f"session_{ts}_{uuid.uuid4().hex[:6]}"

    # --- layout
    t0 = time.time()
    bricks = generate_wall(inp.wall)
    print(f"[TIMER] generate_wall: {time.time()-t0:.2f}s  bricks={len(bricks)}")

    # --- build order
    t1 = time.time()
    order = plan(inp.strategy, bricks, inp.robot, inp.wall)
    report = make_report(inp.strategy, bricks, order)
    print(f"[TIMER] plan[{inp.strategy.value}]: {time.time()-t1:.2f}s  strides={report.stride_count}")

    # --- report files
    outputs = {"build_order_csv": None, "report_json": None}
    if inp.write_outputs:
        t2 = time.time()
        outdir = os.path.join(_output_root(), session_id)
        csv_path, json_path = write_report(report, order, outdir)
        outputs = {"build_order_csv": csv_path, "report_json": json_path}
        print(f"[TIMER] write_report: {time.time()-t2:.2f}s")

    return {
        "session": session_id,
        "strategy": inp.strategy.value,
        "complete": report.complete,
        "counts": {
            "bricks": report.total_bricks,
            "placed": report.placed,
            "unplaced": len(report.unplaced_ids),
            "strides": report.stride_count,
        },
        "unplaced_ids": report.unplaced_ids,
        "order": [b.model_dump(mode="json") for b in order],
        "outputs": outputs,
    }
