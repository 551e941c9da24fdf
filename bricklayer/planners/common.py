# bricklayer/planners/common.py
from typing import List, Optional, Tuple

from ..utils.spec_schema import Brick, WallConfig


def working_copy(bricks: List[Brick]) -> List[Brick]:
    # planners annotate strides on their own copy; callers keep pristine layouts
    return [b.model_copy(deep=True) for b in bricks]


def wall_bounds(bricks: List[Brick], wall_config: Optional[WallConfig] = None) -> Tuple[float, float]:
    if wall_config is not None:
        return wall_config.width, wall_config.height
    if not bricks:
        return 0.0, 0.0
    return max(b.right for b in bricks), max(b.top for b in bricks)


def clamp(value: float, upper: float) -> float:
    """Clamp an envelope origin into [0, upper]; 0 wins when the envelope is wider than the wall."""
    return max(0.0, min(value, upper))


def intersects(b: Brick, x: float, y: float, width: float, height: float) -> bool:
    return b.right > x and b.x < x + width and b.top > y and b.y < y + height


def warn_incomplete(label: str, total: int, order: List[Brick]) -> None:
    missing = total - len(order)
    if missing > 0:
        print(f"[WARN] {label}: plan incomplete, {missing}/{total} bricks left unplaced.")
