# bricklayer/planners/stride_planner.py
from typing import List, Optional, Set, Tuple

import numpy as np

from ..utils.spec_schema import Brick, RobotConfig, WallConfig
from .common import clamp, intersects, wall_bounds, warn_incomplete, working_copy
from .support import SupportMap, build_support_map, flag_unsupported, is_buildable

ANCHOR_LIMIT = 5  # lowest buildable bricks considered as anchors for the next stride

Position = Tuple[float, float]


def _fill_envelope(
    pending: List[Brick],
    placed_ids: Set[str],
    support: SupportMap,
    robot: Position,
    env: Tuple[float, float],
    stride: int,
) -> List[Brick]:
    """Lay every reachable, buildable brick; rescan until a pass lays nothing,
    since a brick laid late in a pass may unlock one above it."""
    x, y = robot
    env_w, env_h = env
    placed: List[Brick] = []
    progress = True
    while progress:
        progress = False
        for b in pending:  # (course, x) order
            if b.id in placed_ids or not intersects(b, x, y, env_w, env_h):
                continue
            if is_buildable(b, placed_ids, support[b.id]):
                b.stride = stride
                placed_ids.add(b.id)
                placed.append(b)
                progress = True
    return placed


def _placements(b: Brick, env_w: float, env_h: float) -> List[Position]:
    return [
        (b.x, b.y),                                  # bottom-left aligned
        (b.x + b.width / 2 - env_w / 2, b.y),        # centred in x
        (b.right - env_w, b.y),                      # bottom-right aligned
        (b.x, b.y + b.height / 2 - env_h / 2),       # centred in y
    ]


def _coverage(boxes: np.ndarray, x: float, y: float, env_w: float, env_h: float) -> int:
    x0, y0, x1, y1 = boxes.T
    hit = (x1 > x) & (x0 < x + env_w) & (y1 > y) & (y0 < y + env_h)
    return int(np.count_nonzero(hit))


def _next_position(
    candidates: List[Brick],
    env: Tuple[float, float],
    limits: Position,
) -> Position:
    env_w, env_h = env
    max_x, max_y = limits
    boxes = np.array([[b.x, b.y, b.right, b.top] for b in candidates], dtype=float)

    best: Optional[Position] = None
    best_score = -1
    for anchor in candidates[:ANCHOR_LIMIT]:
        for px, py in _placements(anchor, env_w, env_h):
            pos = (clamp(px, max_x), clamp(py, max_y))
            score = _coverage(boxes, pos[0], pos[1], env_w, env_h)
            if score > best_score:  # strict: first best wins ties
                best, best_score = pos, score

    if best is not None and best_score > 0:
        return best

    first = candidates[0]
    return clamp(first.x + first.width / 2 - env_w / 2, max_x), clamp(first.y, max_y)


def plan_optimized(
    bricks: List[Brick],
    robot_config: RobotConfig,
    wall_config: Optional[WallConfig] = None,
    log_every: int = 25,
) -> List[Brick]:
    """
    Greedy stride minimisation over the full 2D envelope.

    Each stride lays everything buildable inside the envelope, then moves the
    envelope to the placement (around one of the lowest buildable bricks) that
    covers the most buildable bricks. Planning stops early, leaving bricks out
    of the order, when a move would revisit a position already tried since
    the last brick was laid.
    """
    work = working_copy(bricks)
    support = build_support_map(work)
    unsupported = flag_unsupported("optimized", work, support)

    wall_width, wall_height = wall_bounds(work, wall_config)
    env = (robot_config.envelope_width, robot_config.envelope_height)
    limits = (wall_width - env[0], wall_height - env[1])

    pending = sorted((b for b in work if b.id not in unsupported), key=lambda b: (b.course, b.x))
    placed_ids: Set[str] = set()
    order: List[Brick] = []

    stride = 0
    robot: Position = (0.0, 0.0)
    tried: Set[Position] = {robot}

    while pending:
        laid = _fill_envelope(pending, placed_ids, support, robot, env, stride)
        if laid:
            order.extend(laid)
            pending = [b for b in pending if b.id not in placed_ids]
            tried = {robot}
            if stride % log_every == 0:
                print(f"[INFO] stride {stride}: placed {len(order)}/{len(work)}")
        if not pending:
            break

        candidates = [b for b in pending if is_buildable(b, placed_ids, support[b.id])]
        if candidates:
            target = _next_position(candidates, env, limits)
        else:
            # nothing is buildable: head for the lowest, leftmost brick anyway
            emergency = pending[0]
            target = (clamp(emergency.x, limits[0]), clamp(emergency.y, limits[1]))

        if target in tried:
            print(f"[WARN] optimized: no progress possible from stride {stride}, stopping.")
            break
        tried.add(target)
        robot = target
        stride += 1

    warn_incomplete("optimized", len(work), order)
    return order
