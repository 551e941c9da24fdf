# bricklayer/planners/naive_planner.py
from typing import List, Optional, Set

from ..geometry.wall_generator import group_courses
from ..utils.spec_schema import Brick, RobotConfig, WallConfig
from .common import clamp, wall_bounds, warn_incomplete, working_copy
from .support import build_support_map, flag_unsupported, is_buildable


def plan_naive(
    bricks: List[Brick],
    robot_config: RobotConfig,
    wall_config: Optional[WallConfig] = None,
) -> List[Brick]:
    """
    Course-by-course sweep, bottom first. Each course is swept left to right with
    an envelope-wide window; every window is one stride.
    Vertical reach is ignored. Support is only checked when a course is started,
    which drops bricks with nothing (or nothing laid) underneath; on a
    well-formed wall the course below is always complete by then.
    """
    work = working_copy(bricks)
    support = build_support_map(work)
    unsupported = flag_unsupported("naive", work, support)
    wall_width, _ = wall_bounds(work, wall_config)
    env_w = robot_config.envelope_width
    max_x = wall_width - env_w

    order: List[Brick] = []
    placed_ids: Set[str] = set()
    stride = -1

    for course_bricks in group_courses(work).values():
        unplaced = [
            b for b in course_bricks
            if b.id not in unsupported and is_buildable(b, placed_ids, support[b.id])
        ]  # sorted by x
        robot_x = 0.0

        while unplaced:
            window = [b for b in unplaced if b.right > robot_x and b.x < robot_x + env_w]
            if not window:
                target = clamp(unplaced[0].x, max_x)
                if target == robot_x:
                    break  # leftmost brick is out of reach from any window
                robot_x = target
                continue

            stride += 1
            for b in window:
                b.stride = stride
                order.append(b)
                placed_ids.add(b.id)

            unplaced = [b for b in unplaced if b.id not in placed_ids]
            if unplaced:
                robot_x = clamp(unplaced[0].x, max_x)

    warn_incomplete("naive", len(work), order)
    return order
