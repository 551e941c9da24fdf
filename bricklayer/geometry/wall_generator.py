# bricklayer/geometry/wall_generator.py
import math
from collections import defaultdict
from typing import Dict, List, Optional, Set

from ..utils.spec_schema import Brick, BrickType, WallConfig

EPS = 1e-6  # mm tolerance for length comparisons


def _make_brick(config: WallConfig, course: int, index: int, x: float,
                width: float, brick_type: BrickType) -> Brick:
    return Brick(
        id=f"brick-{course}-{index}",
        x=x,
        y=course * config.course_height,
        width=width,
        height=config.brick_height,
        type=brick_type,
        course=course,
        index_in_course=index,
    )


def _merge_trailing_half(bricks: List[Brick], config: WallConfig) -> bool:
    """Swap a trailing half brick for a full one when a full brick still fits
    after the preceding brick plus one head joint."""
    if len(bricks) < 2:
        return False
    last, previous = bricks[-1], bricks[-2]
    if last.type != BrickType.HALF:
        return False
    x = previous.right + config.head_joint
    if x + config.full_brick_length > config.width + EPS:
        return False
    bricks[-1] = _make_brick(config, last.course, last.index_in_course, x,
                             config.full_brick_length, BrickType.FULL)
    return True


def _is_trimmed(b: Brick, config: WallConfig) -> bool:
    return b.type == BrickType.HALF and abs(b.width - config.half_brick_length) > EPS


def _internal_joints(bricks: List[Brick]) -> Set[float]:
    return {round(b.right, 6) for b in bricks[:-1]}


def _stagger_closer(bricks: List[Brick], neighbours: List[List[Brick]], config: WallConfig) -> bool:
    """Lay a trimmed closer before the brick preceding it when the joint in
    front of the closer lines up with a joint in a neighbouring course."""
    if len(bricks) < 3:
        return False  # leading brick keeps the bond offset
    closer, previous = bricks[-1], bricks[-2]
    if not _is_trimmed(closer, config):
        return False
    joints: Set[float] = set()
    for course in neighbours:
        joints |= _internal_joints(course)
    if round(previous.right, 6) not in joints:
        return False
    moved_joint = previous.x + closer.width
    if round(moved_joint, 6) in joints:
        return False
    bricks[-2] = _make_brick(config, closer.course, previous.index_in_course, previous.x,
                             closer.width, closer.type)
    bricks[-1] = _make_brick(config, closer.course, closer.index_in_course,
                             moved_joint + config.head_joint, previous.width, previous.type)
    return True


def _lay_course(config: WallConfig, course: int) -> List[Brick]:
    bricks: List[Brick] = []
    odd = course % 2 == 1
    x = 0.0

    while x < config.width - EPS:
        remaining = config.width - x
        if odd and not bricks:
            width, brick_type = config.half_brick_length, BrickType.HALF  # running-bond offset
        else:
            width, brick_type = config.full_brick_length, BrickType.FULL

        if width > remaining + EPS:
            width, brick_type = config.half_brick_length, BrickType.HALF
        if width > remaining + EPS:
            if not bricks:
                break  # not even a half brick fits: empty course
            if remaining < config.min_closure_ratio * config.half_brick_length - EPS:
                break  # no slivers
            width = remaining  # trimmed closer, flush with the wall edge

        bricks.append(_make_brick(config, course, len(bricks), x, width, brick_type))
        x += width
        if x < config.width - EPS:
            x += config.head_joint

    if odd:
        _merge_trailing_half(bricks, config)
    return bricks


def generate_wall(config: Optional[WallConfig] = None) -> List[Brick]:
    """Running-bond layout, bottom course first, left to right within a course.

    The top course may poke out above ``config.height``; it is kept as is.
    Trimmed closers in even courses are shifted one brick left where their
    joint would line up with the odd courses around them.
    """
    config = config or WallConfig()
    if config.width <= 0 or config.height <= 0:
        return []

    n_courses = math.ceil(config.height / config.course_height - EPS)
    courses = [_lay_course(config, course) for course in range(n_courses)]
    for course in range(0, n_courses, 2):
        neighbours = [courses[i] for i in (course - 1, course + 1) if 0 <= i < n_courses]
        _stagger_closer(courses[course], neighbours, config)

    bricks: List[Brick] = []
    for course_bricks in courses:
        bricks.extend(course_bricks)
    return bricks


def group_courses(bricks: List[Brick]) -> Dict[int, List[Brick]]:
    by_course: Dict[int, List[Brick]] = defaultdict(list)
    for b in bricks:
        by_course[b.course].append(b)
    for course in by_course:
        by_course[course].sort(key=lambda b: b.x)
    return dict(sorted(by_course.items()))
