# bricklayer/planners/support.py
from typing import Dict, Iterable, List, Set

from ..geometry.wall_generator import group_courses
from ..utils.spec_schema import Brick

SupportMap = Dict[str, List[Brick]]


def find_supporters(brick: Brick, bricks: Iterable[Brick]) -> List[Brick]:
    """Bricks in the course directly below whose x-span overlaps ``brick``."""
    if brick.course == 0:
        return []
    return [
        s for s in bricks
        if s.course == brick.course - 1 and s.x < brick.right and s.right > brick.x
    ]


def build_support_map(bricks: List[Brick]) -> SupportMap:
    courses = group_courses(bricks)
    return {b.id: find_supporters(b, courses.get(b.course - 1, [])) for b in bricks}


def is_buildable(brick: Brick, placed_ids: Set[str], supporters: List[Brick]) -> bool:
    if brick.course == 0:
        return True
    # course > 0 with nothing underneath never becomes buildable
    if not supporters:
        return False
    return all(s.id in placed_ids for s in supporters)


def find_unsupported(bricks: List[Brick], support: SupportMap) -> List[Brick]:
    return [b for b in bricks if b.course > 0 and not support[b.id]]


def flag_unsupported(label: str, bricks: List[Brick], support: SupportMap) -> Set[str]:
    """Warn about bricks that can never be laid and return their ids."""
    unsupported = find_unsupported(bricks, support)
    if unsupported:
        ids = ", ".join(b.id for b in unsupported[:10])
        print(f"[WARN] {label}: {len(unsupported)} brick(s) have no supporting bricks and cannot be laid: {ids}")
    return {b.id for b in unsupported}
