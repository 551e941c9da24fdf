from bricklayer.planners.stride_planner import ANCHOR_LIMIT, _next_position
from bricklayer.utils.spec_schema import Brick, BrickType

ENV = (100.0, 100.0)


def _brick(i, x, y=0.0, width=10.0, height=10.0):
    return Brick(id=f"brick-0-{i}", x=x, y=y, width=width, height=height,
                 type=BrickType.HALF, course=0, index_in_course=i)


def test_first_best_placement_wins_ties():
    # every placement covers exactly one brick; the first anchor's bottom-left wins
    candidates = [_brick(0, 0.0, width=50.0), _brick(1, 500.0, width=50.0)]
    assert _next_position(candidates, ENV, (1000.0, 1000.0)) == (0.0, 0.0)


def test_centred_placement_beats_later_equal_one():
    # centring on the first brick reaches its neighbour; bottom-right ties and loses
    candidates = [_brick(0, 300.0, width=50.0), _brick(1, 230.0, width=50.0)]
    assert _next_position(candidates, ENV, (1000.0, 1000.0)) == (275.0, 0.0)


def test_only_leading_candidates_anchor_placements():
    spread = [_brick(i, 200.0 * i) for i in range(ANCHOR_LIMIT)]  # 0, 200, ..., 800
    cluster = [_brick(5, 900.0), _brick(6, 950.0)]
    # anchoring on the sixth brick would cover two bricks at (900, 0)
    assert _next_position(spread + cluster, ENV, (1000.0, 1000.0)) == (0.0, 0.0)
    assert _next_position(cluster + spread, ENV, (1000.0, 1000.0)) == (900.0, 0.0)


def test_zero_coverage_centres_on_first_candidate():
    # envelope cannot rise above y=0, so no placement reaches the brick at y=500
    candidates = [_brick(0, 300.0, y=500.0, width=50.0)]
    assert _next_position(candidates, ENV, (1000.0, 0.0)) == (275.0, 0.0)
