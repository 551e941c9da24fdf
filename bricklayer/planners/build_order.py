# bricklayer/planners/build_order.py
from typing import List, Optional

from ..utils.spec_schema import Brick, RobotConfig, Strategy, WallConfig
from .naive_planner import plan_naive
from .stride_planner import plan_optimized


def plan(
    strategy: Strategy,
    bricks: List[Brick],
    robot_config: RobotConfig,
    wall_config: Optional[WallConfig] = None,
) -> List[Brick]:
    """
    Order ``bricks`` for laying with the chosen strategy.
    The result holds copies annotated with strides; ``bricks`` is left untouched.
    A result shorter than ``bricks`` means the plan is incomplete.
    """
    strategy = Strategy(strategy)
    if strategy is Strategy.NAIVE:
        return plan_naive(bricks, robot_config, wall_config)
    if strategy is Strategy.OPTIMIZED:
        return plan_optimized(bricks, robot_config, wall_config)
    raise ValueError(f"unhandled strategy: {strategy!r}")
