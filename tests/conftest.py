import pytest

from bricklayer.geometry.wall_generator import generate_wall
from bricklayer.utils.spec_schema import RobotConfig, WallConfig


@pytest.fixture
def wall_config():
    return WallConfig()


@pytest.fixture
def robot_config():
    return RobotConfig()


@pytest.fixture
def layout(wall_config):
    return generate_wall(wall_config)
