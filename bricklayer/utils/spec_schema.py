from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, computed_field


class BrickType(str, Enum):
    FULL = "full"
    HALF = "half"


class BrickStatus(str, Enum):
    PLANNED = "planned"
    BUILT = "built"


class Strategy(str, Enum):
    NAIVE = "naive"
    OPTIMIZED = "optimized"


# metrics in mm
class WallConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=2300.0, ge=0)
    height: float = Field(default=2000.0, ge=0)
    full_brick_length: float = Field(default=210.0, gt=0)
    half_brick_length: float = Field(default=100.0, gt=0)
    brick_height: float = Field(default=50.0, gt=0)
    head_joint: float = Field(default=10.0, ge=0)
    bed_joint: float = Field(default=12.5, ge=0)
    # trimmed closing brick must be at least this fraction of a half brick
    min_closure_ratio: float = Field(default=0.5, ge=0, le=1)

    @computed_field
    @property
    def course_height(self) -> float:
        return self.brick_height + self.bed_joint


class RobotConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    envelope_width: float = Field(default=800.0, gt=0)
    envelope_height: float = Field(default=1300.0, gt=0)


class Brick(BaseModel):
    id: str
    x: float
    y: float
    width: float
    height: float
    type: BrickType
    course: int = Field(ge=0)
    index_in_course: int = Field(ge=0)
    status: BrickStatus = BrickStatus.PLANNED
    stride: int = -1

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y + self.height


class PlanReport(BaseModel):
    strategy: Strategy
    total_bricks: int
    placed: int
    unplaced_ids: List[str] = Field(default_factory=list)
    stride_count: int = 0
    bricks_per_stride: Dict[int, int] = Field(default_factory=dict)
    bricks_per_type: Dict[str, int] = Field(default_factory=dict)

    @computed_field
    @property
    def complete(self) -> bool:
        return not self.unplaced_ids
