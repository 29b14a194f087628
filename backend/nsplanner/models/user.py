"""Runner input and the stored plan snapshot."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nsplanner.models.common import Distance, Unit
from nsplanner.models.plan import TrainingBlock
from nsplanner.models.race import Race
from nsplanner.models.schemas import Paces

SNAPSHOT_VERSION = 1


class UserInput(BaseModel):
    """Form input handed to the plan generator.

    Times use "mm:ss" or "h:mm:ss". At least one of them must be set
    before a plan can be generated. ``training_days`` outside 3-7 is
    clamped by the generator rather than rejected here.
    """

    model_config = ConfigDict(frozen=True)

    target_distance: Distance
    time_5k: Optional[str] = None
    time_10k: Optional[str] = None
    training_days: int = 5
    unit: Unit = "km"
    races: list[Race] = Field(default_factory=list)


class UserData(BaseModel):
    """Versioned snapshot of the current user's plan."""

    model_config = ConfigDict(frozen=True)

    version: int = SNAPSHOT_VERSION
    input: Optional[UserInput] = None
    vdot: Optional[float] = None
    paces: Optional[Paces] = None
    current_block: Optional[TrainingBlock] = None
    created_at: datetime
    updated_at: datetime
