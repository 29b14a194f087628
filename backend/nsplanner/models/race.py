"""Race model for target and tune-up events."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from nsplanner.models.common import Distance, RaceType


class Race(BaseModel):
    """A race the runner has on the calendar.

    Type A races are priorities and get a week-long taper, type B races
    are tune-ups with a short taper.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    race_date: date
    type: RaceType
    distance: Distance

    @property
    def is_priority(self) -> bool:
        return self.type == RaceType.A
