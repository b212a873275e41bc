from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WorkoutType(str, Enum):
    easy_run = "easy_run"
    long_run = "long_run"
    tempo = "tempo"
    intervals = "intervals"
    recovery = "recovery"
    rest = "rest"


class EffortLevel(str, Enum):
    easy = "easy"
    moderate = "moderate"
    hard = "hard"
    very_hard = "very_hard"


class DistanceUnit(str, Enum):
    mi = "mi"
    km = "km"


class CamelModel(BaseModel):
    """Request bodies arrive camelCased from the web client (planName, raceDate, ...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
