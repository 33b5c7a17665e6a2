"""Widget output record and the hourly chance value type."""

from dataclasses import astuple, dataclass

from pydantic import BaseModel


@dataclass(frozen=True)
class HourlyChances:
    """Percent chance of each condition for one hour, as reported (strings)."""

    fog: str = ""
    frost: str = ""
    overcast: str = ""
    rain: str = ""
    snow: str = ""
    sunshine: str = ""
    thunder: str = ""
    wind: str = ""

    def values(self) -> tuple[str, ...]:
        # Field order matches CHANCE_NAMES
        return astuple(self)


class WidgetOutput(BaseModel):
    """What the status bar reads: short bar text plus hover tooltip."""

    text: str
    tooltip: str
