"""Fixed endpoint and lookup tables for the wttr.in weather report."""

from types import MappingProxyType
from typing import Final

WTTR_URL: Final[str] = "https://wttr.in/?format=j1"

# wttr.in / WWO weather codes
WEATHER_CODES: Final = MappingProxyType({
    "113": "☀️",
    "116": "⛅️",
    "119": "☁️",
    "122": "☁️",
    "143": "🌫",
    "176": "🌦",
    "179": "🌧",
    "182": "🌧",
    "185": "🌧",
    "200": "⛈",
    "227": "🌨",
    "230": "❄️",
    "248": "🌫",
    "260": "🌫",
    "263": "🌦",
    "266": "🌦",
    "281": "🌧",
    "284": "🌧",
    "293": "🌦",
    "296": "🌦",
    "299": "🌧",
    "302": "🌧",
    "305": "🌧",
    "308": "🌧",
    "311": "🌧",
    "314": "🌧",
    "317": "🌧",
    "320": "🌨",
    "323": "🌨",
    "326": "🌨",
    "329": "❄️",
    "332": "❄️",
    "335": "❄️",
    "338": "❄️",
    "350": "🌧",
    "353": "🌦",
    "356": "🌧",
    "359": "🌧",
    "362": "🌧",
    "365": "🌧",
    "368": "🌨",
    "371": "❄️",
    "374": "🌧",
    "377": "🌧",
    "386": "⛈",
    "389": "🌩",
    "392": "⛈",
    "395": "❄️",
})

# Display names, in the order the hourly chance fields are summarized
CHANCE_NAMES: Final[tuple[str, ...]] = (
    "Fog", "Frost", "Overcast", "Rain", "Snow", "Sunshine", "Thunder", "Wind",
)

DEFAULT_LOOKBACK_HOURS: Final[int] = 2
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
