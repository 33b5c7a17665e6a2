"""Pydantic models for the wttr.in ``format=j1`` payload.

Only the fields the widget renders are modelled; everything else in the
response is ignored. Scalars are strings in this API and default to "" when
absent or null. Lists that are read by index must be non-empty.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from weatherbar.models.widget import HourlyChances


class WttrModel(BaseModel):
    """Base for payload records: unknown keys ignored, nulls read as absent."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class WeatherDesc(WttrModel):
    value: str = ""


class CurrentCondition(WttrModel):
    weather_code: str = Field(default="", alias="weatherCode")
    feels_like_c: str = Field(default="", alias="FeelsLikeC")
    temp_c: str = Field(default="", alias="temp_C")
    windspeed_miles: str = Field(default="", alias="windspeedMiles")
    humidity: str = ""
    weather_desc: list[WeatherDesc] = Field(alias="weatherDesc", min_length=1)

    @property
    def description(self) -> str:
        return self.weather_desc[0].value


class Astronomy(WttrModel):
    sunrise: str = ""
    sunset: str = ""


class HourlyForecast(WttrModel):
    time: str = ""
    weather_code: str = Field(default="", alias="weatherCode")
    feels_like_c: str = Field(default="", alias="FeelsLikeC")
    chance_of_fog: str = Field(default="", alias="chanceoffog")
    chance_of_frost: str = Field(default="", alias="chanceoffrost")
    chance_of_overcast: str = Field(default="", alias="chanceofovercast")
    chance_of_rain: str = Field(default="", alias="chanceofrain")
    chance_of_snow: str = Field(default="", alias="chanceofsnow")
    chance_of_sunshine: str = Field(default="", alias="chanceofsunshine")
    chance_of_thunder: str = Field(default="", alias="chanceofthunder")
    chance_of_windy: str = Field(default="", alias="chanceofwindy")
    weather_desc: list[WeatherDesc] = Field(alias="weatherDesc", min_length=1)

    @property
    def description(self) -> str:
        return self.weather_desc[0].value

    @property
    def chances(self) -> HourlyChances:
        return HourlyChances(
            fog=self.chance_of_fog,
            frost=self.chance_of_frost,
            overcast=self.chance_of_overcast,
            rain=self.chance_of_rain,
            snow=self.chance_of_snow,
            sunshine=self.chance_of_sunshine,
            thunder=self.chance_of_thunder,
            wind=self.chance_of_windy,
        )


class ForecastDay(WttrModel):
    date: str = ""
    maxtemp_c: str = Field(default="", alias="maxtempC")
    mintemp_c: str = Field(default="", alias="mintempC")
    astronomy: list[Astronomy] = Field(min_length=1)
    hourly: list[HourlyForecast] = []

    @property
    def sunrise(self) -> str:
        return self.astronomy[0].sunrise

    @property
    def sunset(self) -> str:
        return self.astronomy[0].sunset


class WttrReport(WttrModel):
    """Top-level j1 response: current conditions plus the daily forecast."""

    current_condition: list[CurrentCondition] = Field(min_length=1)
    weather: list[ForecastDay] = []

    @property
    def current(self) -> CurrentCondition:
        return self.current_condition[0]
