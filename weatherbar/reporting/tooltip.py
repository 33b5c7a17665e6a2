"""Builds the bar text and Pango-markup tooltip from a decoded report."""

import logging

from weatherbar.config.defaults import DEFAULT_LOOKBACK_HOURS
from weatherbar.models.widget import WidgetOutput
from weatherbar.models.wttr import ForecastDay, HourlyForecast, WttrReport
from weatherbar.reporting.formatters import (
    format_chances,
    format_temp,
    format_time,
    parse_int,
    weather_icon,
)

logger = logging.getLogger(__name__)

DAY_PREFIXES = ("Today, ", "Tomorrow, ")


def format_text(report: WttrReport) -> str:
    current = report.current
    return f"{weather_icon(current.weather_code)} {current.feels_like_c}°C"


def format_current(report: WttrReport) -> str:
    current = report.current
    lines = [
        f"<b>{current.description} {current.temp_c}°C</b>",
        f"Feels like: {current.feels_like_c}°C",
        f"Wind: {current.windspeed_miles}mi/h",
        f"Humidity: {current.humidity}%",
    ]
    return "".join(line + "\n" for line in lines)


def format_hour(hour: HourlyForecast) -> str:
    return (
        f"{format_time(hour.time)} {weather_icon(hour.weather_code)} "
        f"{format_temp(hour.feels_like_c)} {hour.description}, "
        f"{format_chances(hour.chances)}\n"
    )


def format_day(
    index: int, day: ForecastDay, min_hour: int | None = None
) -> str:
    """Render one forecast day.

    When min_hour is set, hours whose formatted time is below it are left
    out. Hours with a non-numeric time are always kept.
    """
    prefix = DAY_PREFIXES[index] if index < len(DAY_PREFIXES) else ""
    parts = [
        f"\n<b>{prefix}{day.date}</b>\n",
        f"⬆️ {day.maxtemp_c}° ⬇️ {day.mintemp_c}° ",
        f"🌅 {day.sunrise} 🌇 {day.sunset}\n",
    ]
    skipped = 0
    for hour in day.hourly:
        if min_hour is not None and _is_before(hour, min_hour):
            skipped += 1
            continue
        parts.append(format_hour(hour))
    if skipped:
        logger.debug("Skipped %d past hours on %s", skipped, day.date)
    return "".join(parts)


def build_output(
    report: WttrReport,
    current_hour: int,
    lookback_hours: int = DEFAULT_LOOKBACK_HOURS,
) -> WidgetOutput:
    """Build the widget record; today hides hours older than the look-back window."""
    tooltip = format_current(report)
    for i, day in enumerate(report.weather):
        min_hour = current_hour - lookback_hours if i == 0 else None
        tooltip += format_day(i, day, min_hour)
    return WidgetOutput(text=format_text(report), tooltip=tooltip)


def _is_before(hour: HourlyForecast, min_hour: int) -> bool:
    hour_value = parse_int(format_time(hour.time))
    return hour_value is not None and hour_value < min_hour
