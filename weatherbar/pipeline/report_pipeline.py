"""Report pipeline: fetch -> decode -> format -> serialize."""

import logging
from collections.abc import Callable
from datetime import datetime

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from weatherbar.config.schema import WeatherbarConfig
from weatherbar.errors import DecodeError, EncodeError
from weatherbar.ingest.wttr_client import WttrClient
from weatherbar.models.widget import WidgetOutput
from weatherbar.models.wttr import WttrReport
from weatherbar.reporting.tooltip import build_output

logger = logging.getLogger(__name__)


def decode_report(body: bytes | str) -> WttrReport:
    """Validate a j1 response body. Raises DecodeError on any mismatch."""
    try:
        return WttrReport.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(str(e)) from e


def encode_output(output: WidgetOutput) -> str:
    """Compact single-line JSON for the status bar."""
    try:
        return output.model_dump_json()
    except PydanticSerializationError as e:
        raise EncodeError(str(e)) from e


class ReportPipeline:
    def __init__(
        self,
        config: WeatherbarConfig,
        client: WttrClient | None = None,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.config = config
        self.client = client or WttrClient(
            url=config.source.url, timeout=config.source.timeout_seconds
        )
        self.now = now

    def build(self) -> WidgetOutput:
        """Fetch and format one report. Raises WeatherbarError subclasses."""
        body = self.client.get_report()
        report = decode_report(body)
        logger.debug(
            "Decoded report with %d forecast days", len(report.weather)
        )
        return build_output(
            report,
            current_hour=self.now().hour,
            lookback_hours=self.config.display.lookback_hours,
        )

    def run(self) -> str:
        return encode_output(self.build())
