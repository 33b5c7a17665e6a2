"""CLI entry point for the status-bar weather widget."""

import argparse
import logging
import sys

from weatherbar.config.loader import load_config
from weatherbar.errors import WeatherbarError
from weatherbar.pipeline.report_pipeline import ReportPipeline

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherbar",
        description="Print the current wttr.in weather as status-bar JSON",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (optional)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging to stderr"
    )
    args = parser.parse_args(argv)

    # stdout carries the widget JSON only
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = load_config(args.config)
        line = ReportPipeline(config).run()
    except WeatherbarError as e:
        logger.debug("Run aborted", exc_info=True)
        print(e.diagnostic, file=sys.stderr)
        return 1

    print(line)
    return 0


def entrypoint() -> None:
    sys.exit(main())
