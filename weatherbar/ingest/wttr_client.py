"""wttr.in API client: one blocking GET, no retries."""

import logging

import httpx

from weatherbar.config.defaults import DEFAULT_TIMEOUT_SECONDS, WTTR_URL
from weatherbar.errors import FetchError

logger = logging.getLogger(__name__)


class WttrClient:
    def __init__(
        self,
        url: str = WTTR_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.url = url
        self.timeout = timeout

    def get_report(self) -> bytes:
        """Fetch the raw j1 report body.

        Decoding is left to the caller so transport and payload failures stay
        distinct. Any transport error or non-2xx status raises FetchError.
        """
        logger.debug("GET %s", self.url)
        try:
            resp = httpx.get(self.url, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "wttr.in returned %d for %s", e.response.status_code, self.url
            )
            raise FetchError(str(e), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", self.url, e)
            raise FetchError(str(e)) from e

        logger.debug("Received %d bytes", len(resp.content))
        return resp.content
