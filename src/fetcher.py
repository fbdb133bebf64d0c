import requests

from src.constants import BROWSER_HEADERS, DEFAULT_REQUEST_TIMEOUT
from src.errors import UpstreamUnavailable
from src.models import RawDocument


class PageFetcher:
    """Fetches pages with a browser-like identity, one attempt per call."""

    def __init__(self, session: requests.Session, timeout: float = DEFAULT_REQUEST_TIMEOUT):
        self.session = session
        self.timeout = timeout

    def fetch(self, url: str) -> RawDocument:
        """
        Fetches a single page.

        Args:
            url: The URL of the page.

        Returns:
            The page body and the URL it was requested from.

        Raises:
            UpstreamUnavailable: On a network error, a timeout or a non-2xx status.
        """
        try:
            response = self.session.get(url, headers=BROWSER_HEADERS, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise UpstreamUnavailable(f"HTTP {status_code} for {url}", url=url, status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            raise UpstreamUnavailable(f"Request to {url} failed: {e}", url=url) from e

        # raise_for_status lets unfollowed 3xx responses through
        if not 200 <= response.status_code < 300:
            raise UpstreamUnavailable(
                f"HTTP {response.status_code} for {url}", url=url, status_code=response.status_code
            )

        return RawDocument(body=response.text, source_url=url)
