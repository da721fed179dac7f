import cloudscraper
import requests
from bs4 import BeautifulSoup
from cloudscraper.exceptions import CloudflareException
from typing import Optional

from novel_epub.config import REQUEST_TIMEOUT
from novel_epub.errors import HttpStatus, SourceBlocked
from novel_epub.utils.logging_utils import get_logger

logger = get_logger(__name__)


class NovelScraper:
    """
    Blocking HTTP access to the source site.

    A request succeeds only on status 200, anything else raises HttpStatus.
    Cloudflare refusals raise SourceBlocked.
    Transport errors (connection refused, timeouts, ...) are left as the
    requests exceptions they are. There are no retries.
    """

    def __init__(self, timeout: Optional[float] = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        """
        Args:
            timeout (float, optional): Request timeout in seconds, None for no timeout
            session (requests.Session, optional): Session to use instead of a fresh cloudscraper one
        """
        self.timeout = timeout
        self.scraper = session if session is not None else self._setup_scraper()

    def _setup_scraper(self) -> requests.Session:
        """
        Set up cloudscraper so the Cloudflare front of the site lets us through.

        Returns:
            cloudscraper.CloudScraper: Configured scraper instance
        """
        scraper = cloudscraper.create_scraper(
            browser={
                'browser': 'chrome',
                'platform': 'linux',
                'mobile': False
            },
            debug=False
        )

        scraper.headers.update({
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.9',
            'DNT': '1',
            'Connection': 'keep-alive',
            'Upgrade-Insecure-Requests': '1',
        })
        return scraper

    def _get(self, url: str) -> requests.Response:
        try:
            response = self.scraper.get(url, timeout=self.timeout)
        except CloudflareException as e:
            # cloudscraper errors do not derive from RequestException
            raise SourceBlocked(url, f"{type(e).__name__}: {e}") from e
        logger.info(f"Request url({response.status_code}): '{url}'")
        if response.status_code != 200:
            raise HttpStatus(response.status_code, url)
        return response

    def fetch_url(self, url: str) -> str:
        """Fetch a document and return its decoded text."""
        return self._get(url).text

    def fetch_page(self, url: str) -> BeautifulSoup:
        """Fetch a document and parse it."""
        return BeautifulSoup(self.fetch_url(url), 'html.parser')

    def fetch_data(self, url: str) -> bytes:
        """Fetch raw bytes, used for images."""
        return self._get(url).content

    def close(self):
        self.scraper.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
