"""HTTP fetcher for pages to extract."""

from typing import NamedTuple

import httpx

from mainbody.exceptions import FetchError
from mainbody.logger import logger


class FetchedPage(NamedTuple):
    """Raw page returned by the fetcher."""

    url: str
    body: bytes


class PageFetcher:
    """HTTP client that downloads pages as raw bytes.

    Uses a persistent httpx client to reuse connections across requests.
    The body is returned undecoded; charset handling belongs to extraction.
    """

    def __init__(self, timeout: float, user_agent: str) -> None:
        """Initialize the page fetcher.

        Args:
            timeout: Request timeout in seconds.
            user_agent: User-Agent header sent with every request.

        """
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            headers={"User-Agent": user_agent},
        )

    async def fetch(self, url: str) -> FetchedPage:
        """Download a page.

        Args:
            url: Page URL.

        Returns:
            FetchedPage with the final URL after redirects and the body bytes.

        Raises:
            FetchError: If the server cannot be reached or answers with an error.

        """
        try:
            logger.debug("[FETCH STARTED] URL: %s", url)
            resp = await self._client.get(url)
            resp.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise FetchError(f"Server returned error: {e}") from e

        except httpx.RequestError as e:
            raise FetchError(f"Server did not respond: {e}") from e

        logger.debug("Fetched %d bytes from %s", len(resp.content), resp.url)
        return FetchedPage(url=str(resp.url), body=resp.content)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        logger.debug("Closing page fetcher")
        await self._client.aclose()
