"""MCP server exposing main content extraction as tools."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from mainbody.config import settings
from mainbody.exceptions import MainbodyError
from mainbody.fetcher import PageFetcher
from mainbody.logger import logger, setup_logging
from mainbody.parser.extractor import Extractor

# Initialize logging as soon as possible
setup_logging()


class TypedFastMCP(FastMCP):
    """Typed FastMCP subclass with server state attribute.

    This allows proper type checking for the state attribute
    instead of using type: ignore comments.
    """

    state: "ServerState | None"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize TypedFastMCP with state set to None."""
        super().__init__(*args, **kwargs)
        self.state = None


class ServerState:
    """Encapsulates the server dependencies and state.

    Provides a clean way to manage client lifecycles and provides them
    as dependencies to tools.
    """

    def __init__(self) -> None:
        """Initialize the server state."""
        self.fetcher = PageFetcher(
            timeout=settings.fetch_timeout,
            user_agent=settings.fetch_user_agent,
        )
        self.extractor = Extractor(settings)

    async def stop(self) -> None:
        """Cleanup logic for client resources."""
        logger.info("Stopping mainbody server resources...")
        await self.fetcher.close()

    async def extract_page(self, url: str) -> dict[str, str]:
        """Fetch a page and extract it, resolving images against its final URL.

        Args:
            url: Page URL.

        Returns:
            Dictionary with the final URL, title and content.

        """
        page = await self.fetcher.fetch(url)
        # Extraction is CPU bound, keep it off the event loop
        result = await asyncio.to_thread(self.extractor.extract, page.body, page.url)
        return {"url": page.url, "title": result.title, "content": result.content}

    async def extract_html(self, html: str, base_url: str | None) -> dict[str, str]:
        """Extract a raw HTML document.

        Args:
            html: HTML document.
            base_url: URL to resolve image sources against, if any.

        Returns:
            Dictionary with the base URL, title and content.

        """
        result = await asyncio.to_thread(self.extractor.extract, html, base_url)
        return {"base_url": base_url or "", "title": result.title, "content": result.content}


@asynccontextmanager
async def lifespan(app: TypedFastMCP) -> AsyncIterator[dict[str, Any]]:
    """Manage application lifespan: initialize and cleanup HTTP clients."""
    state = ServerState()
    app.state = state
    logger.info("Mainbody server resources ready")

    try:
        yield {"state": state}
    finally:
        await state.stop()
        app.state = None


# Helper functions
def log_tool_call(tool_name: str, details: str) -> None:
    """Log a tool call.

    Args:
        tool_name: Name of the tool being called
        details: Details about the tool call (e.g., URL)

    """
    logger.info("[TOOL CALLED] %s: %s", tool_name, details)


def get_state() -> ServerState:
    """Get the server state from the app."""
    if mcp.state is None:
        raise RuntimeError("Server state not initialized")
    return mcp.state


mcp = TypedFastMCP("mainbody", lifespan=lifespan)


async def extract_page(
    url: Annotated[str, settings.arg_extract_page_url_desc],
) -> dict[str, str]:
    """Fetch a page and return its title and main content."""
    log_tool_call("extract_page", f"URL: {url}")
    state = get_state()
    try:
        result = await state.extract_page(url)
    except MainbodyError as e:
        raise ToolError(f"{type(e).__name__}: {e}") from e
    return result


async def extract_html(
    html: Annotated[str, settings.arg_extract_html_html_desc],
    base_url: Annotated[str, settings.arg_extract_html_base_url_desc] = "",
) -> dict[str, str]:
    """Return the title and main content of raw HTML."""
    log_tool_call("extract_html", f"{len(html)} characters, base: {base_url or '-'}")
    state = get_state()
    try:
        result = await state.extract_html(html, base_url or None)
    except MainbodyError as e:
        raise ToolError(f"{type(e).__name__}: {e}") from e
    return result


mcp.tool(extract_page, name="extract_page", description=settings.tool_extract_page_desc)
mcp.tool(extract_html, name="extract_html", description=settings.tool_extract_html_desc)


def main() -> None:
    """Run the MCP server."""
    mcp.run(transport="streamable-http", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
