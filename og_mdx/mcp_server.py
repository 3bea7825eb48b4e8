"""MCP server exposing Open Graph lookups as a tool."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from .cli import summarize
from .fetcher import fetch

logger = logging.getLogger("og_mdx.mcp")
logger.setLevel(logging.ERROR)

mcp = FastMCP(name="og-mdx")


@mcp.tool()
async def opengraph(
    url: str,
    strict: bool = True,
    timeout: Optional[float] = None,
) -> Dict[str, Any]:
    """Fetch a web page and return its Open Graph metadata and schema."""
    result = await asyncio.to_thread(fetch, url, timeout, strict)
    return summarize(url, result)


def main() -> None:
    """Entry point for running the MCP server."""
    logging.basicConfig(level=logging.ERROR)
    mcp.run()


if __name__ == "__main__":
    main()
