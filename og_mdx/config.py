"""Configuration objects and constants for Open Graph fetching."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

MANDATORY_ATTRIBUTES = ("title", "type", "image", "url")
OPTIONAL_ATTRIBUTES = ("description",)

DEFAULT_TIMEOUT = 60.0
DEFAULT_USER_AGENT = "og-mdx/0.1 (+https://ogp.me)"


@dataclass
class FetchConfig:
    """Per-call settings for retrieving a page and extracting its metadata."""

    timeout: Optional[float] = None
    strict: bool = True
    proxy: Optional[str] = None
    user_agent: str = DEFAULT_USER_AGENT
