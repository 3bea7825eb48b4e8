"""HTML parsing and Open Graph attribute extraction."""

from __future__ import annotations

import logging
import re
from typing import Dict, Optional, Union

from bs4 import BeautifulSoup
from bs4.exceptions import ParserRejectedMarkup

from .config import MANDATORY_ATTRIBUTES, OPTIONAL_ATTRIBUTES
from .models import OpenGraphObject, has_mandatory_attributes

logger = logging.getLogger("og_mdx")

OG_PROPERTY_PATTERN = re.compile(r"^og:(.+)$", re.IGNORECASE)
FALLBACK_NAMES = frozenset(MANDATORY_ATTRIBUTES + OPTIONAL_ATTRIBUTES)
PARSER_FEATURES = ("html.parser", "lxml")


def _parse(html: Union[str, bytes], encoding: Optional[str] = None) -> BeautifulSoup:
    """Parse markup, retrying with lxml when html.parser rejects it."""
    kwargs = {}
    if encoding and isinstance(html, bytes):
        kwargs["from_encoding"] = encoding
    for features in PARSER_FEATURES:
        try:
            # Keep ``rel`` and friends as raw strings instead of token lists.
            return BeautifulSoup(
                html, features, multi_valued_attributes=None, **kwargs
            )
        except ParserRejectedMarkup as exc:
            logger.warning("%s rejected markup: %s", features, exc)
    return BeautifulSoup("", "html.parser")


def _collect_og_properties(soup: BeautifulSoup, attributes: Dict[str, str]) -> None:
    for meta in soup.find_all("meta"):
        prop = meta.get("property")
        if prop is None:
            continue
        match = OG_PROPERTY_PATTERN.match(prop)
        if match:
            key = match.group(1).replace("-", "_")
            attributes[key] = meta.get("content", "")


def _collect_fallbacks(soup: BeautifulSoup, attributes: Dict[str, str]) -> None:
    """Fill gaps from plain ``<meta name=...>`` tags and the canonical link."""
    for meta in soup.find_all("meta"):
        name = meta.get("name")
        if name in FALLBACK_NAMES:
            attributes[name] = meta.get("content", "")
    for link in soup.find_all("link"):
        if link.get("rel") == "canonical":
            attributes["url"] = link.get("href", "")


def extract(
    html: Union[str, bytes], strict: bool = True, encoding: Optional[str] = None
):
    """Extract Open Graph data from an HTML document.

    Returns an :class:`OpenGraphObject`, or ``False`` when the page carries no
    usable data. With ``strict`` disabled, pages missing mandatory ``og:``
    tags are completed from ``<meta name>`` tags and ``<link rel="canonical">``,
    and the object is returned even if it is still incomplete. ``encoding``
    overrides charset detection for byte input.
    """
    soup = _parse(html, encoding)
    attributes: Dict[str, str] = {}
    _collect_og_properties(soup, attributes)

    if not strict and not has_mandatory_attributes(attributes):
        logger.debug("Open Graph data incomplete, scanning fallback tags")
        _collect_fallbacks(soup, attributes)

    if not attributes:
        logger.debug("No Open Graph data found")
        return False
    if strict and not has_mandatory_attributes(attributes):
        logger.debug(
            "Rejecting Open Graph data missing mandatory attributes: %s",
            ", ".join(a for a in MANDATORY_ATTRIBUTES if a not in attributes),
        )
        return False

    logger.debug("Extracted %d Open Graph attributes", len(attributes))
    return OpenGraphObject(attributes)
