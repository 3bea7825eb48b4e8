"""Retrieve pages over HTTP and hand them to the extractor."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from .config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FetchConfig
from .content import extract
from .errors import FetchTimeoutError

logger = logging.getLogger("og_mdx")


def _proxies(proxy: Optional[str]) -> Optional[Dict[str, str]]:
    if not proxy:
        return None
    return {"http": proxy, "https": proxy}


def _declared_charset(resp: requests.Response) -> Optional[str]:
    """Charset named in the Content-Type header, ignoring requests' text/* default."""
    content_type = resp.headers.get("Content-Type", "")
    if "charset=" not in content_type.lower():
        return None
    return resp.encoding


def fetch(
    uri: str,
    timeout: Optional[float] = None,
    strict: bool = True,
    proxy: Optional[str] = None,
    session: Optional[requests.Session] = None,
    user_agent: str = DEFAULT_USER_AGENT,
):
    """Fetch ``uri`` and extract its Open Graph data.

    Returns the extracted object or ``False``. Network failures are logged
    and reported as ``False``; the only exception raised is
    :class:`FetchTimeoutError`, and only when ``timeout`` was given explicitly.
    The proxy applies to this request alone.
    """
    effective_timeout = DEFAULT_TIMEOUT if timeout is None else timeout
    owns_session = session is None
    if owns_session:
        session = requests.Session()
    try:
        logger.info("Fetching %s", uri)
        resp = session.get(
            uri,
            timeout=(effective_timeout, effective_timeout),
            proxies=_proxies(proxy),
            headers={"User-Agent": user_agent},
        )
        resp.raise_for_status()
        body = resp.content
        encoding = _declared_charset(resp)
    except requests.Timeout as exc:
        if timeout is not None:
            raise FetchTimeoutError(uri, timeout) from exc
        logger.warning("Timed out fetching %s: %s", uri, exc)
        return False
    except requests.RequestException as exc:
        logger.warning("Failed to fetch %s: %s", uri, exc)
        return False
    finally:
        if owns_session:
            session.close()

    return extract(body, strict, encoding)


def fetch_with_config(uri: str, config: FetchConfig):
    """Same as :func:`fetch`, driven by a :class:`FetchConfig`."""
    return fetch(
        uri,
        timeout=config.timeout,
        strict=config.strict,
        proxy=config.proxy,
        user_agent=config.user_agent,
    )
