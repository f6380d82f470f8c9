"""Image step: search Pexels for photos matching the blog topic."""

from __future__ import annotations

from typing import Optional

import requests

from blog_generator import config
from blog_generator.errors import ConfigError, UpstreamError


def _to_image(photo: dict) -> dict:
    """Reduce a Pexels photo record to {url, altText}."""
    return {
        "url": photo["src"]["original"],
        "altText": photo.get("alt") or config.PEXELS_DEFAULT_ALT,
    }


def require_pexels_key(api_key: Optional[str] = None) -> str:
    """Return the Pexels key to use, or raise ConfigError when none is set."""
    api_key = api_key or config.PEXELS_API_KEY
    if not api_key:
        raise ConfigError("PIXELS_API not set. Add your Pexels API key to your .env file.")
    return api_key


def fetch_pexels_images(
    query: str,
    per_page: int = config.PEXELS_PER_PAGE,
    api_key: Optional[str] = None,
) -> list[dict]:
    """Return up to `per_page` images for `query`, in Pexels ranking order.

    Only the first results page is requested. Raises ConfigError when no key
    is configured and UpstreamError on transport failures or non-2xx replies.
    """
    api_key = require_pexels_key(api_key)

    print(f"  -> Searching Pexels for \"{query}\"...")
    try:
        resp = requests.get(
            config.PEXELS_SEARCH_URL,
            params={"query": query, "per_page": per_page},
            headers={"Authorization": api_key},
            timeout=config.PEXELS_TIMEOUT,
        )
    except requests.RequestException as e:
        raise UpstreamError(f"Pexels API request failed: {e}") from e

    if not resp.ok:
        raise UpstreamError(
            f"Pexels API error: {resp.status_code} {resp.reason}",
            status_code=resp.status_code,
        )

    try:
        photos = resp.json().get("photos") or []
        images = [_to_image(photo) for photo in photos]
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise UpstreamError(f"Pexels API returned an unexpected response: {e!r}") from e

    print(f"  OK Found {len(images)} images")
    return images
