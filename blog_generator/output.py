"""Slugs and writing generated pages to disk."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from blog_generator import config

TITLE_SLUG_MAX_LENGTH = 60


def topic_slug(topic: str) -> str:
    """File-name slug for a topic.

    Example: 'Benefits of Outdoor Games' -> 'benefits-of-outdoor-games'
    """
    return re.sub(r"\s+", "-", topic.strip().lower())


def title_slug(title: str) -> str:
    """URL slug for a post title: word characters and hyphens only, max 60 chars.

    Example: '10 Essential Tips: Remote Work!' -> '10-essential-tips-remote-work'
    """
    slug = title.lower()
    slug = re.sub(r"[^\w\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug[:TITLE_SLUG_MAX_LENGTH]


def blog_output_path(topic: str, output_dir: Optional[Path] = None) -> Path:
    """Where the page for `topic` is written, e.g. blogs/popular/blog-<slug>.html."""
    output_dir = Path(output_dir) if output_dir else config.BLOG_OUTPUT_DIR
    return output_dir / f"{config.BLOG_FILE_PREFIX}{topic_slug(topic)}.html"


def save_blog_post(html: str, path: Path) -> Path:
    """Write the page, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    return path
