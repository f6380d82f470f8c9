"""Orchestrate the blog generation pipeline.

Strictly sequential:
1. Content generation (completion API): title, meta, sections as JSON
2. Image search (Pexels): same topic string as the query
3. Merge: photos replace the model's placeholder image URLs
4. Render: fixed HTML template
"""

from __future__ import annotations

import time
from typing import Optional

import openai

from blog_generator import config
from blog_generator.pipeline.content import create_client, fetch_blog_content
from blog_generator.pipeline.images import fetch_pexels_images, require_pexels_key
from blog_generator.render import render_blog_html


def assign_images(content: dict, images: list[dict]) -> dict:
    """Place fetched images into the content by position.

    images[0] becomes the featured image (its caption is kept) and
    images[i + 1] goes to section i. Sections past the end of the image list
    are left as generated. Mutates and returns `content`.
    """
    if images:
        featured = content.get("featuredImage") or {}
        content["featuredImage"] = featured
        featured["url"] = images[0]["url"]
        featured["altText"] = images[0]["altText"]

    for i, section in enumerate(content.get("sections") or []):
        if i + 1 < len(images):
            image = images[i + 1]
            section["image"] = {
                "url": image["url"],
                "altText": image["altText"],
                "caption": image["altText"],
            }

    return content


def generate_blog_post(
    topic: str,
    client: Optional[openai.OpenAI] = None,
    site_url: Optional[str] = None,
    escape: Optional[bool] = None,
) -> str:
    """Generate the full HTML page for a topic.

    Args:
        topic: Free-text topic, used for both the prompt and the image search.
        client: Completion client; built from config when omitted.
        site_url: Base URL for page metadata. Defaults to config.SITE_URL.
        escape: HTML-escape generated text. Defaults to config.ESCAPE_HTML.

    Returns:
        The rendered HTML document.
    """
    # Both keys are checked before the first request goes out
    client = client or create_client(site_url=site_url)
    pexels_key = require_pexels_key()

    start = time.time()
    content = fetch_blog_content(topic, client=client)
    images = fetch_pexels_images(topic, api_key=pexels_key)
    assign_images(content, images)

    if escape is None:
        escape = config.ESCAPE_HTML
    html = render_blog_html(content, site_url=site_url, escape=escape)

    print(f"  OK Rendered page ({len(html)} chars) in {time.time() - start:.1f}s")
    return html
