"""Render blog content into the fixed page template.

Text fields are interpolated as-is unless `escape=True`. The model output is
trusted by default, so markup inside generated text reaches the page.
"""

from __future__ import annotations

import html
from datetime import datetime
from functools import partial

from blog_generator import config
from blog_generator.output import title_slug
from blog_generator.render.styles import FAVICON_URL, FONT_AWESOME_URL, PAGE_CSS


def format_post_date(date: str) -> str:
    """'2025-03-07' -> 'March 7, 2025'. Unparseable dates are returned as given."""
    try:
        parsed = datetime.strptime(str(date).strip(), "%Y-%m-%d")
    except ValueError:
        return str(date)
    return f"{parsed:%B} {parsed.day}, {parsed.year}"


def _text(value, escape: bool) -> str:
    if value is None:
        return ""
    return html.escape(str(value)) if escape else str(value)


# ── Fragments ─────────────────────────────────────────────────────────────


def _render_section(section: dict, escape: bool) -> str:
    t = partial(_text, escape=escape)

    parts = [
        f"""
                            <h2>{t(section.get("title"))}</h2>
                            <p>{t(section.get("content"))}</p>"""
    ]

    list_items = section.get("listItems") or []
    if list_items:
        items = "".join(f"<li>{t(item)}</li>" for item in list_items)
        parts.append(f"""
                                <ul>
                                    {items}
                                </ul>""")

    image = section.get("image")
    if image:
        parts.append(f"""
                              <img src="{t(image.get("url"))}" alt="{t(image.get("altText"))}" class="featured-image">
                              <p class="image-caption">{t(image.get("caption"))}</p>""")

    return "".join(parts) + "\n"


def _render_tags(tags: list, escape: bool) -> str:
    return "".join(f'<span class="tag">{_text(tag, escape)}</span>' for tag in tags)


def _render_related_posts(related_posts: list, escape: bool) -> str:
    if not related_posts:
        return ""
    links = "".join(
        f"""
                    <div class="related-post"><a href="{_text(post.get("url"), escape)}">{_text(post.get("title"), escape)}</a></div>"""
        for post in related_posts
        if isinstance(post, dict)
    )
    return f"""
                    <h3 class="sidebar-title">Related Posts</h3>{links}
"""


# ── Page ──────────────────────────────────────────────────────────────────


def render_blog_html(content: dict, site_url: str | None = None, escape: bool = False) -> str:
    """Return the complete HTML document for a blog post."""
    site_url = (site_url or config.SITE_URL).rstrip("/")
    t = partial(_text, escape=escape)

    featured = content.get("featuredImage") or {}
    keywords = ", ".join(str(k) for k in content.get("keywords") or [])
    tags = content.get("tags") or []
    sections = "".join(_render_section(s, escape) for s in content.get("sections") or [])
    page_url = f"{site_url}/blogs/{title_slug(str(content.get('title', '')))}.html"

    return f"""<!DOCTYPE html>
<html lang="en">

<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <meta name="description" content="{t(content.get("description"))}">
    <meta name="keywords" content="{t(keywords)}">
    <meta name="author" content="{t(content.get("author"))}">
    <meta property="og:title" content="{t(content.get("title"))}">
    <meta property="og:description" content="{t(content.get("description"))}">
    <meta property="og:type" content="article">
    <meta property="og:url" content="{t(page_url)}">
    <meta property="og:image" content="{t(featured.get("url"))}">

    <title>{t(content.get("title"))} | {config.SITE_NAME}</title>
    <link rel="icon" href="{FAVICON_URL}" type="image/x-icon">
    <link rel="stylesheet" href="{FONT_AWESOME_URL}">
</head>

<style>{PAGE_CSS}</style>

<body>
    <div class="pageWrap">
        <div class="container">
            <nav class="breadcrumb" aria-label="Breadcrumb">
                <a href="/blogs/"><i class="fa-solid fa-house"></i> Home</a> &raquo; <a href="../feature/Index.html">Blog</a> &raquo; {t(content.get("title"))}
            </nav>

            <div class="sidebar-container">
                <main class="content" itemscope itemtype="https://schema.org/Article">
                    <header class="article-header">
                        <h1 class="article-title" itemprop="headline">{t(content.get("title"))}</h1>
                        <div class="article-meta">
                            <span itemprop="author">By {t(content.get("author"))}</span>
                            <span itemprop="datePublished" content="{t(content.get("date"))}">{t(format_post_date(content.get("date") or ""))}</span>
                            <span>{t(content.get("readingTime"))}</span>
                        </div>
                        <img src="{t(featured.get("url"))}" alt="{t(featured.get("altText"))}" class="featured-image" itemprop="image">
                        <p class="image-caption">{t(featured.get("caption"))}</p>
                    </header>

                    <div class="article-content" itemprop="articleBody">
                        {sections}
                        <div class="cta-section">
                            <h3>Ready to Transform Your Workflow?</h3>
                            <p>Start your free trial today and experience these features firsthand.</p>
                            <button style="padding: 10px 20px; background: #0066cc; color: white; border: none; border-radius: 4px; cursor: pointer;">Start Free Trial</button>
                        </div>
                    </div>

                    <div class="tags">
                        {_render_tags(tags, escape)}
                    </div>
                </main>

                <aside class="sidebar">{_render_related_posts(content.get("relatedPosts") or [], escape)}
                    <h3 class="sidebar-title" style="margin-top: 30px;">Newsletter</h3>
                    <p>Get the latest tips and updates delivered to your inbox.</p>
                    <form style="margin-top: 15px;">
                        <input type="email" placeholder="Your email address" style="width: 100%; padding: 10px; margin-bottom: 10px; border: 1px solid #ddd; border-radius: 4px;">
                        <button type="submit" style="width: 100%; padding: 10px; background: #0066cc; color: white; border: none; border-radius: 4px; cursor: pointer;">Subscribe</button>
                    </form>

                    <h3 class="sidebar-title" style="margin-top: 30px;">Popular Tags</h3>
                    <div class="tags">
                        {_render_tags(tags[:config.SIDEBAR_TAG_LIMIT], escape)}
                    </div>
                </aside>
            </div>
        </div>
    </div>
</body>
</html>"""
