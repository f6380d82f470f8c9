"""HTML rendering of generated blog content."""

from blog_generator.render.template import render_blog_html, format_post_date

__all__ = ["render_blog_html", "format_post_date"]
