"""Build the system and user prompts for blog content generation."""

import random


# ── System prompt ─────────────────────────────────────────────────────────


def build_system_prompt() -> str:
    """Return the system-level instruction for the completion model."""
    return (
        "You must respond with ONLY raw JSON output. "
        "Do not include any Markdown code blocks or additional text."
    )


# ── User prompt ───────────────────────────────────────────────────────────


def build_content_prompt(topic: str) -> str:
    """Ask for a blog post about `topic` as a JSON document.

    The shape shown here is the contract the renderer relies on. Image URLs
    are placeholders; real photos are injected after the Pexels search.
    """
    section_image = f"https://picsum.photos/600/300?random={random.random()}"

    return f"""Generate blog content about "{topic}" in RAW JSON format (no Markdown, just pure JSON) with this exact structure:
{{
"title": "10 Essential [Topic] you should know about",
"description": "[150-160 character meta description]",
"keywords": ["keyword1", "keyword2", "keyword3"],
"author": "Author Name",
"date": "YYYY-MM-DD",
"readingTime": "X min read",
"featuredImage": {{
  "url": "https://picsum.photos/600/300?random=1",
  "altText": "Descriptive alt text",
  "caption": "Image caption"
}},
"sections": [
  {{
    "title": "Section 1",
    "content": "Paragraph text...",
    "image": {{
      "url": "{section_image}",
      "altText": "Descriptive alt text",
      "caption": "Image caption"
    }},
    "listItems": ["Item 1", "Item 2", "Item 3"]
  }}
],
"tags": ["tag1", "tag2", "tag3"],
"relatedPosts": [
  {{"title": "Related post title", "url": "/blogs/related-post.html"}}
]
}}

IMPORTANT:
1. Output must be pure JSON only
2. Do not include any Markdown code blocks
3. Do not include any explanatory text
4. Maintain the exact structure shown above"""
