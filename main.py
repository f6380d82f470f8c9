#!/usr/bin/env python3
"""Generate a static HTML blog post for a topic.

Usage:
    python main.py Benefits of Outdoor Games            # Generate blogs/popular/blog-benefits-of-outdoor-games.html
    python main.py "Remote Work Tips" --output-dir out  # Write somewhere else
    python main.py Remote Work Tips --escape-html       # HTML-escape generated text
    python main.py Remote Work Tips --dry-run           # Show prompt and target path, don't call APIs
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from blog_generator import config
from blog_generator.errors import BlogGenerationError, ContentParseError
from blog_generator.output import blog_output_path, save_blog_post
from blog_generator.pipeline import generate_blog_post
from blog_generator.pipeline.prompts import build_content_prompt
from blog_generator.validation import check_page, format_page_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate an illustrated HTML blog post")
    parser.add_argument("topic", nargs="*",
                        help='Blog topic, e.g. "Benefits of Outdoor Games"')
    parser.add_argument("--output-dir", type=Path, default=None,
                        help=f"Directory for the HTML file (default: {config.BLOG_OUTPUT_DIR})")
    parser.add_argument("--site-url", type=str, default="",
                        help=f"Site base URL used in page metadata (default: {config.SITE_URL})")
    parser.add_argument("--escape-html", action="store_true",
                        help="HTML-escape generated text before inserting it into the page")
    parser.add_argument("--dry-run", action="store_true",
                        help="Show the prompt and output path without calling any API")
    return parser


def run(topic: str, output_dir: Path | None = None, site_url: str = "",
        escape: bool = False, dry_run: bool = False) -> Path | None:
    """Generate, save and report on one blog post. Returns the written path."""
    output_path = blog_output_path(topic, output_dir)

    print(f"Generating blog post about: \"{topic}\"")

    if dry_run:
        print("\n  [DRY RUN] Would send prompt:")
        print(build_content_prompt(topic))
        print(f"\n  [DRY RUN] Would write: {output_path}")
        return None

    html = generate_blog_post(
        topic,
        site_url=site_url or None,
        escape=escape or None,
    )

    save_blog_post(html, output_path)
    print(f"Successfully generated blog post: {output_path}")
    print(f"Preview (first {config.PREVIEW_CHARS} characters):\n{html[:config.PREVIEW_CHARS]}...")

    report = format_page_report(check_page(html), topic)
    print(f"\n{report}")

    return output_path


def main(argv: list[str] | None = None):
    args = build_parser().parse_args(argv)

    topic = " ".join(args.topic).strip()
    if not topic:
        print('Error: please provide a topic. Example: python main.py "Benefits of Outdoor Games"')
        sys.exit(1)

    try:
        run(
            topic,
            output_dir=args.output_dir,
            site_url=args.site_url,
            escape=args.escape_html,
            dry_run=args.dry_run,
        )
    except ContentParseError as e:
        print(f"Error generating blog post: {e}")
        print(f"Problematic content:\n{e.raw_text}")
        sys.exit(1)
    except BlogGenerationError as e:
        print(f"Error generating blog post: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error generating blog post: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
