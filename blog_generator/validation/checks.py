"""Individual checks on a rendered page and the check_page orchestrator.

The report is advisory: it never changes or blocks the written page.
"""

from bs4 import BeautifulSoup

from blog_generator.config import META_DESCRIPTION_MAX, META_DESCRIPTION_MIN
from blog_generator.validation.report import compute_grade


# ── Main entry point ──────────────────────────────────────────────────────


def check_page(html: str) -> dict:
    """Run all checks on a rendered page.

    Returns a dict with per-check results, issues, warnings, grade, and
    overall pass/fail.
    """
    soup = BeautifulSoup(html, "html.parser")

    results = {
        "title": check_title(soup),
        "featured_image": check_featured_image(soup),
        "sections": check_sections(soup),
        "meta_description": check_meta_description(soup),
        "tags": check_tags(soup),
    }

    issues, warnings = _collect_issues(results)
    results["issues"] = issues
    results["warnings"] = warnings
    results["pass"] = len(issues) == 0
    results["grade"] = compute_grade(issues, warnings)

    return results


# ── Issue aggregation ─────────────────────────────────────────────────────


def _collect_issues(results: dict) -> tuple[list[str], list[str]]:
    """Walk through all check results and collect issues/warnings."""
    issues = []
    warnings = []

    if not results["title"]["pass"]:
        issues.append("Page has no <h1> title")

    if not results["featured_image"]["pass"]:
        issues.append("Featured image has no src")

    sec = results["sections"]
    if sec["count"] == 0:
        issues.append("Article has no sections")
    elif sec["with_images"] < sec["count"]:
        warnings.append(f"{sec['count'] - sec['with_images']} of {sec['count']} sections have no image")

    meta = results["meta_description"]
    if meta["length"] == 0:
        issues.append("Missing meta description")
    elif not meta["pass"]:
        warnings.append(
            f"Meta description is {meta['length']} chars "
            f"(target {META_DESCRIPTION_MIN}-{META_DESCRIPTION_MAX})"
        )

    if results["tags"]["count"] == 0:
        warnings.append("No tags")

    return issues, warnings


# ── Individual checks ─────────────────────────────────────────────────────


def check_title(soup: BeautifulSoup) -> dict:
    h1 = soup.find("h1")
    text = h1.get_text(strip=True) if h1 else ""
    return {"text": text, "pass": bool(text)}


def check_featured_image(soup: BeautifulSoup) -> dict:
    """The first .featured-image inside the article header."""
    header = soup.find("header", class_="article-header")
    img = header.find("img", class_="featured-image") if header else None
    src = img.get("src", "") if img else ""
    return {"src": src, "pass": bool(src)}


def check_sections(soup: BeautifulSoup) -> dict:
    """Count <h2> sections and how many are followed by an image before the next one."""
    body = soup.find("div", class_="article-content")
    if body is None:
        return {"count": 0, "with_images": 0}

    headings = body.find_all("h2")
    with_images = 0
    for h2 in headings:
        for sibling in h2.find_next_siblings():
            if sibling.name == "h2":
                break
            if sibling.name == "img":
                with_images += 1
                break

    return {"count": len(headings), "with_images": with_images}


def check_meta_description(soup: BeautifulSoup) -> dict:
    meta = soup.find("meta", attrs={"name": "description"})
    description = meta.get("content", "") if meta else ""
    length = len(description)
    return {
        "length": length,
        "pass": META_DESCRIPTION_MIN <= length <= META_DESCRIPTION_MAX,
    }


def check_tags(soup: BeautifulSoup) -> dict:
    """Tags in the article footer (the sidebar repeats the first few)."""
    main = soup.find("main")
    container = main.find("div", class_="tags", recursive=False) if main else None
    tags = container.find_all("span", class_="tag") if container else []
    return {"count": len(tags)}
