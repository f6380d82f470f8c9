"""Grading and human-readable report formatting for page check results."""

from blog_generator.config import META_DESCRIPTION_MAX, META_DESCRIPTION_MIN


def compute_grade(issues: list, warnings: list) -> str:
    """Compute page grade from issues and warnings.

    A+ = no issues, no warnings
    A  = no issues, some warnings
    B  = 1 issue
    C  = 2 issues
    D  = 3+ issues
    """
    if len(issues) == 0 and len(warnings) == 0:
        return "A+"
    if len(issues) == 0:
        return "A"
    if len(issues) == 1:
        return "B"
    if len(issues) == 2:
        return "C"
    return "D"


def format_page_report(results: dict, topic: str) -> str:
    """Format check results as a readable CLI report."""

    def _status(ok: bool) -> str:
        return "PASS" if ok else "FAIL"

    title = results["title"]
    featured = results["featured_image"]
    sec = results["sections"]
    meta = results["meta_description"]

    lines = [
        f"{'='*60}",
        f"PAGE REPORT: {topic}",
        f"{'='*60}",
        f"Grade: {results['grade']}",
        "",
        f"  [{_status(title['pass'])}] Title:            {title['text'] or '-'}",
        f"  [{_status(featured['pass'])}] Featured image:   {featured['src'] or '-'}",
        f"  [{_status(sec['count'] > 0)}] Sections:         {sec['count']}  ({sec['with_images']} with images)",
        f"  [{_status(meta['pass'])}] Meta description: {meta['length']} chars  (target: {META_DESCRIPTION_MIN}-{META_DESCRIPTION_MAX})",
        f"  [{_status(results['tags']['count'] > 0)}] Tags:             {results['tags']['count']}",
    ]

    if results["issues"]:
        lines.append(f"\nISSUES ({len(results['issues'])}):")
        for issue in results["issues"]:
            lines.append(f"  - {issue}")

    if results.get("warnings"):
        lines.append(f"\nWARNINGS ({len(results['warnings'])}):")
        for warning in results["warnings"]:
            lines.append(f"  ~ {warning}")

    if not results["issues"] and not results.get("warnings"):
        lines.append("\nAll checks passed!")

    lines.append(f"{'='*60}")
    return "\n".join(lines)
