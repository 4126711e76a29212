import bleach
import markdown as md

ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS.union(
    {
        "p", "pre", "code", "img", "h1", "h2", "h3", "h4", "h5", "h6",
        "span", "div", "br", "hr", "table", "thead", "tbody", "tr", "th", "td",
    }
)
ALLOWED_ATTRS = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "img": ["src", "alt", "title"],
    "code": ["class"],
    "span": ["class"],
    "div": ["class"],
    "h1": ["id"],
    "h2": ["id"],
    "h3": ["id"],
    "h4": ["id"],
    "h5": ["id"],
    "h6": ["id"],
}


def render_markdown(text: str) -> str:
    """Convert a markdown body into sanitized HTML."""
    html = md.markdown(
        text or "",
        extensions=["fenced_code", "tables", "toc", "sane_lists"],
        output_format="html5",
    )
    return bleach.clean(html, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRS, strip=True)
