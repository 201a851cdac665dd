"""Markdown rendering for user-authored text."""

from markdown_it import MarkdownIt

# Raw HTML in user text is escaped, never passed through.
_md = MarkdownIt("commonmark", {"html": False, "breaks": True}).enable("table")


def render_markdown(text: str) -> str:
    """Render Markdown text to HTML."""
    return _md.render(text)
