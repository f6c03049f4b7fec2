from __future__ import annotations

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin


EXCERPT_LENGTH = 280


class MarkdownService:
    """Renders post bodies from markdown to HTML."""

    def __init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": True}).enable("table").enable("strikethrough")
        )
        self._markdown.use(tasklists_plugin)

    def render(self, text: str) -> str:
        return self._markdown.render(text)

    def summarize(self, html: str) -> str:
        closing_index = html.find("</p>")
        if closing_index != -1:
            return html[: closing_index + len("</p>")]
        snippet = html[:EXCERPT_LENGTH]
        if len(html) > EXCERPT_LENGTH:
            snippet = f"{snippet}..."
        return snippet
