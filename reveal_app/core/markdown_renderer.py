"""Markdown rendering for quiz descriptions shown on the splash slide.

Qt rich-text labels understand a useful subset of HTML, so descriptions are
rendered to an HTML fragment once per snapshot and handed straight to
``QLabel.setText``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments suitable for Qt rich text."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = (
            MarkdownIt("commonmark", {"html": self.enable_html})
            .enable("table")
            .enable("strikethrough")
        )

    def render_fragment(self, markdown_text: str) -> str:
        """Render markdown to HTML; blank input renders as an empty string."""
        text = (markdown_text or "").strip()
        if not text:
            return ""
        return self._markdown.render(text)

    def render_title(self, title: str, fallback: str) -> str:
        """Inline-render a quiz title, so emphasis works but no paragraph is added."""
        text = (title or "").strip() or fallback
        return self._markdown.renderInline(text)


renderer = MarkdownRenderer()
