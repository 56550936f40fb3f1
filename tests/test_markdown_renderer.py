"""
Tests for splash-slide markdown rendering
"""
from reveal_app.core.markdown_renderer import MarkdownRenderer, renderer


def test_blank_description_renders_nothing():
    assert renderer.render_fragment("") == ""
    assert renderer.render_fragment("   \n") == ""


def test_fragment_renders_markdown():
    html = renderer.render_fragment("**Warehouse** safety")
    assert "<strong>Warehouse</strong>" in html
    assert html.startswith("<p>")


def test_raw_html_is_escaped_by_default():
    html = MarkdownRenderer().render_fragment("<script>alert(1)</script>")
    assert "<script>" not in html


def test_title_is_inline_with_fallback():
    assert renderer.render_title("*Final* round", "Quiz Results") == "<em>Final</em> round"
    assert renderer.render_title("  ", "Quiz Results") == "Quiz Results"
