from blogsite.services.markdown_service import EXCERPT_LENGTH, MarkdownService


def test_summarize_returns_first_paragraph():
    service = MarkdownService()
    html = service.render("# Heading\n\nFirst.\n\nSecond.")

    assert service.summarize(html) == "<h1>Heading</h1>\n<p>First.</p>"


def test_summarize_without_paragraph_keeps_short_html():
    service = MarkdownService()
    html = service.render("# Only a heading")

    assert service.summarize(html) == "<h1>Only a heading</h1>\n"


def test_summarize_without_paragraph_truncates_long_html():
    service = MarkdownService()
    html = "<pre>" + "x" * 400 + "</pre>"

    summary = service.summarize(html)

    assert summary == html[:EXCERPT_LENGTH] + "..."
    assert len(summary) == EXCERPT_LENGTH + 3


def test_render_supports_task_lists_and_tables():
    service = MarkdownService()

    tasks = service.render("- [x] done\n- [ ] todo\n")
    table = service.render("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert 'type="checkbox"' in tasks
    assert "<table>" in table
