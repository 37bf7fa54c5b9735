from core.pdf_converter.engine import markdown_extensions, pdf_arguments, render_html, widen_list_indent
from core.pdf_converter.models import MarkdownOptions, PageOptions
from core.pdf_converter.toc import build_toc


def test_heading_ids_match_toc_anchors() -> None:
    source = "# Hello, World!\n## Next Steps\n"
    toc = build_toc(source)
    html = render_html(source, "body {}")
    assert "(#hello-world-)" in toc
    assert 'id="hello-world-"' in html
    assert 'id="next-steps"' in html


def test_render_html_embeds_css_and_gfm() -> None:
    source = "- [x] done\n- [ ] todo\n\n~~old~~\n\n| a | b |\n|---|---|\n| 1 | 2 |\n"
    html = render_html(source, "h1 { color: red; }")
    assert "<style>h1 { color: red; }</style>" in html
    assert "task-list-item" in html
    assert 'type="checkbox"' in html
    assert "<del>old</del>" in html
    assert "<table>" in html


def test_soft_line_breaks() -> None:
    html = render_html("first\nsecond\n", "")
    assert "first<br>" in html


def test_markdown_extensions_follow_options() -> None:
    extensions, configs = markdown_extensions(MarkdownOptions(gfm=False, breaks=False, header_ids=False))
    assert "toc" not in extensions
    assert "nl2br" not in extensions
    assert "pymdownx.tasklist" not in extensions
    assert configs == {}


def test_pdf_arguments_without_header_footer() -> None:
    arguments = pdf_arguments(PageOptions(margin={"top": "40px"}))
    assert arguments == {
        "format": "Letter",
        "margin": {"top": "40px"},
        "print_background": True,
        "display_header_footer": False,
    }


def test_pdf_arguments_with_header_only() -> None:
    page = PageOptions(display_header_footer=True, header_template="<b>h</b>")
    arguments = pdf_arguments(page)
    assert arguments["header_template"] == "<b>h</b>"
    assert arguments["footer_template"] == "<div></div>"


def test_widen_list_indent_nests_two_space_lists() -> None:
    toc = "- [A](#a)\n  - [B](#b)\n    - [C](#c)\n"
    assert widen_list_indent(toc) == "- [A](#a)\n    - [B](#b)\n        - [C](#c)\n"
    html = render_html(toc, "")
    assert html.count("<ul>") == 3


def test_widen_list_indent_skips_four_space_lists_and_fences() -> None:
    four = "- a\n    - b\n"
    assert widen_list_indent(four) == four
    fenced = "```\n  - not a list\n```\n- a\n  - b\n"
    assert widen_list_indent(fenced) == "```\n  - not a list\n```\n- a\n    - b\n"


def test_widen_list_indent_keeps_continuations_in_their_item() -> None:
    source = "- a\n  - b\n\n    more text\n\n        code\n"
    assert widen_list_indent(source) == "- a\n    - b\n\n        more text\n\n            code\n"
    html = render_html(source, "")
    assert html.count("<ul>") == 2
    assert "<pre><code>code" in html


def test_widen_list_indent_shifts_fenced_code_inside_items() -> None:
    source = "- a\n  - b\n\n    ```\n    x = 1\n    ```\n"
    assert widen_list_indent(source) == "- a\n    - b\n\n        ```\n        x = 1\n        ```\n"
