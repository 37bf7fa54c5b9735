from core.pdf_converter.headings import extract_headings
from core.pdf_converter.toc import build_toc


def test_toc_empty_without_headings() -> None:
    assert build_toc("plain text\n\nno headings here\n") == ""


def test_toc_indents_by_level() -> None:
    source = "# A\n## B\n"
    assert [(h.level, h.text, h.anchor_id) for h in extract_headings(source)] == [
        (1, "A", "a"),
        (2, "B", "b"),
    ]
    toc = build_toc(source)
    assert toc.startswith("# Table of Contents\n\n")
    assert "\n- [A](#a)\n" in toc
    assert "\n  - [B](#b)\n" in toc
    assert toc.endswith("\n---\n\n")
