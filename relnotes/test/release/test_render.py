from __future__ import annotations

from relnotes.release.model import ClassifiedEntry, Sections
from relnotes.release.render import adaptive_card_message, format_release_notes


def _sections(**kwargs: list[str]) -> Sections:
    sections: Sections = {"features": [], "improvements": [], "bugfixes": []}
    for key, titles in kwargs.items():
        sections[key] = [ClassifiedEntry(title=t) for t in titles]  # type: ignore[index]
    return sections


def test_format_release_notes_full() -> None:
    text = format_release_notes(
        product_name="Acme",
        version="v1.2.0",
        release_date="2026-10-17",
        sections=_sections(features=["a - Jo"], improvements=["b - Al"], bugfixes=["c - Bo"]),
    )
    assert text == (
        "# Release Notes - Acme v1.2.0\n"
        "**Release Date:** 2026-10-17\n"
        "\n"
        "## 🚀 New Features\n"
        "* **a - Jo**\n"
        "\n"
        "## 🔧 Improvements\n"
        "* **b - Al**\n"
        "\n"
        "## 🐛 Bug Fixes\n"
        "* **c - Bo**\n"
    )


def test_format_release_notes_skips_empty_sections() -> None:
    text = format_release_notes(
        product_name="Acme",
        version="v2",
        release_date="2026-10-17",
        sections=_sections(bugfixes=["fix - Jo"]),
    )
    assert "New Features" not in text
    assert "Improvements" not in text
    assert text.endswith("## 🐛 Bug Fixes\n* **fix - Jo**\n")


def test_format_release_notes_no_entries() -> None:
    text = format_release_notes(
        product_name="Acme", version="v2", release_date="2026-10-17", sections=_sections()
    )
    assert text == "# Release Notes - Acme v2\n**Release Date:** 2026-10-17\n"


def test_adaptive_card_message_wraps_text() -> None:
    message = adaptive_card_message("# hello")
    assert message["type"] == "message"
    attachments = message["attachments"]
    assert isinstance(attachments, list)
    content = attachments[0]["content"]
    assert attachments[0]["contentType"] == "application/vnd.microsoft.card.adaptive"
    assert content["type"] == "AdaptiveCard"
    assert content["version"] == "1.2"
    assert content["body"] == [{"type": "TextBlock", "text": "# hello", "wrap": True}]
