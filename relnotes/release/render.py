from __future__ import annotations

from relnotes.release.model import Category, Sections

SECTION_HEADERS: dict[Category, str] = {
    "features": "🚀 New Features",
    "improvements": "🔧 Improvements",
    "bugfixes": "🐛 Bug Fixes",
}

ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"
ADAPTIVE_CARD_VERSION = "1.2"


def format_release_notes(
    *,
    product_name: str,
    version: str,
    release_date: str,
    sections: Sections,
) -> str:
    """Render sections as Markdown. Empty sections are left out."""
    lines: list[str] = []
    lines.append(f"# Release Notes - {product_name} {version}")
    lines.append(f"**Release Date:** {release_date}")
    lines.append("")

    for category, header in SECTION_HEADERS.items():
        entries = sections.get(category, [])
        if not entries:
            continue
        lines.append(f"## {header}")
        for entry in entries:
            lines.append(f"* **{entry.title}**")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def adaptive_card_message(text: str) -> dict[str, object]:
    """Wrap Markdown text in a Teams incoming-webhook adaptive card."""
    return {
        "type": "message",
        "attachments": [
            {
                "contentType": "application/vnd.microsoft.card.adaptive",
                "content": {
                    "type": "AdaptiveCard",
                    "body": [{"type": "TextBlock", "text": text, "wrap": True}],
                    "$schema": ADAPTIVE_CARD_SCHEMA,
                    "version": ADAPTIVE_CARD_VERSION,
                },
            }
        ],
    }
