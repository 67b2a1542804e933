from __future__ import annotations

from relnotes.release.classifier import GRAMMARS, classify, entry_title, parse_commit_message
from relnotes.release.model import ClassifiedEntry, CommitRef, ParsedCommit


def _commit(message: str, author: str = "Jo") -> CommitRef:
    return CommitRef(message=message, author_name=author)


class TestParseCommitMessage:
    def test_scoped(self) -> None:
        assert parse_commit_message("feat(api): add export") == ParsedCommit(
            type="feat", scope="api", subject="add export"
        )

    def test_unscoped(self) -> None:
        assert parse_commit_message("fix: handle empty tags") == ParsedCommit(
            type="fix", scope="", subject="handle empty tags"
        )

    def test_scope_with_issue_key(self) -> None:
        parsed = parse_commit_message("feat(ENG-42): add export")
        assert parsed.scope == "ENG-42"

    def test_only_first_line_is_used(self) -> None:
        parsed = parse_commit_message("fix(ui): align header\n\nLonger body: with colon\n")
        assert parsed == ParsedCommit(type="fix", scope="ui", subject="align header")

    def test_trailing_whitespace_of_subject_is_kept(self) -> None:
        parsed = parse_commit_message("fix:   spaced subject  ")
        assert parsed.subject == "spaced subject  "

    def test_type_case_is_kept(self) -> None:
        assert parse_commit_message("Feat: shout").type == "Feat"

    def test_only_newline_ends_the_first_line(self) -> None:
        parsed = parse_commit_message("fix: keep \u2028 and \x85 inside\nbody")
        assert parsed.subject == "keep \u2028 and \x85 inside"

    def test_unrecognized_falls_through_to_other(self) -> None:
        parsed = parse_commit_message("Merge pull request #12 from org/branch\n\nbody")
        assert parsed == ParsedCommit(
            type="other", scope="", subject="Merge pull request #12 from org/branch"
        )

    def test_nested_parentheses_not_supported(self) -> None:
        parsed = parse_commit_message("feat(a(b)): nested")
        assert parsed.type == "other"

    def test_empty_message(self) -> None:
        assert parse_commit_message("") == ParsedCommit(type="other", scope="", subject="")

    def test_grammars_are_tried_in_order(self) -> None:
        assert [g.name for g in GRAMMARS] == ["scoped", "unscoped"]


class TestEntryTitle:
    def test_with_scope(self) -> None:
        parsed = ParsedCommit(type="feat", scope="api", subject="add export")
        assert entry_title(parsed, "Jo", None) == "api - add export - Jo"

    def test_without_scope(self) -> None:
        parsed = ParsedCommit(type="feat", scope="", subject="add export")
        assert entry_title(parsed, "Jo", "https://x/y") == "add export - Jo"

    def test_non_issue_scope_is_not_linked(self) -> None:
        parsed = ParsedCommit(type="feat", scope="api", subject="add export")
        assert entry_title(parsed, "Jo", "https://x/y") == "api - add export - Jo"

    def test_issue_scope_without_base_url_is_plain(self) -> None:
        parsed = ParsedCommit(type="feat", scope="ENG-42", subject="add export")
        assert entry_title(parsed, "Jo", None) == "ENG-42 - add export - Jo"

    def test_lowercase_issue_key_is_linked(self) -> None:
        parsed = ParsedCommit(type="fix", scope="eng-7", subject="crash")
        assert entry_title(parsed, "Al", "https://x/y") == "[eng-7 - crash - Al](https://x/y/eng-7)"

    def test_base_url_is_used_verbatim(self) -> None:
        parsed = ParsedCommit(type="fix", scope="ENG-7", subject="crash")
        assert entry_title(parsed, "Al", "https://x/y/") == "[ENG-7 - crash - Al](https://x/y//ENG-7)"

    def test_empty_base_url_still_links(self) -> None:
        parsed = ParsedCommit(type="fix", scope="ENG-7", subject="crash")
        assert entry_title(parsed, "Al", "") == "[ENG-7 - crash - Al](/ENG-7)"


class TestClassify:
    def test_issue_scope_links_to_tracker(self) -> None:
        sections = classify([_commit("feat(ENG-42): add export")], "https://x/y")
        assert sections["features"] == [
            ClassifiedEntry(title="[ENG-42 - add export - Jo](https://x/y/ENG-42)")
        ]
        assert "ENG-42 - add export - Jo" in sections["features"][0].title

    def test_category_mapping(self) -> None:
        commits = [
            _commit("feat: a"),
            _commit("fix: b"),
            _commit("perf: c"),
            _commit("refactor: d"),
            _commit("style: e"),
        ]
        sections = classify(commits)
        assert [e.title for e in sections["features"]] == ["a - Jo"]
        assert [e.title for e in sections["bugfixes"]] == ["b - Jo"]
        assert [e.title for e in sections["improvements"]] == ["c - Jo", "d - Jo", "e - Jo"]

    def test_unmapped_types_are_dropped(self) -> None:
        commits = [
            _commit("chore: bump deps"),
            _commit("docs: readme"),
            _commit("other: looks typed"),
            _commit("Feat: capitalised type"),
            _commit("FIX: shouted type"),
            _commit("wip"),
        ]
        sections = classify(commits)
        assert sections == {"features": [], "improvements": [], "bugfixes": []}

    def test_keeps_input_order(self) -> None:
        commits = [_commit("feat: zeta"), _commit("chore: x"), _commit("feat: alpha"), _commit("feat: mid")]
        sections = classify(commits)
        assert [e.title for e in sections["features"]] == ["zeta - Jo", "alpha - Jo", "mid - Jo"]

    def test_section_keys_in_display_order(self) -> None:
        assert list(classify([])) == ["features", "improvements", "bugfixes"]

    def test_idempotent(self) -> None:
        commits = [_commit("feat(ENG-1): a", "Ann"), _commit("fix: b", "Bo"), _commit("nope")]
        assert classify(commits, "https://x/y") == classify(commits, "https://x/y")
        assert repr(classify(commits, "https://x/y")) == repr(classify(commits, "https://x/y"))
