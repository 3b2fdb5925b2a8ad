"""Tests for inline sl:ignore marks."""

from second_look._suppressions import ALL_RULES, line_suppressions


def test_bare_mark_silences_every_rule():
    assert line_suppressions(["x = 1  # sl:ignore"]) == {1: ALL_RULES}


def test_listed_rules_only():
    silenced = line_suppressions([
        "a = 1",
        "def run(q):  # sl:ignore[naming, nesting]",
        "b = 2  #sl:ignore[duplication]",
    ])

    assert silenced == {
        2: frozenset({"naming", "nesting"}),
        3: frozenset({"duplication"}),
    }


def test_empty_brackets_mean_everything():
    assert line_suppressions(["x = 1  # sl:ignore[]"]) == {1: ALL_RULES}


def test_mark_outside_a_comment_is_not_a_suppression():
    assert line_suppressions(['help = "use sl:ignore to silence"']) == {}
