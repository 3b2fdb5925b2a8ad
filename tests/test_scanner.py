"""Tests for walking a tree and bucketing findings."""

import os

from second_look._scanner import scan

CLEAN = """\
def greet(name):
    return "hello " + name
"""

BAD_NAME = """\
def fetch(q):
    return q
"""


def test_clean_tree_has_no_findings(write_tree, make_args):
    root = write_tree({"app/greet.py": CLEAN})

    assert scan(str(root), make_args()) == ([], [])


def test_paths_are_relative_and_slash_separated(write_tree, make_args):
    root = write_tree({"app/sub/fetch.py": BAD_NAME})

    violations, vetted = scan(str(root), make_args())

    assert vetted == []
    assert [(f.rule, f.path, f.line) for f in violations] == [("naming", "app/sub/fetch.py", 1)]


def test_vetted_files_go_to_their_own_bucket(write_tree, make_args):
    root = write_tree({
        "fetch.py": BAD_NAME,
        "legacy.py": '"""Old module."""  # sl:vetted\n\n' + BAD_NAME,
    })

    violations, vetted = scan(str(root), make_args())

    assert [f.path for f in violations] == ["fetch.py"]
    assert [f.path for f in vetted] == ["legacy.py"]


def test_skip_dirs_and_ignore_patterns(write_tree, make_args):
    root = write_tree({
        ".venv/lib/site.py": BAD_NAME,
        "gen_models.py": BAD_NAME,
        "build/out.py": BAD_NAME,
        "notes.txt": "q = 1\n",
        "keep.py": BAD_NAME,
    })

    violations, _ = scan(str(root), make_args(ignore=["gen_*"]))

    assert [f.path for f in violations] == ["keep.py"]


def test_parse_errors_do_not_stop_the_scan(write_tree, make_args):
    root = write_tree({"broken.py": "def broken(:\n", "fetch.py": BAD_NAME})

    violations, _ = scan(str(root), make_args())

    assert [(f.rule, f.path) for f in violations] == [("parse", "broken.py"), ("naming", "fetch.py")]


def test_inline_ignore_silences_the_anchor_line(write_tree, make_args):
    root = write_tree({
        "fetch.py": "def fetch(q):  # sl:ignore[naming]\n    return q\n",
    })

    assert scan(str(root), make_args()) == ([], [])


def test_duplicates_across_files(write_tree, make_args):
    body = """\
    def {name}(rows):
        total = 0
        for row in rows:
            if row.active:
                total += row.price * row.quantity
        return total
    """
    root = write_tree({
        "a.py": body.format(name="sum_active"),
        "b.py": body.format(name="add_active"),
    })

    violations, _ = scan(str(root), make_args(dup_min_nodes=10))

    assert [(f.rule, f.path, f.line) for f in violations] == [("duplication", "a.py", 1)]


def test_single_file_root(write_tree, make_args):
    root = write_tree({"fetch.py": BAD_NAME, "other.py": BAD_NAME})

    violations, _ = scan(os.path.join(str(root), "fetch.py"), make_args())

    assert [f.path for f in violations] == ["fetch.py"]


def test_single_file_root_honours_filters(write_tree, make_args):
    root = write_tree({"gen_models.py": BAD_NAME, "notes.txt": "q = 1\n"})

    assert scan(os.path.join(str(root), "gen_models.py"), make_args(ignore=["gen_*"])) == ([], [])
    assert scan(os.path.join(str(root), "notes.txt"), make_args()) == ([], [])


def test_own_constants_module_is_not_vetted():
    from second_look import _heuristics
    from second_look._scanner import _is_vetted

    assert not _is_vetted(_heuristics.__file__)
    assert _heuristics.VETTED_MARK == "sl:" + "vetted"
