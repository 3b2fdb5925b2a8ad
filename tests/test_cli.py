"""End-to-end tests for the second-look command."""

import json

import pytest

from second_look import main

BAD_NAME = """\
def fetch(q):
    return q
"""


def test_reports_and_exits_zero_without_strict(write_tree, capsys):
    root = write_tree({"fetch.py": BAD_NAME})

    main([str(root)])

    out = capsys.readouterr().out
    assert out.startswith("Heuristics:")
    assert "fetch.py:1: 'q' is too short" in out


def test_strict_fails_on_unvetted_findings(write_tree):
    root = write_tree({"fetch.py": BAD_NAME})

    with pytest.raises(SystemExit) as exc:
        main([str(root), "--strict"])

    assert exc.value.code == 1


def test_strict_passes_when_only_vetted(write_tree, capsys):
    root = write_tree({"fetch.py": "# sl:vetted\n" + BAD_NAME})

    main([str(root), "--strict"])

    assert "No unvetted findings." in capsys.readouterr().out


def test_flags_override_pyproject(write_tree, capsys):
    root = write_tree({
        "pyproject.toml": "[tool.second-look]\nmin-name-length = 1\n",
        "fetch.py": BAD_NAME,
        "store.py": "def save(ab):\n    return ab\n",
    })

    main([str(root), "--json"])
    report = json.loads(capsys.readouterr().out)
    assert report["violations"] == []

    main([str(root), "--json", "--min-name-length", "3"])
    report = json.loads(capsys.readouterr().out)
    assert [v["path"] for v in report["violations"]] == ["fetch.py", "store.py"]
    assert report["summary"] == {"naming": 2}


def test_missing_path_is_a_usage_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "nowhere")])

    assert exc.value.code == 2
    assert "not found" in capsys.readouterr().err


def test_bad_config_is_a_usage_error(write_tree, capsys):
    root = write_tree({"pyproject.toml": "[tool.second-look]\nshout = true\n"})

    with pytest.raises(SystemExit) as exc:
        main([str(root)])

    assert exc.value.code == 2
    assert "unknown key 'shout'" in capsys.readouterr().err


def test_non_table_config_is_a_usage_error(write_tree, capsys):
    root = write_tree({"pyproject.toml": '[tool]\n"second-look" = 3\n'})

    with pytest.raises(SystemExit) as exc:
        main([str(root)])

    assert exc.value.code == 2
    assert "[tool.second-look] must be a table" in capsys.readouterr().err


@pytest.mark.parametrize("flag", ["--max-depth", "--dup-min-lines", "--min-name-length"])
def test_negative_threshold_flag_is_a_usage_error(write_tree, capsys, flag):
    root = write_tree({"fetch.py": BAD_NAME})

    with pytest.raises(SystemExit) as exc:
        main([str(root), flag, "-1"])

    assert exc.value.code == 2
    assert "non-negative" in capsys.readouterr().err
