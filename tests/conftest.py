"""Shared fixtures: threshold namespaces and throwaway source trees."""

import argparse
import ast
import textwrap

import pytest

from second_look._heuristics import DEFAULTS
from second_look._parse_source import ParsedSource


@pytest.fixture
def make_args():
    """argparse.Namespace with every threshold at its default, overridable."""
    def _make(**overrides):
        values = dict(DEFAULTS, ignore=[])
        values.update(overrides)
        return argparse.Namespace(**values)
    return _make


@pytest.fixture
def write_tree(tmp_path):
    """Write {relative path: source} under tmp_path and return tmp_path."""
    def _write(files):
        for rel, text in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(textwrap.dedent(text), encoding="utf-8")
        return tmp_path
    return _write


@pytest.fixture
def make_parsed():
    """ParsedSource from inline text, without touching the filesystem."""
    def _make(rel, text):
        source = textwrap.dedent(text)
        return ParsedSource(rel, source, source.splitlines(), ast.parse(source, rel))
    return _make
