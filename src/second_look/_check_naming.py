"""Names are the first documentation a reader gets. A name that is too
short, carries a counter instead of a meaning, or is mostly abbreviations
makes the reader decode it every time they meet it."""

import ast
import re

from second_look._finding import finding
from second_look._heuristics import (
    ABBREVIATIONS, ACRONYMS, ALLOWED_SHORT_NAMES, NUMERIC_WORDS, VOWELS,
)

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|\d+")
_NUMERIC_TAIL = re.compile(r"[A-Za-z]_?\d+$")


def _bindings(tree):
    """Yield (name, line) for every name the code introduces."""
    for node in ast.walk(tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            yield node.name, node.lineno
        elif isinstance(node, ast.arg):
            if node.arg not in ("self", "cls"):
                yield node.arg, node.lineno
        elif isinstance(node, ast.Name) and isinstance(node.ctx, ast.Store):
            yield node.id, node.lineno
        elif isinstance(node, ast.ExceptHandler) and node.name:
            yield node.name, node.lineno
        elif isinstance(node, ast.alias) and node.asname:
            yield node.asname, getattr(node, "lineno", 1)
        elif isinstance(node, (ast.MatchAs, ast.MatchStar)) and node.name:
            yield node.name, node.lineno


def _words(bare):
    return [word.lower() for part in bare.split("_") for word in _WORD.findall(part)]


def _is_abbreviation(word):
    if word in ABBREVIATIONS:
        return True
    if word in ACRONYMS or word.isdigit():
        return False
    return 2 <= len(word) <= 4 and not VOWELS & set(word)


def _complaint(name, min_length):
    """Why a name reads badly, or None."""
    bare = name.lstrip("_")
    words = _words(bare)
    if not words:
        return None

    if _NUMERIC_TAIL.search(bare):
        tail = words[-1]
        if tail.isdigit() and len(words) > 1:
            tail = words[-2] + tail
        if tail not in NUMERIC_WORDS:
            return f"'{name}' ends in a number; name what sets it apart"

    # Constants are conventionally terse and shouty, only the counter rule applies.
    if bare.isupper():
        return None

    if len(bare) < min_length and bare.lower() not in ALLOWED_SHORT_NAMES:
        return f"'{name}' is too short to say what it holds"

    letters = [word for word in words if not word.isdigit()]
    abbreviated = [word for word in letters if _is_abbreviation(word)]
    if len(letters) == 1 and letters[0] in ABBREVIATIONS:
        return f"'{name}' is an abbreviation; spell it out"
    if len(letters) >= 2 and len(abbreviated) * 2 > len(letters):
        return f"'{name}' is mostly abbreviations ({', '.join(abbreviated)})"
    return None


def check_naming(rel, tree, args):
    first_seen = {}
    for name, line in _bindings(tree):
        if name == "_" or (name.startswith("__") and name.endswith("__")):
            continue
        if name not in first_seen or line < first_seen[name]:
            first_seen[name] = line

    findings = []
    for name, line in sorted(first_seen.items(), key=lambda item: (item[1], item[0])):
        reason = _complaint(name, args.min_name_length)
        if reason:
            findings.append(finding("naming", rel, line, reason))
    return findings
