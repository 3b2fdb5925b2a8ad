"""One advisory finding: what was seen, where, and the line ranges behind it."""

from collections import namedtuple

# rule:   which heuristic fired
# path:   relative to the scan root, always '/'-separated
# line:   anchor line, suppressions and ordering key off it
# detail: the human-readable message, prefixed with path:line
# spans:  (label, start, end) ranges expanded by --lines
Finding = namedtuple("Finding", ["rule", "path", "line", "detail", "spans"])


def finding(rule, path, line, message, spans=()):
    return Finding(rule, path, line, f"{path}:{line}: {message}", tuple(spans))
