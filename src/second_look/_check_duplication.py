"""Don't repeat yourself. Every function, class and compound block across
the whole scan is fingerprinted; blocks that share a fingerprint and are
big enough to matter are one piece of logic living in several places.

Only the outermost copy is reported. When two functions are identical,
their identical loops are not news.
"""

import ast
from collections import defaultdict, namedtuple

from second_look._finding import finding
from second_look._fingerprint_subtree import fingerprint_subtree

_BLOCK_KINDS = {
    ast.FunctionDef: "def",
    ast.AsyncFunctionDef: "async def",
    ast.ClassDef: "class",
    ast.If: "if block",
    ast.For: "for block",
    ast.AsyncFor: "async for block",
    ast.While: "while block",
    ast.With: "with block",
    ast.AsyncWith: "async with block",
    ast.Try: "try block",
    ast.TryStar: "try block",
    ast.Match: "match block",
}

_Member = namedtuple("_Member", ["path", "start", "end", "label"])


def _label(node):
    kind = _BLOCK_KINDS[type(node)]
    name = getattr(node, "name", None)
    return f"{kind} {name}" if name else kind


def _contained(member, reported):
    return any(
        start <= member.start and member.end <= end
        for start, end in reported.get(member.path, ())
    )


def check_duplication(parsed_sources, args):
    """Group qualifying blocks by fingerprint, return one finding per group."""
    groups = defaultdict(list)
    sizes = {}
    for parsed in parsed_sources:
        for node in ast.walk(parsed.tree):
            if type(node) not in _BLOCK_KINDS:
                continue
            start, end = node.lineno, node.end_lineno or node.lineno
            if end - start + 1 < args.dup_min_lines:
                continue
            digest, size = fingerprint_subtree(node)
            if size < args.dup_min_nodes:
                continue
            sizes[digest] = size
            groups[digest].append(_Member(parsed.rel, start, end, _label(node)))

    dup_groups = []
    for digest, members in groups.items():
        if len(members) < 2:
            continue
        members.sort(key=lambda member: (member.path, member.start))
        dup_groups.append((sizes[digest], members))
    # Outermost first: an enclosing copy is always bigger than what it encloses.
    dup_groups.sort(key=lambda group: (-group[0], group[1][0].path, group[1][0].start))

    findings = []
    reported = defaultdict(list)
    for size, members in dup_groups:
        if all(_contained(member, reported) for member in members):
            continue
        for member in members:
            reported[member.path].append((member.start, member.end))
        first, others = members[0], members[1:]
        elsewhere = ", ".join(f"{other.path}:{other.start}" for other in others)
        findings.append(finding(
            "duplication", first.path, first.start,
            f"{first.label} has {len(others)} structural cop{'y' if len(others) == 1 else 'ies'} "
            f"({size} nodes): {elsewhere}",
            [(f"{member.path}:{member.label}", member.start, member.end) for member in members],
        ))
    return findings
