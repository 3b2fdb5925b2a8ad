"""Walk the project tree, apply every check, sort into buckets.  # sl:vetted

The scanner sees everything but judges nothing. Each file gets
measured against every heuristic. The sl:vetted mark decides which
bucket (violations vs vetted) a finding lands in, not whether the
check runs. Duplication runs last because it needs every file at once.
"""

import fnmatch
import os

from second_look._aggregate import aggregate_findings
from second_look._check_complexity import check_complexity
from second_look._check_duplication import check_duplication
from second_look._check_naming import check_naming
from second_look._heuristics import SKIP_DIRS, VETTED_MARK
from second_look._parse_source import parse_source
from second_look._score_complexity import score_complexity
from second_look._suppressions import line_suppressions


def _is_vetted(full):
    """True when a reviewer has signed the file off with sl:vetted.

    Looked for in the first 10 lines only: a vetting is a statement about
    the whole module and should be visible where the module starts.
    """
    try:
        with open(full, encoding="utf-8") as f:
            for _, line in zip(range(10), f):
                if VETTED_MARK in line:
                    return True
    except (OSError, UnicodeDecodeError):
        pass
    return False


def _ignored(fname, rel, patterns):
    return any(fnmatch.fnmatch(fname, pat) or fnmatch.fnmatch(rel, pat) for pat in patterns)


def _walk_sources(root, patterns):
    """Yield (full, rel) for every .py file under root, in sorted order."""
    if os.path.isfile(root):
        fname = os.path.basename(root)
        if fname.endswith(".py") and not _ignored(fname, fname, patterns):
            yield root, fname
        return
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in SKIP_DIRS)
        for fname in sorted(filenames):
            if not fname.endswith(".py"):
                continue
            full = os.path.join(dirpath, fname)
            rel = os.path.relpath(full, root).replace(os.sep, "/")
            if _ignored(fname, rel, patterns):
                continue
            yield full, rel


def scan(root, args):
    """Scan root (a directory or a single file), return (violations, vetted).

    Both lists hold Finding tuples, already aggregated. The only difference
    is whether the file carried sl:vetted; the checks are identical.
    """
    findings = []
    parsed_sources = []
    suppressions = {}
    vetted_paths = set()

    for full, rel in _walk_sources(root, args.ignore):
        if _is_vetted(full):
            vetted_paths.add(rel)
        parsed, error = parse_source(rel, full)
        if error:
            findings.append(error)
            continue
        parsed_sources.append(parsed)
        suppressions[rel] = line_suppressions(parsed.lines)
        findings.extend(check_complexity(rel, score_complexity(parsed.tree), args))
        findings.extend(check_naming(rel, parsed.tree, args))

    findings.extend(check_duplication(parsed_sources, args))

    merged = aggregate_findings(findings, suppressions)
    violations = [f for f in merged if f.path not in vetted_paths]
    vetted = [f for f in merged if f.path in vetted_paths]
    return violations, vetted
