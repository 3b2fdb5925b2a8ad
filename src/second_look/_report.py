"""How second-look communicates: heuristics first, then the findings."""  # sl:vetted

import json
from collections import Counter

from second_look._heuristics import HEURISTICS, VETTED_MARK


def print_heuristics(args):
    """State the heuristics before applying them, no secret rules."""
    print("Heuristics:")
    for i, heuristic in enumerate(HEURISTICS, 1):
        print(f"  {i}. {heuristic}")
    # Thresholds are configurable, so print the active values.
    print(
        f"  Limits: depth ≤{args.max_depth}, statements ≤{args.max_statements}, "
        f"branches ≤{args.max_branches}, names ≥{args.min_name_length} chars, "
        f"copies ≥{args.dup_min_nodes} nodes / {args.dup_min_lines} lines"
    )
    print()


def _print_spans(spans, indent):
    for label, start, end in spans:
        print(f"{'':>{indent}}  {label:<30s} L{start}-L{end}")


def print_report(violations, vetted, lines=False):
    """Two sections: unvetted (actionable) and vetted (acknowledged).
    Everything is visible, nothing hides. --strict only counts unvetted."""
    if not violations and not vetted:
        print("No findings.")
        return

    if violations:
        by_rule = {}
        for f in violations:
            by_rule.setdefault(f.rule, []).append(f)

        print(f"\n{'Rule':<12}  {'Count':>5}  Detail")
        print("-" * 80)
        for rule, entries in sorted(by_rule.items()):
            for i, f in enumerate(entries):
                label = rule if i == 0 else ""
                count = str(len(entries)) if i == 0 else ""
                print(f"{label:<12}  {count:>5}  {f.detail}")
                if lines and f.spans:
                    _print_spans(f.spans, 20)
        print(f"\n{len(violations)} finding(s)")
        print(f"To silence one line: '# sl:ignore[rule]'. To vet a file: '# {VETTED_MARK}' in its first 10 lines.")

    if vetted:
        print(f"\n--- vetted ({len(vetted)}) ---")
        for f in vetted:
            print(f"  {f.detail}")
            if lines and f.spans:
                _print_spans(f.spans, 4)

    if not violations:
        print("No unvetted findings.")


def _as_dict(f):
    return {
        "rule": f.rule,
        "path": f.path,
        "line": f.line,
        "detail": f.detail,
        "spans": [{"label": label, "start": start, "end": end} for label, start, end in f.spans],
    }


def render_json(root, violations, vetted, version):
    """The same report as one JSON document, for CI and editors."""
    return json.dumps({
        "version": version,
        "root": root,
        "violations": [_as_dict(f) for f in violations],
        "vetted": [_as_dict(f) for f in vetted],
        "summary": dict(sorted(Counter(f.rule for f in violations).items())),
    }, indent=2)
