"""Many checks, one report. Findings from every check are merged here:
suppressed ones dropped, repeats collapsed, the rest put in a stable
order so two scans of the same tree print the same report."""


def _is_suppressed(f, suppressions):
    rules = suppressions.get(f.path, {}).get(f.line)
    if not rules:
        return False
    return "*" in rules or f.rule in rules


def aggregate_findings(findings, suppressions=None):
    """Return findings de-duplicated and sorted by (path, line, rule, detail).

    suppressions maps path -> {line: rules} as built by line_suppressions.
    """
    suppressions = suppressions or {}
    seen = set()
    merged = []
    for f in findings:
        if _is_suppressed(f, suppressions):
            continue
        key = (f.rule, f.path, f.line, f.detail)
        if key in seen:
            continue
        seen.add(key)
        merged.append(f)
    merged.sort(key=lambda f: (f.path, f.line, f.rule, f.detail))
    return merged
