"""Inline opt-outs. '# sl:ignore' on a line silences every rule anchored
there; '# sl:ignore[naming,nesting]' silences only the listed rules.

The mark has to sit on the anchor line of the finding: the def line for
function-level rules, the first binding for naming, the first line of
the first copy for duplication.
"""

import re

from second_look._heuristics import IGNORE_MARK

_IGNORE = re.compile(r"#\s*" + re.escape(IGNORE_MARK) + r"(?:\[([\w\s,-]*)\])?")

# Rule set meaning every rule; checked as "*" in rules.
ALL_RULES = frozenset({"*"})


def line_suppressions(lines):
    """Map 1-based line number to the set of rules silenced on it."""
    silenced = {}
    for number, text in enumerate(lines, 1):
        if IGNORE_MARK not in text:
            continue
        match = _IGNORE.search(text)
        if not match:
            continue
        if match.group(1) is None:
            silenced[number] = ALL_RULES
        else:
            rules = {rule.strip() for rule in match.group(1).split(",") if rule.strip()}
            silenced[number] = frozenset(rules) or ALL_RULES
    return silenced
