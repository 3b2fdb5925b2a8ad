"""Readability advisor — scan Python code for the habits a style guide warns about.

Three heuristics, checked mechanically:

  Don't repeat yourself. Blocks that are the same code with the names
  changed are one idea living in several places.

  One level of abstraction per function. A function that nests deep,
  runs long or branches a lot is mixing its own job with its helpers'.

  Meaningful names. A name is the first documentation a reader gets.

second-look is advisory. It reports every finding and edits nothing.
The reader decides which findings are real debt; files they have
reviewed get marked with `# sl:vetted` and move to the acknowledged
section.

Usage:
    python3 -m second_look .                    # scan current dir
    python3 -m second_look . --strict           # exit 1 on unvetted findings
    python3 -m second_look . --ignore "test_*"  # skip patterns
    python3 -m second_look . --json             # machine-readable report
"""

import argparse
import os
import sys

from second_look._config import ConfigError, apply_config, load_config
from second_look._report import print_heuristics, print_report, render_json
from second_look._scanner import scan

__version__ = "0.1.0"
__all__ = ["main", "scan", "load_config", "apply_config", "print_report", "print_heuristics", "render_json"]


def _non_negative(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return value


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="second-look",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""\
second-look — readability advisor for Python code.

Scan: walks every .py file under a directory (or one file), runs 3
heuristics, reports findings. Files with '# sl:vetted' in the first 10
lines still show in output but are separated into the "vetted" section
and don't block --strict.

Rules:
  duplication — functions, classes or compound blocks that are
                structurally identical once names and literals are
                ignored (>= --dup-min-nodes nodes, >= --dup-min-lines lines).
                Only the outermost copy is reported.
  nesting     — function nests if/for/while/with/try/match deeper
                than --max-depth (elif does not nest)
  statements  — function body holds more than --max-statements statements
  branches    — function makes more than --max-branches decisions
  naming      — names that are too short, end in a counter (data2),
                or are mostly abbreviations (usr_mgr_cnt)
  parse       — file could not be read or parsed; other files still scan

Silencing:
  '# sl:ignore' on a finding's line silences it;
  '# sl:ignore[naming,nesting]' silences only those rules.

Config: [tool.second-look] in <path>/pyproject.toml (or --config FILE).
  Keys: max-depth, max-statements, max-branches, min-name-length,
  dup-min-nodes, dup-min-lines, ignore. Flags beat the file.

Exit status: 0 ok, 1 unvetted findings with --strict, 2 usage error.""",
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory or file to scan")
    parser.add_argument("--strict", action="store_true", help="CI gate — exit 1 on unvetted findings only")
    parser.add_argument("--ignore", action="append", default=[], help="Glob patterns to skip (e.g. 'test_*')")
    parser.add_argument("--max-depth", type=_non_negative, help="Max nesting depth per function (default: 3)")
    parser.add_argument("--max-statements", type=_non_negative, help="Max statements per function (default: 30)")
    parser.add_argument("--max-branches", type=_non_negative, help="Max branches per function (default: 10)")
    parser.add_argument("--min-name-length", type=_non_negative, help="Shortest acceptable name (default: 3)")
    parser.add_argument("--dup-min-nodes", type=_non_negative, help="Smallest copy worth reporting, in AST nodes (default: 40)")
    parser.add_argument("--dup-min-lines", type=_non_negative, help="Smallest copy worth reporting, in lines (default: 5)")
    parser.add_argument("--lines", action="store_true", help="Show line ranges behind each finding")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--config", metavar="FILE", help="TOML file holding [tool.second-look]")
    args = parser.parse_args(argv)

    root = os.path.abspath(args.path)
    if not os.path.exists(root):
        print(f"Error: {root} not found", file=sys.stderr)
        sys.exit(2)

    try:
        apply_config(args, load_config(root, args.config))
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if not args.json:
        print_heuristics(args)

    violations, vetted = scan(root, args)
    if args.json:
        print(render_json(root, violations, vetted, __version__))
    else:
        print_report(violations, vetted, lines=args.lines)

    if args.strict and violations:
        sys.exit(1)
