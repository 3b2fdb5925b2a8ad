"""Source text in, syntax tree out. The only place files get parsed.

A file that cannot be read or parsed is not fatal: it comes back as a
'parse' finding so the rest of the scan carries on.
"""

import ast
from collections import namedtuple

from second_look._finding import finding

ParsedSource = namedtuple("ParsedSource", ["rel", "source", "lines", "tree"])


def parse_source(rel, full):
    """Return (ParsedSource, None) or (None, parse finding)."""
    try:
        with open(full, encoding="utf-8") as f:
            source = f.read()
        tree = ast.parse(source, rel)
    except SyntaxError as e:
        line = e.lineno or 1
        return None, finding("parse", rel, line, f"cannot parse: {e.msg}")
    except (UnicodeDecodeError, ValueError) as e:
        return None, finding("parse", rel, 1, f"cannot decode: {e}")
    except OSError as e:
        return None, finding("parse", rel, 1, f"cannot read: {e.strerror or e}")
    return ParsedSource(rel, source, source.splitlines(), tree), None
