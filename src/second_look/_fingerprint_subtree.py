"""Structural fingerprint of a subtree — what it does, not what it's called.

Two blocks that differ only in identifiers, literal values, docstrings
or formatting share a fingerprint. That is the definition of a copy
someone renamed and forgot to extract.
"""

import ast
import hashlib

# Fields holding identifiers — normalized so renames don't hide a copy.
_NAME_FIELDS = {"id", "arg", "attr", "name", "asname", "module"}
# Positions and load/store contexts carry no structure.
_SKIP_FIELDS = {"ctx", "type_comment", "kind"}


def _is_docstring(stmt):
    return (
        isinstance(stmt, ast.Expr)
        and isinstance(stmt.value, ast.Constant)
        and isinstance(stmt.value.value, str)
    )


def _emit(node, parts):
    """Append node's normalized tokens to parts, return its node count."""
    if isinstance(node, ast.Constant):
        parts.append(f"CONST:{type(node.value).__name__}")
        return 1

    parts.append(type(node).__name__)
    size = 1
    for field, value in ast.iter_fields(node):
        if field in _SKIP_FIELDS:
            continue
        if field in _NAME_FIELDS:
            parts.append("_" if value is not None else "-")
            continue
        if isinstance(value, list):
            items = value
            if field == "body" and items and _is_docstring(items[0]):
                items = items[1:]
            parts.append(f"[{field}")
            for item in items:
                if isinstance(item, ast.AST):
                    size += _emit(item, parts)
                else:
                    parts.append(repr(type(item).__name__))
            parts.append("]")
        elif isinstance(value, ast.AST):
            parts.append(f"{field}:")
            size += _emit(value, parts)
        elif value is not None:
            # Operator flags such as ImportFrom.level or comprehension.is_async.
            parts.append(f"{field}={value!r}")
    return size


def fingerprint_subtree(node):
    """Return (digest, size): a sha1 of the normalized subtree and its node count."""
    parts = []
    size = _emit(node, parts)
    digest = hashlib.sha1("|".join(parts).encode("utf-8")).hexdigest()
    return digest, size
