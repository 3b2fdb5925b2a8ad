"""Per-function scores for the single-level-of-abstraction heuristic.

A function that stays at one level of abstraction reads top to bottom:
it is shallow (depth), short (statements) and decides little (branches).
Each nested function is scored on its own and adds nothing to its parent.
"""

import ast
from collections import namedtuple

FunctionScore = namedtuple(
    "FunctionScore", ["name", "lineno", "end_lineno", "depth", "statements", "branches"]
)

_FUNCTIONS = (ast.FunctionDef, ast.AsyncFunctionDef)
_SCOPES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)
_LOOPS = (ast.For, ast.AsyncFor, ast.While)


def _own_body(fn):
    body = fn.body
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant) \
            and isinstance(body[0].value.value, str):
        return body[1:]
    return body


def _child_blocks(stmt):
    """Statement lists one level below a compound statement."""
    if isinstance(stmt, ast.If):
        # elif (or else holding a lone if) stays at the parent's level
        if len(stmt.orelse) == 1 and isinstance(stmt.orelse[0], ast.If):
            return [stmt.body], [stmt.orelse]
        return [stmt.body, stmt.orelse], []
    if isinstance(stmt, (ast.Try, ast.TryStar)):
        return [stmt.body, stmt.orelse, stmt.finalbody] + [handler.body for handler in stmt.handlers], []
    if isinstance(stmt, ast.Match):
        return [case.body for case in stmt.cases], []
    if isinstance(stmt, (*_LOOPS, ast.With, ast.AsyncWith)):
        return [stmt.body, getattr(stmt, "orelse", [])], []
    return [], []


def _depth(stmts, level):
    deepest = level
    for stmt in stmts:
        if isinstance(stmt, _SCOPES):
            continue
        nested, same_level = _child_blocks(stmt)
        for block in nested:
            deepest = max(deepest, _depth(block, level + 1))
        for block in same_level:
            deepest = max(deepest, _depth(block, level))
    return deepest


def _count_statements(stmts):
    total = 0
    for stmt in stmts:
        total += 1
        if isinstance(stmt, _SCOPES):
            continue
        nested, same_level = _child_blocks(stmt)
        for block in nested + same_level:
            total += _count_statements(block)
    return total


def _walk_own(stmts):
    """ast.walk over a body that stops at nested function and class definitions."""
    stack = list(stmts)
    while stack:
        child = stack.pop()
        if isinstance(child, _SCOPES):
            continue
        yield child
        stack.extend(ast.iter_child_nodes(child))


def _count_branches(fn):
    branches = 0
    for node in _walk_own(fn.body):
        if isinstance(node, (ast.If, ast.IfExp, ast.ExceptHandler, ast.match_case, *_LOOPS)):
            branches += 1
        elif isinstance(node, ast.comprehension):
            branches += 1 + len(node.ifs)
        elif isinstance(node, ast.BoolOp):
            branches += len(node.values) - 1
    return branches


def _functions(node, prefix):
    for child in ast.iter_child_nodes(node):
        if isinstance(child, _FUNCTIONS):
            qualname = prefix + child.name
            yield qualname, child
            yield from _functions(child, qualname + ".")
        elif isinstance(child, ast.ClassDef):
            yield from _functions(child, prefix + child.name + ".")
        else:
            yield from _functions(child, prefix)


def score_complexity(tree):
    """Score every function in the tree, in source order."""
    scores = []
    for qualname, fn in _functions(tree, ""):
        body = _own_body(fn)
        scores.append(FunctionScore(
            name=qualname,
            lineno=fn.lineno,
            end_lineno=fn.end_lineno or fn.lineno,
            depth=_depth(body, 0),
            statements=_count_statements(body),
            branches=_count_branches(fn),
        ))
    scores.sort(key=lambda score: score.lineno)
    return scores
