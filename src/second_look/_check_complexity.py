"""Functions that nest deep, run long or branch a lot are doing more
than one level of work. Extract the inner levels into named helpers."""

from second_look._finding import finding


def check_complexity(rel, scores, args):
    findings = []
    for score in scores:
        span = [(score.name, score.lineno, score.end_lineno)]
        if score.depth > args.max_depth:
            findings.append(finding(
                "nesting", rel, score.lineno,
                f"{score.name} nests {score.depth} deep (limit {args.max_depth})", span,
            ))
        if score.statements > args.max_statements:
            findings.append(finding(
                "statements", rel, score.lineno,
                f"{score.name} has {score.statements} statements (limit {args.max_statements})", span,
            ))
        if score.branches > args.max_branches:
            findings.append(finding(
                "branches", rel, score.lineno,
                f"{score.name} has {score.branches} branches (limit {args.max_branches})", span,
            ))
    return findings
