# SPDX-License-Identifier: GPL-3.0-only
"""JSONPath evaluation and JSON rendering for the ``read`` command."""
from __future__ import annotations
import json
from typing import Any

from jsonpath_ng import parse  # type: ignore[import-untyped]
from jsonpath_ng.exceptions import JSONPathError  # type: ignore[import-untyped]
from jsonpath_ng.jsonpath import (  # type: ignore[import-untyped]
    Child,
    Fields,
    Index,
    JSONPath,
    Root,
    This,
)

from .core import JSONValue

class QueryError(ValueError):
    pass

def _is_definite(expr: JSONPath) -> bool:
    """True when ``expr`` can match at most one node."""
    match expr:
        case Root() | This():
            return True
        case Fields():
            return len(expr.fields) == 1 and expr.fields[0] != "*"
        case Index():
            # older jsonpath-ng releases carry a single ``index``
            indices = getattr(expr, "indices", None)
            return indices is None or len(indices) == 1
        case Child():
            return _is_definite(expr.left) and _is_definite(expr.right)
        case _:
            return False

def compile_path(expression: str) -> JSONPath:
    if not expression:
        raise QueryError("empty JSONPath expression")
    try:
        return parse(expression)
    except JSONPathError as e:
        raise QueryError(f"invalid JSONPath {expression!r}: {e}") from e

def evaluate(document: JSONValue, expression: str) -> Any:
    """Single value for a definite path, list of values otherwise.

    Surrounding double quotes are trimmed from ``expression``.
    """
    expression = expression.strip('"')
    expr = compile_path(expression)
    values = [m.value for m in expr.find(document)]
    if not _is_definite(expr):
        return values
    if not values:
        raise QueryError(f"unknown key or index in {expression!r}")
    return values[0]

def render_json(value: Any, indent: int = 2, sort_keys: bool = False) -> str:
    return json.dumps(value, ensure_ascii=False, indent=indent, sort_keys=sort_keys)
