# SPDX-License-Identifier: GPL-3.0-only
"""Deterministic descent through a parsed JSON document.

Every step either narrows the current value or yields ``NOT_FOUND``; the
document itself is only ever read.
"""
from __future__ import annotations
from typing import Any, Iterable
from .core import NOT_FOUND, JSONValue, Token

def resolve_key(node: Any, key: str) -> Any:
    if isinstance(node, dict) and key in node:
        return node[key]
    return NOT_FOUND

def resolve_index(node: Any, spec: str) -> Any:
    """Resolve a bracket-trimmed index spec (``"3"`` or ``"*"``) against an array."""
    if not isinstance(node, list):
        return NOT_FOUND
    if spec == "*":
        # wildcard keeps the array as is
        return node
    if not (spec.isascii() and spec.isdigit()):
        return NOT_FOUND
    digits = spec.lstrip("0")
    # more digits than the length has cannot be in range
    if len(digits) > len(str(len(node))):
        return NOT_FOUND
    i = int(digits or "0")
    if i >= len(node):
        return NOT_FOUND
    return node[i]

def step(node: Any, token: Token) -> Any:
    if token.is_empty:
        return node
    if token.has_index:
        if token.key:
            node = resolve_key(node, token.key)
            if node is NOT_FOUND:
                return NOT_FOUND
        return resolve_index(node, token.index_spec)
    return resolve_key(node, token.key)

def walk(root: JSONValue, tokens: Iterable[Token]) -> Any:
    node: Any = root
    for t in tokens:
        node = step(node, t)
        if node is NOT_FOUND:
            return NOT_FOUND
    return node
