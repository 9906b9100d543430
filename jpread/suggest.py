# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
import logging
from typing import Any, List, Sequence, Tuple
from .core import NOT_FOUND, JSONValue, Token, tokenize
from .walker import resolve_key, walk

logger = logging.getLogger(__name__)

QUOTE = '"'
WILDCARD = "*"

def strip_quotes(raw: str) -> Tuple[str, bool]:
    quoted = False
    if raw.startswith(QUOTE):
        raw = raw[1:]
        quoted = True
    if QUOTE in raw:
        raw = raw.replace(QUOTE, "")
        quoted = True
    return raw, quoted

def _extend(original: str, typed: str, candidates: Sequence[str], exact: bool = False) -> List[str]:
    out: List[str] = []
    for c in candidates:
        if exact:
            if c == typed:
                out.append(original)
        elif c.startswith(typed):
            out.append(original + c[len(typed):])
    return out

def _array_candidates(node: List[Any]) -> List[str]:
    return [str(i) for i in range(len(node))] + [WILDCARD]

def suggest(resting: Any, last: Token, original: str) -> Tuple[str, ...]:
    """Continuations of ``original`` that are valid below ``resting``.

    ``last`` is the incomplete final token; only the part of it not yet typed
    is appended to ``original``.
    """
    if resting is NOT_FOUND:
        return ()
    if last.has_index:
        node = resolve_key(resting, last.key) if last.key else resting
        if not isinstance(node, list):
            return ()
        return tuple(_extend(original, last.index_prefix, _array_candidates(node), exact=last.index_closed))
    if isinstance(resting, dict):
        return tuple(_extend(original, last.key, list(resting)))
    if isinstance(resting, list):
        return tuple(_extend(original, last.key, _array_candidates(resting)))
    return ()

def complete(document: JSONValue, raw: str) -> Tuple[str, ...]:
    text, quoted = strip_quotes(raw)
    tokens = tokenize(text)
    resting = walk(document, tokens[:-1])
    if resting is NOT_FOUND:
        logger.debug("no value at %r", text)
    found = suggest(resting, tokens[-1], text)
    if quoted:
        return tuple(QUOTE + s for s in found)
    return found
