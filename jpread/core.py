# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Union

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

# Distinct from JSON null: the walker could not descend.
NOT_FOUND: Any = object()

@dataclass(frozen=True)
class Token:
    key: str
    index: str = ""  # keeps its brackets, e.g. "[0]" or an open "[1"

    @staticmethod
    def split(segment: str) -> "Token":
        i = segment.find("[")
        if i == -1:
            return Token(segment)
        return Token(segment[:i], segment[i:])

    @property
    def has_index(self) -> bool:
        return bool(self.index)

    @property
    def is_empty(self) -> bool:
        return not self.key and not self.index

    @property
    def index_spec(self) -> str:
        return self.index.strip("[]")

    @property
    def index_prefix(self) -> str:
        return self.index.lstrip("[").split("]", 1)[0]

    @property
    def index_closed(self) -> bool:
        return "]" in self.index

    def render(self) -> str:
        return self.key + self.index

def tokenize(raw: str) -> List[Token]:
    path = raw[1:] if raw.startswith("$") else raw
    path = path[1:] if path.startswith(".") else path
    return [Token.split(seg) for seg in path.split(".")]

def join_tokens(tokens: Sequence[Token]) -> str:
    return ".".join(t.render() for t in tokens)
