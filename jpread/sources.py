# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
import json
from pathlib import Path
from typing import Union
from .core import JSONValue

class DocumentError(ValueError):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason

def load_document(path: Union[str, Path]) -> JSONValue:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentError(p, f"cannot read file ({e})") from e
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(p, f"invalid JSON ({e})") from e
