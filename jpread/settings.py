# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

DEFAULT_INDENT = 2
SETTINGS_FILE = ".jpread.json"
TRUTHY = {"1", "true", "yes", "on"}

@dataclass(frozen=True)
class Settings:
    indent: int = DEFAULT_INDENT
    sort_keys: bool = False
    debug: bool = False

def settings_path() -> Path:
    return Path(SETTINGS_FILE)

def _read_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        obj = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return obj if isinstance(obj, dict) else {}

def _from_mapping(base: Settings, obj: Mapping[str, Any]) -> Settings:
    indent = obj.get("indent")
    sort_keys = obj.get("sort_keys")
    debug = obj.get("debug")
    return replace(
        base,
        indent=indent if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0 else base.indent,
        sort_keys=sort_keys if isinstance(sort_keys, bool) else base.sort_keys,
        debug=debug if isinstance(debug, bool) else base.debug,
    )

def _from_environ(base: Settings, environ: Mapping[str, str]) -> Settings:
    s = base
    raw_indent = environ.get("JPREAD_INDENT")
    if raw_indent is not None and raw_indent.strip().isdigit():
        s = replace(s, indent=int(raw_indent))
    if "JPREAD_SORT_KEYS" in environ:
        s = replace(s, sort_keys=environ["JPREAD_SORT_KEYS"].strip().lower() in TRUTHY)
    if "JPREAD_DEBUG" in environ:
        s = replace(s, debug=environ["JPREAD_DEBUG"].strip().lower() in TRUTHY)
    return s

def load_settings(path: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    s = _from_mapping(Settings(), _read_file(path or settings_path()))
    return _from_environ(s, os.environ if environ is None else environ)
