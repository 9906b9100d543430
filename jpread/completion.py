# SPDX-License-Identifier: GPL-3.0-only
"""Shell-facing side of JSONPath completion.

``complete_path`` never raises: a completion request that cannot be served
returns no candidates and tells the shell not to fall back to file names.
"""
from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

import argcomplete

from .sources import DocumentError, load_document
from .suggest import complete

logger = logging.getLogger(__name__)

SHELLS = ("bash", "zsh", "fish", "powershell")

class ShellDirective(enum.IntFlag):
    DEFAULT = 0
    ERROR = 1
    NO_SPACE = 2
    NO_FILE_COMP = 4

@dataclass(frozen=True)
class CompletionResult:
    candidates: Tuple[str, ...]
    directive: ShellDirective

def complete_path(file: Optional[str], partial: str) -> CompletionResult:
    logger.debug("completion requested for %r (file=%r)", partial, file)
    if not file:
        return CompletionResult((), ShellDirective.NO_FILE_COMP)
    try:
        document = load_document(file)
    except DocumentError as e:
        logger.debug("no completions: %s", e)
        return CompletionResult((), ShellDirective.NO_FILE_COMP)
    return CompletionResult(complete(document, partial), ShellDirective.NO_SPACE | ShellDirective.NO_FILE_COMP)

class JSONPathCompleter:
    """argcomplete completer for a JSONPath argument; reads ``--file`` from the parsed args."""

    def __call__(self, prefix: str, parsed_args: Any = None, **kwargs: Any) -> List[str]:
        file = getattr(parsed_args, "file", None)
        return list(complete_path(file, prefix).candidates)

def shellcode(shell: str, prog: str) -> str:
    if shell not in SHELLS:
        raise ValueError(f"unsupported shell type: {shell}")
    return argcomplete.shellcode([prog], shell=shell)
