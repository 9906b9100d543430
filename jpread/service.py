# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO

from .completion import complete_path, shellcode
from .query import QueryError, evaluate, render_json
from .settings import Settings, load_settings
from .sources import DocumentError, load_document

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_DOCUMENT = 3
EXIT_QUERY = 5

# ---- commands ----

def cmd_read(file: Optional[str], path: Optional[str], settings: Optional[Settings] = None, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    settings = settings or load_settings()
    if not file:
        logger.error("please specify a file using the -f or --file flag")
        return EXIT_USAGE
    try:
        document = load_document(file)
    except DocumentError as e:
        logger.error("%s", e)
        return EXIT_DOCUMENT
    if path is None:
        result = document
    else:
        try:
            result = evaluate(document, path)
        except QueryError as e:
            logger.error("error querying JSONPath: %s", e)
            return EXIT_QUERY
    out.write(render_json(result, indent=settings.indent, sort_keys=settings.sort_keys) + "\n")
    return EXIT_OK


def cmd_complete(file: Optional[str], partial: str, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    res = complete_path(file, partial)
    for c in res.candidates:
        out.write(c + "\n")
    out.write(f":{int(res.directive)}\n")
    logger.info("%d completions for %r", len(res.candidates), partial)
    return EXIT_OK


def cmd_completion(shell: str, prog: str, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    try:
        out.write(shellcode(shell, prog))
    except ValueError as e:
        logger.error(str(e))
        return EXIT_USAGE
    return EXIT_OK
