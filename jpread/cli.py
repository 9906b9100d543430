# SPDX-License-Identifier: GPL-3.0-only
from __future__ import annotations
import argparse
import logging
from typing import Optional, Sequence

import argcomplete
from argcomplete.completers import FilesCompleter

from . import __version__
from .completion import SHELLS, JSONPathCompleter
from .service import cmd_complete, cmd_completion, cmd_read
from .settings import load_settings

PROG = "jpread"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG, description="Read a JSON file and query it using a JSONPath expression")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="count", default=0, help="More logging on stderr (repeatable)")
    sub = p.add_subparsers(dest="cmd", required=True)

    pr = sub.add_parser("read", help="Print the JSON file, or the part of it matched by PATH")
    pr.add_argument("-f", "--file", required=True, help="Path to the JSON file").completer = FilesCompleter(allowednames=("json",))  # type: ignore[attr-defined]
    pr.add_argument("path", nargs="?", help="JSONPath expression, e.g. '$.book[0].title'").completer = JSONPathCompleter()  # type: ignore[attr-defined]

    pc = sub.add_parser("complete", help="Print JSONPath completions for PARTIAL, then ':DIRECTIVE'")
    pc.add_argument("-f", "--file", required=True, help="Path to the JSON file").completer = FilesCompleter(allowednames=("json",))  # type: ignore[attr-defined]
    pc.add_argument("partial", nargs="?", default="")

    ps = sub.add_parser("completion", help="Generate completion script")
    ps.add_argument("shell", choices=SHELLS)
    return p

def _setup_logging(verbose: int, debug: bool) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    if verbose >= 2 or debug:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

def main(argv: Optional[Sequence[str]] = None) -> int:
    p = build_parser()
    # path completions are usually prefixes the user keeps extending
    argcomplete.autocomplete(p, append_space=False)
    args = p.parse_args(argv)

    settings = load_settings()
    _setup_logging(args.verbose, settings.debug)

    if args.cmd == "read":
        return cmd_read(args.file, args.path, settings)
    if args.cmd == "complete":
        return cmd_complete(args.file, args.partial)
    if args.cmd == "completion":
        return cmd_completion(args.shell, PROG)
    return 2

if __name__ == "__main__":
    raise SystemExit(main())
