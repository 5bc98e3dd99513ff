from __future__ import annotations

import argparse
import sys
from typing import TextIO

from . import __version__
from .book.preprocessor import GitPreprocessor
from .book.protocol import parse_input, write_book
from .core.context import RunContext
from .core.logging import log_event
from .core.serialize import dumps_json
from .errors import MdbookGitError
from .exit_codes import ERR_INTERNAL, ERR_UNSUPPORTED, OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="mdbook-git", description="mdbook preprocessor for displaying git files and diffs")
    p.add_argument("--version", action="version", version=f"mdbook-git {__version__}")
    p.add_argument("--run-id", help="run identifier stamped on log lines")
    p.add_argument("--log-json", action="store_true", help="emit log lines as JSON")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("--verbose", action="store_true", help="enable debug diagnostics")
    vg.add_argument("--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd")

    supports_p = sub.add_parser("supports", help="check whether a renderer is supported by this preprocessor")
    supports_p.add_argument("renderer")
    return p


def render_error(*, as_json: bool, message: str, code: int, kind: str, run_id: str) -> str:
    if as_json:
        return dumps_json(
            {
                "tool": "mdbook-git",
                "status": "error",
                "run_id": run_id,
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return message


def run_preprocessor(ctx: RunContext, stdin: TextIO, stdout: TextIO) -> int:
    pre = GitPreprocessor(ctx)
    book_ctx, book = parse_input(stdin)
    pre.check_version(book_ctx)
    processed = pre.run(book_ctx, book)
    write_book(processed, stdout)
    return OK


def main(argv: list[str] | None = None) -> int:
    ns = build_parser().parse_args(argv)
    ctx = RunContext.from_args(ns.run_id, ns.verbose, ns.quiet, ns.log_json)
    try:
        if ns.cmd == "supports":
            supported = GitPreprocessor(ctx).supports_renderer(ns.renderer)
            log_event(ctx, "debug", "cli", "supports", renderer=ns.renderer, supported=supported)
            return OK if supported else ERR_UNSUPPORTED
        log_event(ctx, "debug", "cli", "start", cmd="preprocess")
        return run_preprocessor(ctx, sys.stdin, sys.stdout)
    except MdbookGitError as exc:
        print(
            render_error(as_json=ctx.log_json, message=str(exc), code=exc.code, kind=exc.kind, run_id=ctx.run_id),
            file=sys.stderr,
        )
        return exc.code
    except Exception as exc:  # pragma: no cover
        print(
            render_error(
                as_json=ctx.log_json,
                message=f"internal error: {exc}",
                code=ERR_INTERNAL,
                kind="internal_error",
                run_id=ctx.run_id,
            ),
            file=sys.stderr,
        )
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
