"""CLI entry-point for bottles.

Usage:
    python -m bottles render [--output FILE] [--fragment]
    python -m bottles verse <N> [--json]
    python -m bottles sing [--delay-ms MS] [--page FILE]
    python -m bottles serve [--host HOST] [--port PORT]
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from bottles import __version__
from bottles.constants import ADVANCE_DELAY_MS
from bottles.utils.exit_codes import ExitCode


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bottles",
        description="99 Bottles of Beer on the Wall, rendered and sung.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    sub = p.add_subparsers(dest="command")

    # ── render ──────────────────────────────────────────────────────
    render_p = sub.add_parser("render", help="Write the lyrics page as HTML.")
    render_p.add_argument(
        "--output",
        "-o",
        dest="output",
        type=Path,
        default=None,
        help="Write to FILE instead of stdout.",
    )
    render_p.add_argument(
        "--fragment",
        action="store_true",
        default=False,
        help="Emit only the <main> lyrics body, not the whole page.",
    )

    # ── verse ───────────────────────────────────────────────────────
    verse_p = sub.add_parser("verse", help="Print a single verse.")
    verse_p.add_argument("n", type=int, help="Bottle count, 0..99.")
    verse_p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the verse as JSON.",
    )

    # ── sing ────────────────────────────────────────────────────────
    sing_p = sub.add_parser("sing", help="Run the timed sing-along in the terminal.")
    sing_p.add_argument(
        "--delay-ms",
        dest="delay_ms",
        type=int,
        default=ADVANCE_DELAY_MS,
        help=f"Delay between verses (default {ADVANCE_DELAY_MS}).",
    )
    sing_p.add_argument(
        "--page",
        dest="page",
        type=Path,
        default=None,
        help="Sing along an existing rendered page instead of a fresh one.",
    )

    # ── serve ───────────────────────────────────────────────────────
    serve_p = sub.add_parser("serve", help="Serve the page over HTTP.")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    return p


def _handle_render(args: argparse.Namespace) -> int:
    """Dispatch ``bottles render``."""
    from bottles.lyrics import generate_lyrics, render_page

    output = generate_lyrics() if args.fragment else render_page()

    if args.output:
        out: Path = args.output
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"error: cannot write {out}: {e}", file=sys.stderr)
            return ExitCode.ERROR
        print(f"Page written to {out}", file=sys.stderr)
    else:
        print(output)
    return ExitCode.SUCCESS


def _handle_verse(args: argparse.Namespace) -> int:
    """Dispatch ``bottles verse <N>``."""
    from bottles.model.verse import Verse

    try:
        verse = Verse(args.n)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        print(json.dumps(verse.to_dict(), indent=2))
    else:
        print("\n".join(verse.lines))
    return ExitCode.SUCCESS


async def _sing(controller) -> None:
    from bottles.model import SessionState

    done = asyncio.Event()
    controller.on_state_change = (
        lambda state: done.set() if state is SessionState.IDLE else None
    )
    controller.toggle()
    if controller.state is SessionState.IDLE:
        return
    await done.wait()


def _handle_sing(args: argparse.Namespace) -> int:
    """Dispatch ``bottles sing``."""
    from bottles.lyrics import render_page
    from bottles.singalong import Document, LoopScheduler, SingAlongController

    if args.delay_ms < 0:
        print("error: --delay-ms must be non-negative", file=sys.stderr)
        return ExitCode.ERROR

    if args.page:
        try:
            markup = args.page.read_text(encoding="utf-8")
        except OSError as e:
            print(f"error: cannot read {args.page}: {e}", file=sys.stderr)
            return ExitCode.ERROR
    else:
        markup = render_page()

    document = Document.from_html(markup)

    def _print_verse(verse) -> None:
        body = document.get_element_by_id(verse.get_attribute("aria-describedby") or "")
        print((body or verse).text + "\n", flush=True)

    controller = SingAlongController(
        document,
        LoopScheduler(),
        delay_ms=args.delay_ms,
        on_highlight=_print_verse,
    )
    if not controller.enabled:
        print("error: no verses found; sing-along disabled", file=sys.stderr)
        return ExitCode.ERROR

    try:
        asyncio.run(_sing(controller))
    except KeyboardInterrupt:
        controller.stop()
        print("Sing-along stopped.", file=sys.stderr)
        return ExitCode.SUCCESS

    if controller.last_error:
        print(f"warning: {controller.last_error}", file=sys.stderr)
        return ExitCode.INCOMPLETE
    return ExitCode.SUCCESS


def _handle_serve(args: argparse.Namespace) -> int:
    """Dispatch ``bottles serve``."""
    import uvicorn

    from bottles.web_api.config import settings

    uvicorn.run(
        "bottles.web_api.main:app",
        host=args.host or settings.HOST,
        port=args.port or settings.PORT,
    )
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (see ``bottles.utils.exit_codes``)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    handlers = {
        "render": _handle_render,
        "verse": _handle_verse,
        "sing": _handle_sing,
        "serve": _handle_serve,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help(sys.stderr)
        return ExitCode.ERROR
    return int(handler(args))


if __name__ == "__main__":
    raise SystemExit(main())
