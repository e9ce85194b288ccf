"""Command line entry point: builds the status line and prints it periodically."""

from __future__ import annotations

import signal
import sys
import threading
import time
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from slstatus.registry import INTERVAL, MAXLEN, UNKNOWN_STR, Arg, default_args
from slstatus.util import warn

VERSION = "1.1"
_USAGE = "usage: slstatus [-v] [-s] [-1]"


@dataclass(frozen=True)
class Options:
    """Command line options: print to stdout, and stop after one update."""

    status_only: bool = False
    once: bool = False


def parse_args(argv: list[str]) -> Options:
    """Parse the arguments that follow the program name."""
    status_only = False
    once = False
    args = list(argv)
    while args and args[0].startswith("-") and len(args[0]) > 1:
        arg = args.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise SystemExit(f"slstatus-{VERSION}")
            if flag == "1":
                once = True
                status_only = True
            elif flag == "s":
                status_only = True
            else:
                raise SystemExit(_USAGE)
    if args:
        raise SystemExit(_USAGE)
    return Options(status_only=status_only, once=once)


def build_status(args: Iterable[Arg], unknown: str = UNKNOWN_STR, maxlen: int = MAXLEN) -> str:
    """Render every item into one line, stopping before it would exceed ``maxlen``."""
    parts: list[str] = []
    length = 0
    for arg in args:
        result = arg.func(arg.args)
        if result is None:
            result = unknown
        try:
            piece = arg.fmt % result
        except (TypeError, ValueError) as exc:
            warn(f"vsnprintf: {exc}")
            break
        size = len(piece.encode("utf-8"))
        if size >= maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += size
    return "".join(parts)


class _Loop:
    def __init__(self, once: bool) -> None:
        self.done = once
        self.wake = threading.Event()

    def terminate(self, signo, frame) -> None:
        if signo != signal.SIGUSR1:
            self.done = True
        self.wake.set()


def run(options: Options, args: list[Arg], interval: int = INTERVAL, out: Optional[TextIO] = None) -> None:
    """Write the status line every ``interval`` milliseconds until stopped."""
    if not options.status_only:
        raise SystemExit("XOpenDisplay: setting the root window name is not supported, use -s")
    out = sys.stdout if out is None else out
    loop = _Loop(options.once)

    previous = {}
    if threading.current_thread() is threading.main_thread():
        for signo in (signal.SIGINT, signal.SIGTERM, signal.SIGUSR1):
            previous[signo] = signal.signal(signo, loop.terminate)
    try:
        while True:
            start = time.monotonic()
            status = build_status(args)
            try:
                print(status, file=out)
                out.flush()
            except OSError as exc:
                raise SystemExit(f"puts: {exc.strerror or exc}") from exc

            if loop.done:
                break
            wait = interval / 1000 - (time.monotonic() - start)
            if wait >= 0:
                loop.wake.clear()
                loop.wake.wait(wait)
            if loop.done:
                break
    finally:
        for signo, handler in previous.items():
            signal.signal(signo, handler)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the status monitor with the default layout."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    run(options, default_args(), INTERVAL, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())