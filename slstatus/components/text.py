"""Components that produce text: files, commands, directories and clocks."""

from __future__ import annotations

import os
import subprocess
import time

from slstatus.util import read_first_line, warn

_BUFFER_SIZE = 1024
_LINE_LIMIT = _BUFFER_SIZE - 2


def cat(path: str) -> str | None:
    """Return the first line of the file at ``path``."""
    return read_first_line(path)


def run_command(cmd: str) -> str | None:
    """Run ``cmd`` through the shell and return the first line of its output."""
    try:
        completed = subprocess.run(cmd, shell=True, stdout=subprocess.PIPE, check=False)
    except OSError as exc:
        warn(f"popen '{cmd}': {exc.strerror or exc}")
        return None

    line = completed.stdout.decode("utf-8", errors="replace")[:_LINE_LIMIT]
    newline = line.find("\n")
    if newline >= 0:
        line = line[:newline]
    return line or None


def num_files(path: str) -> str | None:
    """Return the number of entries in the directory at ``path``."""
    try:
        entries = os.listdir(path)
    except OSError as exc:
        warn(f"opendir '{path}': {exc.strerror or exc}")
        return None
    return str(len(entries))


def datetime(fmt: str) -> str | None:
    """Format the current local time with ``fmt``."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result.encode("utf-8")) >= _BUFFER_SIZE:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result