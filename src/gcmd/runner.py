# runner.py
from __future__ import annotations

import os
import signal
import stat
import subprocess
import sys
from typing import IO, Optional

from .errors import StdinRequired, SubshellFailure
from .ui.console import get_console

DEFAULT_SHELL = "bash"


def stdin_is_piped(stream: Optional[IO] = None) -> bool:
    """
    True only when stdin is a pipe.

    A terminal, a redirected file, a closed stream or a stream with no file
    descriptor all count as "not piped".
    """
    stream = sys.stdin if stream is None else stream
    if stream is None:
        return False
    try:
        fd = stream.fileno()
        mode = os.fstat(fd).st_mode
    except (AttributeError, ValueError, OSError):
        # io.UnsupportedOperation is an OSError subclass
        return False
    return stat.S_ISFIFO(mode)


def _describe_exit(returncode: int) -> str:
    if returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"


def execute(pipeline: str, needs_stdin: bool = False, *, shell: str = DEFAULT_SHELL) -> int:
    """
    Run a saved pipeline through ``bash -c`` and wait for it.

    The child inherits our stdout/stderr file descriptors. It only sees our
    stdin when the recipe asked for it; otherwise it reads from /dev/null.

    Returns:
        0 on success

    Raises:
        StdinRequired: recipe needs stdin but nothing is piped in
        SubshellFailure: the shell could not be started or exited non-zero
    """
    console = get_console()

    if needs_stdin and not stdin_is_piped():
        raise StdinRequired("Command needs stdin")

    stdin = sys.stdin if needs_stdin else subprocess.DEVNULL
    argv = [shell, "-c", pipeline]
    console.print_debug(f"spawning: {argv!r}")

    try:
        proc = subprocess.run(argv, stdin=stdin, check=False)
    except FileNotFoundError as e:
        raise SubshellFailure(f"{shell}: {e.strerror or e}", exit_code=127, cmd=pipeline) from e
    except OSError as e:
        raise SubshellFailure(f"{shell}: {e}", exit_code=126, cmd=pipeline) from e

    if proc.returncode == 0:
        return 0

    code = proc.returncode if proc.returncode > 0 else 128 - proc.returncode
    raise SubshellFailure(_describe_exit(proc.returncode), exit_code=code, cmd=pipeline)
