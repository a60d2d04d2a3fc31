import io
import os
import shutil
import sys

import pytest

from gcmd.errors import StdinRequired, SubshellFailure
from gcmd.runner import execute, stdin_is_piped

needs_bash = pytest.mark.skipif(shutil.which("bash") is None, reason="bash not installed")


@pytest.fixture
def piped_stdin(monkeypatch):
    """Replace sys.stdin with the read end of a pipe holding ``data``."""
    opened = []

    def _feed(data: str):
        r, w = os.pipe()
        os.write(w, data.encode())
        os.close(w)
        f = os.fdopen(r, "r")
        opened.append(f)
        monkeypatch.setattr(sys, "stdin", f)
        return f

    yield _feed
    for f in opened:
        f.close()


def test_stdin_is_piped_for_pipe(piped_stdin):
    piped_stdin("x")
    assert stdin_is_piped() is True


def test_stdin_is_not_piped_for_regular_file(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text("data")
    with p.open() as f:
        assert stdin_is_piped(f) is False


def test_needs_stdin_with_redirected_file_fails(tmp_path, monkeypatch):
    p = tmp_path / "input.txt"
    p.write_text("foo\n")
    with p.open() as f:
        monkeypatch.setattr(sys, "stdin", f)
        with pytest.raises(StdinRequired):
            execute("wc -l", needs_stdin=True)


def test_stdin_is_not_piped_without_fileno():
    assert stdin_is_piped(io.StringIO("data")) is False


def test_stdin_is_not_piped_when_closed(tmp_path):
    p = tmp_path / "input.txt"
    p.write_text("data")
    f = p.open()
    f.close()
    assert stdin_is_piped(f) is False


def test_needs_stdin_without_pipe_fails(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    with pytest.raises(StdinRequired, match="Command needs stdin"):
        execute("wc -l", needs_stdin=True)


@needs_bash
def test_execute_writes_to_inherited_stdout(capfd):
    assert execute("echo hi") == 0
    assert capfd.readouterr().out == "hi\n"


@needs_bash
def test_execute_pipes_stdin_through(piped_stdin, capfd):
    piped_stdin("foo\nbar\nfoo bar\n")
    assert execute("grep foo | wc -l", needs_stdin=True) == 0
    assert capfd.readouterr().out.strip() == "2"


@needs_bash
def test_execute_without_stdin_flag_reads_devnull(piped_stdin, capfd):
    piped_stdin("should not be read\n")
    assert execute("cat | wc -c") == 0
    assert capfd.readouterr().out.strip() == "0"


@needs_bash
def test_execute_propagates_exit_status():
    with pytest.raises(SubshellFailure) as exc:
        execute("exit 3")
    assert exc.value.exit_code == 3
    assert exc.value.message == "exit status 3"
    assert exc.value.cmd == "exit 3"


@needs_bash
def test_execute_reports_signal():
    with pytest.raises(SubshellFailure) as exc:
        execute("kill -TERM $$")
    assert exc.value.exit_code == 128 + 15
    assert exc.value.message == "signal: SIGTERM"


def test_execute_missing_shell():
    with pytest.raises(SubshellFailure) as exc:
        execute("true", shell="gcmd-no-such-shell")
    assert exc.value.exit_code == 127
