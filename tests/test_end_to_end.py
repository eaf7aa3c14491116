"""End-to-end tests: run ``python -m urlargs`` as a real process.

These are the only tests that start real programs.  They rely on
POSIX utilities (``echo``, ``cat``, ``grep``) and on exec semantics,
so they are skipped elsewhere.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(os.name != "posix", reason="POSIX process model required")

_SRC = Path(__file__).resolve().parents[1] / "src"


def _env() -> dict[str, str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(_SRC), env.get("PYTHONPATH")]))
    return env


def _urlargs(*argv: str, stdin: bytes = b"") -> subprocess.CompletedProcess[bytes]:
    return subprocess.run(
        [sys.executable, "-m", "urlargs", *argv],
        input=stdin,
        capture_output=True,
        env=_env(),
        timeout=30,
    )


# ---------------------------------------------------------------------------
# Execution
# ---------------------------------------------------------------------------

class TestExecution:
    def test_decoded_argument_reaches_target(self) -> None:
        result = _urlargs("echo", "hello%20world")
        assert result.returncode == 0
        assert result.stdout == b"hello world\n"

    def test_multiple_arguments(self) -> None:
        result = _urlargs("echo", "first%20arg", "second%20arg")
        assert result.stdout == b"first arg second arg\n"

    def test_special_characters(self) -> None:
        result = _urlargs("echo", "%22quoted%22%3B%20%24HOME%20%60x%60")
        assert result.stdout == b'"quoted"; $HOME `x`\n'

    def test_newline_in_argument(self) -> None:
        result = _urlargs("echo", "hello%0Aworld")
        assert result.stdout == b"hello\nworld\n"

    def test_double_encoding_decoded_once(self) -> None:
        assert _urlargs("echo", "double%2520encoded").stdout == b"double%20encoded\n"

    def test_escaped_percent(self) -> None:
        assert _urlargs("echo", "100%25%20complete").stdout == b"100% complete\n"

    def test_malformed_escapes_pass_through(self) -> None:
        result = _urlargs("echo", "invalid%20at%20the%20end%")
        assert result.stdout == b"invalid at the end%\n"

    def test_empty_argument(self) -> None:
        assert _urlargs("echo", "").stdout == b"\n"

    def test_utf8_argument(self) -> None:
        assert _urlargs("echo", "caf%C3%A9").stdout == "café\n".encode()

    def test_target_exit_status_propagated(self) -> None:
        result = _urlargs(sys.executable, "-c", "import%20sys%3B%20sys.exit(7)")
        assert result.returncode == 7

    def test_stdin_inherited_without_filter(self) -> None:
        result = _urlargs("cat", stdin=b"raw%20text\n")
        assert result.stdout == b"raw%20text\n"


# ---------------------------------------------------------------------------
# Dry run
# ---------------------------------------------------------------------------

class TestDryRun:
    def test_preview_output(self) -> None:
        result = _urlargs("--dry-run", "echo", "arg1%20space", "arg2")

        assert result.returncode == 0
        lines = result.stdout.decode().splitlines()
        assert "Command: echo" in lines
        assert "Arg 1: 'arg1 space'" in lines
        assert "Arg 2: 'arg2'" in lines

    def test_preview_does_not_run(self, tmp_path: Path) -> None:
        marker = tmp_path / "ran"
        result = _urlargs("--preview", "touch", str(marker))

        assert result.returncode == 0
        assert not marker.exists()


# ---------------------------------------------------------------------------
# Filter mode
# ---------------------------------------------------------------------------

class TestFilter:
    def test_stream_to_stdout(self) -> None:
        result = _urlargs("--filter", stdin=b"line1%20one\nline2%20two\n")

        assert result.returncode == 0
        assert result.stdout == b"line1 one\nline2 two\n"

    def test_empty_input(self) -> None:
        result = _urlargs("--filter", stdin=b"")
        assert (result.returncode, result.stdout) == (0, b"")

    def test_decoded_stdin_fed_to_target(self) -> None:
        result = _urlargs("--filter", "cat", stdin=b"hello%20from%20input\n")
        assert result.stdout == b"hello from input\n"

    def test_arguments_and_stdin_decoded(self) -> None:
        result = _urlargs("--filter", "grep", "wor%6Cd", stdin=b"hello%20world\nother\n")
        assert result.stdout == b"hello world\n"

    def test_reader_closing_early_is_quiet(self, tmp_path: Path) -> None:
        source = tmp_path / "input"
        source.write_bytes(b"a%20b\n" * 500_000)

        with source.open("rb") as stdin:
            process = subprocess.Popen(
                [sys.executable, "-m", "urlargs", "--filter"],
                stdin=stdin,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                env=_env(),
            )
            assert process.stdout is not None and process.stderr is not None
            first = process.stdout.readline()
            process.stdout.close()
            stderr = process.stderr.read()
            returncode = process.wait(timeout=30)

        assert first == b"a b\n"
        assert returncode == 141
        assert stderr == b""


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestFailures:
    def test_no_arguments(self) -> None:
        result = _urlargs()

        assert result.returncode != 0
        assert b"No executable specified" in result.stderr
        assert result.stdout == b""

    def test_nonexistent_executable(self) -> None:
        result = _urlargs("nonexistentcommand-urlargs", "foo")

        assert result.returncode == 127
        assert b"nonexistentcommand-urlargs" in result.stderr

    def test_unknown_option(self) -> None:
        result = _urlargs("--bogus", "echo", "x")

        assert result.returncode == 2
        assert b"Unknown option: --bogus" in result.stderr
        assert result.stdout == b""

    def test_help(self) -> None:
        result = _urlargs("--help")

        assert result.returncode == 0
        assert b"--filter" in result.stdout

    def test_malformed_option(self) -> None:
        result = _urlargs("--dry-run=1", "echo", "x")

        assert result.returncode == 2
        assert b"Error:" in result.stderr
        assert b"ignored explicit argument" in result.stderr
        assert b"--help" in result.stderr
        assert result.stdout == b""

    def test_nul_byte_argument(self) -> None:
        result = _urlargs("echo", "a%00b")

        assert result.returncode == 126
        assert b"NUL byte" in result.stderr
        assert b"%00" in result.stderr
        assert b"Unexpected" not in result.stderr
