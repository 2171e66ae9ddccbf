"""Console output formatting utilities for checkgate."""

from __future__ import annotations

import sys
from typing import IO, Optional


class Console:
    """Centralized console output formatting."""

    def __init__(
        self,
        debug: bool = False,
        stream: Optional[IO[str]] = None,
        err_stream: Optional[IO[str]] = None,
    ):
        """
        Initialize console formatter.

        Args:
            debug: If True, show failure details and stack traces
            stream: Where normal output goes (defaults to sys.stdout at print time)
            err_stream: Where errors go (defaults to sys.stderr at print time)
        """
        self.debug = debug
        self._stream = stream
        self._err_stream = err_stream

    @property
    def out(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def err(self) -> IO[str]:
        return self._err_stream if self._err_stream is not None else sys.stderr

    def flush(self) -> None:
        """Flush both streams so child processes write after us."""
        self.out.flush()
        self.err.flush()

    def print_trace(self, command: str) -> None:
        """Echo a command before it runs, like `set -x`."""
        print(f"+ {command}", file=self.out, flush=True)

    def print_success(self, message: str = "All checks passed!") -> None:
        """Print the final confirmation."""
        print(message, file=self.out, flush=True)

    def print_launch_error(self, program: str, reason: str) -> None:
        """Print the one-line error for a command that could not start."""
        print(f"checkgate: {program}: {reason}", file=self.err, flush=True)

    def print_failure(
        self,
        name: str,
        reason: str,
        exit_code: Optional[int] = None,
        hint: Optional[str] = None,
    ) -> None:
        """
        Print failure details (debug mode only).

        Args:
            name: Step name
            reason: Failure kind or message
            exit_code: Optional exit code
            hint: Optional hint for user
        """
        if not self.debug:
            return
        print(f"\nSTEP FAILED: {name}", file=self.err)
        if exit_code is not None:
            print(f"Exit code: {exit_code}", file=self.err)
        print(f"Reason: {reason}", file=self.err)
        if hint:
            print(f"Hint: {hint}", file=self.err)
        self.err.flush()

    def print_plan_step(self, index: int, name: str, command: str) -> None:
        """Print one line of the step plan."""
        print(f"  {index}. {name}: {command}", file=self.out)

    def print_exception(self, exc: Exception) -> None:
        """Print exception, with full traceback only in debug mode."""
        if self.debug:
            import traceback
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=self.err)
        else:
            print(f"Error: {exc}", file=self.err)

    def print_info(self, message: str) -> None:
        """Print informational message."""
        print(message, file=self.out)

    def print_debug(self, message: str) -> None:
        """Print debug message (only if debug mode enabled)."""
        if self.debug:
            print(f"[DEBUG] {message}", file=self.err)


# Global console instance (will be initialized by CLI)
_console: Optional[Console] = None


def get_console() -> Console:
    """Get the global console instance."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def set_console(console: Console) -> None:
    """Set the global console instance."""
    global _console
    _console = console
