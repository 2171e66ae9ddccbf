# runner.py
from __future__ import annotations

import io
import subprocess
import time
from pathlib import Path
from typing import IO, Iterable, Optional

from .model import FAILED, LAUNCH_FAILED, OK, PipelineResult, Step, StepResult
from .ui.console import Console, get_console


# keyed by the program that could not be started
TOOL_HINTS = {
    "cargo": "Install the Rust toolchain (https://rustup.rs) or fix PATH.",
    "rustup": "Install rustup (https://rustup.rs) or fix PATH.",
    "cargo-deny": "Install cargo-deny (cargo install --locked cargo-deny).",
}

# shell conventions
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126


def hint_for(step: Step) -> str | None:
    """Install hint for a step whose program could not be started."""
    return TOOL_HINTS.get(step.program)


def _check_sink(label: str, sink: Optional[IO]) -> None:
    """A child can only write to something with a real file descriptor."""
    if sink is None:
        return
    try:
        sink.fileno()
    except (AttributeError, io.UnsupportedOperation) as e:
        raise ValueError(
            f"{label} sink {sink!r} has no file descriptor; "
            "pass an open file or None to inherit"
        ) from e


def _exit_code(returncode: int) -> int:
    # killed by signal N -> 128+N, like a shell reports it
    if returncode < 0:
        return 128 - returncode
    return returncode


# ----------------------------------------------------------------------
# Execution primitives
# ----------------------------------------------------------------------

def run_step(
    step: Step,
    *,
    repo_root: Path,
    console: Console,
    stdout: Optional[IO] = None,
    stderr: Optional[IO] = None,
) -> StepResult:
    """
    Trace, run and wait for one step.

    `stdout`/`stderr` are passed straight to the child; None inherits ours.
    Never raises for a failing or missing tool: that comes back as a
    StepResult with kind FAILED or LAUNCH_FAILED. An unusable sink raises
    ValueError before anything is traced.
    """
    _check_sink("stdout", stdout)
    _check_sink("stderr", stderr)

    console.print_trace(step.display)
    # the trace must hit the terminal before anything the child writes
    console.flush()

    started = time.monotonic()
    cwd = (repo_root / (step.cwd or ".")).resolve()
    if not cwd.is_dir():
        console.print_launch_error(step.program, f"working directory not found: {cwd}")
        return StepResult(
            step=step,
            exit_code=1,
            kind=LAUNCH_FAILED,
            duration=time.monotonic() - started,
        )

    try:
        proc = subprocess.run(
            step.argv,
            shell=False,
            cwd=str(cwd),
            stdout=stdout,
            stderr=stderr,
        )
    except FileNotFoundError:
        console.print_launch_error(step.program, "command not found")
        return StepResult(
            step=step,
            exit_code=EXIT_NOT_FOUND,
            kind=LAUNCH_FAILED,
            duration=time.monotonic() - started,
        )
    except PermissionError:
        console.print_launch_error(step.program, "Permission denied")
        return StepResult(
            step=step,
            exit_code=EXIT_NOT_EXECUTABLE,
            kind=LAUNCH_FAILED,
            duration=time.monotonic() - started,
        )
    except OSError as e:
        console.print_launch_error(step.program, e.strerror or str(e))
        return StepResult(
            step=step,
            exit_code=1,
            kind=LAUNCH_FAILED,
            duration=time.monotonic() - started,
        )

    code = _exit_code(proc.returncode)
    return StepResult(
        step=step,
        exit_code=code,
        kind=OK if code == 0 else FAILED,
        duration=time.monotonic() - started,
    )


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------

def run_pipeline(
    steps: Iterable[Step],
    *,
    repo_root: str | Path = ".",
    console: Console | None = None,
    stdout: Optional[IO] = None,
    stderr: Optional[IO] = None,
) -> PipelineResult:
    """
    Run steps in order and stop at the first one that does not succeed.

    Returns a PipelineResult; `exit_code` on it is what the process should
    exit with. Prints the success confirmation once, only when every step
    passed.
    """
    steps = list(steps)
    if not steps:
        raise ValueError("Pipeline has no steps")
    _check_sink("stdout", stdout)
    _check_sink("stderr", stderr)

    console = console or get_console()
    repo_root_p = Path(repo_root).resolve()
    outcome = PipelineResult()

    for index, step in enumerate(steps):
        result = run_step(
            step,
            repo_root=repo_root_p,
            console=console,
            stdout=stdout,
            stderr=stderr,
        )
        outcome.results.append(result)

        if not result.ok:
            outcome.failed_at = index
            console.print_failure(
                step.name,
                reason=result.kind,
                exit_code=result.exit_code,
                hint=hint_for(step) if result.kind == LAUNCH_FAILED else None,
            )
            return outcome

        console.print_debug(f"{step.name}: ok ({result.duration:.1f}s)")

    console.print_success()
    return outcome
