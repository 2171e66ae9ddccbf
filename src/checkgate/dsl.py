# dsl.py
from __future__ import annotations

from typing import Tuple

from .model import Step


# ---------------------------------------------------------------------
# Step helpers
# ---------------------------------------------------------------------

def cmd(name: str, program: str, *args: str, cwd: str | None = None) -> Step:
    """Create a step that runs `program` with `args` (no shell involved)."""
    if not program:
        raise ValueError(f"cmd({name!r}) needs a program to run")
    return Step(name=name, program=program, args=tuple(str(a) for a in args), cwd=cwd)


def cargo(name: str, *args: str, cwd: str | None = None) -> Step:
    """Shorthand for `cmd(name, "cargo", ...)`."""
    return cmd(name, "cargo", *args, cwd=cwd)


# ---------------------------------------------------------------------
# Pipeline helper
# ---------------------------------------------------------------------

def pipeline(*steps: Step) -> Tuple[Step, ...]:
    """
    Freeze an ordered list of steps.

    Usage:
        from checkgate.dsl import pipeline, cmd

        STEPS = pipeline(
            cmd("Lint", "ruff", "check", "."),
            cmd("Tests", "pytest", "-q"),
        )

    Order is execution order; the runner stops at the first failure.
    """
    if not steps:
        raise ValueError("pipeline() must have at least one step")

    names = [s.name for s in steps]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"Duplicate step names found: {dupes}")

    return tuple(steps)
