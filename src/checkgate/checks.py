# checks.py
# The fixed check list. Cheap static checks come first so most failures
# surface before the slow test and audit steps start.
from __future__ import annotations

from typing import Tuple

from .dsl import cargo, pipeline
from .model import Step

WASM_TARGET = "wasm32-unknown-unknown"

# crates that must also build for the web target
WASM_CRATES = ("viewer", "logger")


def default_steps() -> Tuple[Step, ...]:
    wasm_packages: list[str] = []
    for crate in WASM_CRATES:
        wasm_packages.extend(["-p", crate])

    return pipeline(
        cargo("Check workspace", "check", "--workspace", "--all-targets"),
        cargo(
            "Check web target",
            "check", *wasm_packages, "--all-features", "--lib", "--target", WASM_TARGET,
        ),
        cargo("Format check", "fmt", "--all", "--", "--check"),
        cargo(
            "Clippy",
            "clippy", "--workspace", "--all-targets", "--all-features",
            "--", "-D", "warnings", "-W", "clippy::all",
        ),
        cargo("Tests", "test", "--workspace", "--all-targets", "--all-features"),
        cargo("Doc tests", "test", "--workspace", "--doc"),
        cargo("Dependency policy", "deny", "check"),
    )
