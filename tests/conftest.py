import sys
from pathlib import Path

import pytest

from checkgate.dsl import cmd


class FakeSteps:
    """Builds steps that run a tiny Python child and record that they ran."""

    def __init__(self, log: Path):
        self.log = log

    def __call__(self, name: str, code: int = 0):
        script = "; ".join([
            "import sys",
            f"open({str(self.log)!r}, 'a').write({name + chr(10)!r})",
            f"print('out:' + {name!r}, flush=True)",
            f"sys.exit({code})",
        ])
        return cmd(name, sys.executable, "-c", script)

    def invoked(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text().splitlines()


@pytest.fixture
def fake(tmp_path):
    return FakeSteps(tmp_path / "invoked.log")


@pytest.fixture
def missing_tool():
    return cmd("Missing tool", "checkgate-no-such-tool-7f3a", "--version")
