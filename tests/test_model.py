from checkgate.dsl import cmd
from checkgate.model import FAILED, OK, PipelineResult, StepResult


def test_display_is_shell_quoted():
    s = cmd("Clippy", "cargo", "clippy", "--", "-W", "clippy::all", "two words")
    assert s.argv == ["cargo", "clippy", "--", "-W", "clippy::all", "two words"]
    assert s.display == "cargo clippy -- -W clippy::all 'two words'"


def test_empty_result_is_ok():
    r = PipelineResult()
    assert r.ok
    assert r.failure is None
    assert r.exit_code == 0


def test_failed_result_reports_failing_step():
    a = cmd("A", "true")
    b = cmd("B", "false")
    r = PipelineResult(
        results=[StepResult(a, 0, OK), StepResult(b, 3, FAILED)],
        failed_at=1,
    )
    assert not r.ok
    assert r.failure.step is b
    assert r.exit_code == 3


def test_failure_never_exits_zero():
    r = PipelineResult(results=[StepResult(cmd("A", "x"), 0, FAILED)], failed_at=0)
    assert r.exit_code != 0
