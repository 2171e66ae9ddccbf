from .dsl import cmd, cargo, pipeline
from .runner import run_pipeline, run_step
from .model import Step, StepResult, PipelineResult
from .checks import default_steps

__all__ = [
    "cmd",
    "cargo",
    "pipeline",
    "run_pipeline",
    "run_step",
    "Step",
    "StepResult",
    "PipelineResult",
    "default_steps",
]
