# cli.py
from __future__ import annotations

import sys

import click

from checkgate.checks import default_steps
from checkgate.runner import run_pipeline
from checkgate.ui.console import Console, set_console, get_console


@click.group(invoke_without_command=True)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Enable debug mode (failure details and stack traces on stderr)",
)
@click.pass_context
def cli(ctx, debug):
    """checkgate: run every local quality gate, stop at the first failure."""
    # Initialize console with debug flag
    console = Console(debug=debug)
    set_console(console)

    # bare `checkgate` behaves like `checkgate run`
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
def run():
    """Run all checks in order from the current directory."""
    console = get_console()

    try:
        result = run_pipeline(default_steps(), repo_root=".", console=console)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        console.print_exception(e)
        sys.exit(1)

    sys.exit(result.exit_code)


@cli.command("list")
def list_steps():
    """Print the checks in the order they run, without running them."""
    console = get_console()
    for index, step in enumerate(default_steps(), start=1):
        console.print_plan_step(index, step.name, step.display)


if __name__ == "__main__":
    cli()
