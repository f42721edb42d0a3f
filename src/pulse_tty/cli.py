"""
CLI entry point — ask one question from a shell script and print the answer.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import List, Optional

import typer
from rich.console import Console

from . import prompts
from .config import APP_NAME, VERSION, PromptConfig, load_config
from .prompt import PromptCancelled
from .terminal import ProcessTerminal

app = typer.Typer(
    name=APP_NAME,
    help="Interactive terminal prompts for shell scripts",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


def _config(ctx: typer.Context) -> PromptConfig:
    return ctx.obj if isinstance(ctx.obj, PromptConfig) else load_config()


def _prompt_options(ctx: typer.Context) -> dict:
    # Frames go to stderr so `answer=$(pulse-tty ...)` captures only the answer
    config = _config(ctx)
    terminal = ProcessTerminal(stdout=sys.stderr, write_log=config.write_log)
    return {"terminal": terminal, "config": config}


def _emit(value: object, json_out: bool) -> None:
    # console.out: no markup, no soft wrapping at the console width
    console.out(json.dumps(value, ensure_ascii=False) if json_out else str(value), highlight=False)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"{APP_NAME} {VERSION}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    fallback: bool = typer.Option(False, "--fallback", help="Always use line-based prompts"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit",
    ),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )
    config = load_config()
    if fallback:
        config.force_fallback = True
    ctx.obj = config


@app.command("select")
def select_cmd(
    ctx: typer.Context,
    question: str = typer.Argument(..., help="Question to ask"),
    options: List[str] = typer.Argument(..., help="Options to choose from"),
    default: int = typer.Option(1, "--default", "-d", help="1-based default option"),
    value: bool = typer.Option(False, "--value", help="Print the option text instead of its index"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Choose one option; prints its 1-based index."""
    index = _ask(lambda: prompts.select(question, options, default - 1, **_prompt_options(ctx)))
    _emit(options[index] if value else index + 1, json_out)


@app.command("input")
def input_cmd(
    ctx: typer.Context,
    question: str = typer.Argument(..., help="Question to ask"),
    default: str = typer.Option("", "--default", "-d", help="Answer used when left blank"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Read one line of text."""
    _emit(_ask(lambda: prompts.input(question, default, **_prompt_options(ctx))), json_out)


@app.command("rating")
def rating_cmd(
    ctx: typer.Context,
    question: str = typer.Argument(..., help="Question to ask"),
    minimum: int = typer.Option(1, "--min", help="Lowest value"),
    maximum: int = typer.Option(5, "--max", help="Highest value"),
    default: int = typer.Option(3, "--default", "-d", help="Starting value"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Pick a value on a scale."""
    if minimum > maximum:
        err_console.print(f"[red]--min ({minimum}) must not exceed --max ({maximum})[/red]")
        raise typer.Exit(2)
    _emit(_ask(lambda: prompts.rating(question, minimum, maximum, default, **_prompt_options(ctx))), json_out)


@app.command("confirm")
def confirm_cmd(
    ctx: typer.Context,
    question: str = typer.Argument(..., help="Question to ask"),
    default: bool = typer.Option(False, "--default/--no-default", help="Answer used when left blank"),
    json_out: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Ask a yes/no question; exit status 0 for yes, 1 for no."""
    answer = _ask(lambda: prompts.confirm(question, default, **_prompt_options(ctx)))
    _emit(answer if json_out else ("yes" if answer else "no"), json_out)
    if not answer:
        raise typer.Exit(1)


def _ask(fn):
    try:
        return fn()
    except PromptCancelled as e:
        raise typer.Exit(e.exit_code) from None


def main() -> None:
    """Main CLI entrypoint."""
    app()


if __name__ == "__main__":
    main()
