"""
Command-line interface for calcyard.

Provides commands for:
- Evaluating expressions
- Inspecting the token and postfix sequences
- An interactive calculator session
- Running the API server
"""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from calcyard.config import apply_overrides, load_yaml_config, settings
from calcyard.errors import EvaluationError
from calcyard.log import configure_logging

app = typer.Typer(
    name="calcyard",
    help="calcyard - arithmetic expression evaluator",
    add_completion=False,
)

console = Console()


@app.callback()
def main(
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML settings file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level"),
):
    """Load settings and configure logging before any command runs."""
    overrides = load_yaml_config(config) if config else {}
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        try:
            apply_overrides(overrides)
        except ValidationError as e:
            for error in e.errors():
                field = ".".join(str(part) for part in error["loc"])
                console.print(f"[red]✗ Invalid setting {field}:[/] {error['msg']}")
            raise typer.Exit(2)
    configure_logging(settings.log_level, settings.log_json)


def _print_error(error: EvaluationError) -> None:
    console.print(f"[red]✗ {error.kind.value}:[/] {error.message}")


# =============================================================================
# Evaluation Commands
# =============================================================================

@app.command("eval")
def eval_command(
    expression: str = typer.Argument(..., help="Expression to evaluate"),
):
    """Evaluate an expression and print the result."""
    from calcyard.engine import evaluate
    from calcyard.formatting import format_result

    try:
        result = evaluate(expression)
    except EvaluationError as e:
        _print_error(e)
        raise typer.Exit(1)

    console.print(format_result(result))


@app.command()
def rpn(
    expression: str = typer.Argument(..., help="Expression to inspect"),
):
    """Show the tokens and postfix order of an expression."""
    from calcyard.engine import trace
    from calcyard.formatting import format_result
    from calcyard.tokens import render

    try:
        stages = trace(expression)
    except EvaluationError as e:
        _print_error(e)
        raise typer.Exit(1)

    table = Table(title="Tokens")
    table.add_column("#", style="dim")
    table.add_column("Kind", style="magenta")
    table.add_column("Text", style="cyan")

    for index, token in enumerate(stages.tokens):
        table.add_row(str(index), token.kind.value, token.text)

    console.print(table)
    console.print(f"  Postfix: [green]{render(stages.postfix)}[/]")
    console.print(f"  Result:  [bold]{format_result(stages.result)}[/]")


@app.command()
def repl():
    """Interactive session; each result can be chained into the next line."""
    from calcyard.editor import ExpressionEditor

    editor = ExpressionEditor()
    console.print("[bold green]calcyard[/] - type an expression, 'clear' or 'quit'")

    while True:
        try:
            line = console.input(f"[cyan]{editor.display}[/] > ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break

        command = line.strip()
        if command in ("quit", "exit"):
            break
        if command == "clear":
            editor.clear()
            continue
        if not command:
            continue

        # A line starting with an operator continues the previous result
        if command[0] in "+*/" or (command[0] == "-" and editor.expression):
            editor.expression += command
        else:
            editor.expression = command

        try:
            editor.calculate()
        except EvaluationError as e:
            _print_error(e)
            # Next line starts from an empty expression
            editor.clear()
            continue

        console.print(f"[bold]= {editor.expression}[/]")


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
):
    """Start the calcyard API server."""
    import uvicorn

    host = host or settings.host
    port = port or settings.port
    console.print(f"[bold green]Starting calcyard server on {host}:{port}[/]")

    uvicorn.run(
        "calcyard.api:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
