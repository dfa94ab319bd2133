"""
cssql CLI Package.

- commands.py: compile, check, tokens and fmt commands
- utils.py: Shared utilities (source reading, logging, error output)
"""

import typer

from cssql.cli.commands import check_command, compile_command, fmt_command, tokens_command
from cssql.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="""cssql – translate stylesheet rules into SQL

  .users { name, id }   →   SELECT name, id FROM users;
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """cssql CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="compile")(compile_command)
app.command(name="check")(check_command)
app.command(name="tokens")(tokens_command)
app.command(name="fmt")(fmt_command)


def main() -> None:
    app()


__all__ = ["app", "main"]
