import typer
from rich.console import Console

app = typer.Typer(no_args_is_help=True, help="Draft README files with a chat model.")
console = Console(stderr=True)

# side-effect import: registers commands
from readmegen.cli import (  # noqa: F401, E402
    commands,  # pyright: ignore
)
