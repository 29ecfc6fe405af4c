from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from readmegen.cli.app import app, console
from readmegen.core.tree import TreeDepthExceededError, build_tree, render_tree
from readmegen.infra.config.env import load_env, save_api_key
from readmegen.readme.workflow import README_FILENAME, ReadmeGenerationError, create_readme


@app.command("create-readme")
def create_readme_command(
    folder: Path = typer.Argument(
        ..., exists=True, file_okay=False, dir_okay=True, help="Folder to describe"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Where to write the README (default: FOLDER/README.md)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing README"),
    stdout: bool = typer.Option(
        False, "--stdout", help="Print the README instead of writing it (not with --output)"
    ),
    max_depth: Optional[int] = typer.Option(
        None, "--max-depth", min=0, help="Fail on directories nested deeper than this"
    ),
):
    """Draft a README for FOLDER from its directory tree."""
    if stdout and output is not None:
        raise typer.BadParameter("--output cannot be combined with --stdout", param_hint="--output")

    try:
        config = load_env()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    target = None if stdout else (output or folder / README_FILENAME)
    try:
        readme = create_readme(config, folder, output=target, force=force, max_depth=max_depth)
    except (ValueError, FileExistsError, ReadmeGenerationError, TreeDepthExceededError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"[red]Failed to read {escape(str(folder))}: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    if stdout:
        print(readme)


@app.command("set-api-key")
def set_api_key_command(
    key: Optional[str] = typer.Option(None, "--key", help="API key (prompted when omitted)"),
):
    """Store the API key in the settings file."""
    if key is None:
        key = typer.prompt("Enter your API key", hide_input=True)
    try:
        save_api_key(key)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    console.print("API Key saved to settings.")


@app.command()
def tree(
    path: str = typer.Argument(..., help="Path to a file or directory"),
    max_depth: Optional[int] = typer.Option(None, "--max-depth", min=0),
):
    """Print the tree that create-readme sends to the model."""
    try:
        print(render_tree(build_tree(path, max_depth=max_depth)), end="")
    except (OSError, TreeDepthExceededError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
