from pathlib import Path

from rich.console import Console
from rich.markup import escape

from readmegen.core.config import Config
from readmegen.core.tree import build_tree, render_tree
from readmegen.models.gpt import get_gpt_model
from readmegen.prompts.get_prompt import get_prompt
from readmegen.readme.generate import generate_readme

console = Console(stderr=True)

README_FILENAME = "README.md"


class ReadmeGenerationError(RuntimeError):
    pass


def build_readme_prompt(config: Config, folder: Path, max_depth: int | None = None) -> str:
    folder_tree = build_tree(folder.as_posix(), max_depth=max_depth)
    entries = len(folder_tree.children or [])
    console.print(f"[dim]Read {escape(str(folder))} ({entries} top-level entries)[/dim]")
    return get_prompt("readme", config).format(
        folder_name=folder_tree.label,
        tree=render_tree(folder_tree),
    )


def create_readme(
    config: Config,
    folder: Path,
    output: Path | None = None,
    force: bool = False,
    max_depth: int | None = None,
) -> str:
    """
    Draft a README for ``folder`` and optionally write it to ``output``.

    Raises:
        ValueError: If no API key is configured
        FileExistsError: If ``output`` exists and ``force`` is not set
        ReadmeGenerationError: If the model call failed
    """
    if config.llm_api_key is None:
        raise ValueError("API key is not set. Run `readmegen set-api-key` first.")

    # not resolve(): a symlinked folder keeps its own name as the root label
    folder = folder.absolute()
    if output is not None and output.exists() and not force:
        raise FileExistsError(f"{output} already exists, use --force to overwrite it")

    prompt = build_readme_prompt(config, folder, max_depth=max_depth)

    model = get_gpt_model(config.llm_model_name, config.llm_api_key, config.llm_base_url)
    console.print(f"[cyan]Requesting README from {escape(config.llm_model_name)}...[/cyan]")
    result = generate_readme(prompt, model, role=config.llm_message_role)
    if not result.success:
        raise ReadmeGenerationError(result.content)

    readme = result.content or ""
    if output is not None:
        output.write_text(readme, encoding="utf-8")
        console.print(f"[green]✓ README written to {escape(str(output))}[/green]")
    return readme
