from importlib import resources

from langchain_core.prompts import PromptTemplate

from readmegen.core.config import Config


def get_prompt(prompt_name: str, config: Config) -> PromptTemplate:
    """
    Load a prompt template from a markdown file.

    A custom prompts directory from the config takes priority over the
    templates shipped with the package. A leading markdown header line is
    dropped, the rest is the template body.

    Args:
        prompt_name: Name of the prompt (without extension)
        config: Config object with optional custom_prompts_dir

    Returns:
        PromptTemplate for the prompt body

    Raises:
        FileNotFoundError: If prompt file not found
    """
    filename = f"{prompt_name}.md"

    prompt_content = None
    if config.custom_prompts_dir:
        custom_path = config.custom_prompts_dir / filename
        if custom_path.exists():
            prompt_content = custom_path.read_text(encoding="utf-8")

    if prompt_content is None:
        try:
            prompt_content = (
                resources.files("readmegen.prompts").joinpath(filename).read_text(encoding="utf-8")
            )
        except FileNotFoundError as e:
            raise FileNotFoundError(
                f"Prompt '{filename}' not found in custom dir or package defaults."
            ) from e

    return PromptTemplate.from_template(_extract_prompt_content(prompt_content))


def _extract_prompt_content(section: str) -> str:
    lines = section.strip().split("\n")

    # Skip the first line if it's a header
    start_idx = 0
    if lines and lines[0].strip().startswith("#"):
        start_idx = 1

    return "\n".join(lines[start_idx:]).strip()
