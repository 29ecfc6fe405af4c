from dataclasses import dataclass
from typing import Any, Optional

import openai
from langchain_core.language_models import BaseChatModel
from rich.console import Console
from rich.markup import escape

console = Console(stderr=True)

REQUEST_FAILED_MESSAGE = "An error occurred during the request. Please try again."
CHECK_SETTINGS_MESSAGE = (
    "An error occurred during the request. Please check your API key and model"
)


@dataclass
class GenerationResult:
    success: bool
    content: Optional[str]


def is_forbidden_error(error: BaseException) -> bool:
    return isinstance(error, openai.APIStatusError) and error.status_code == 403


def _message_text(content: Any) -> str:
    if isinstance(content, list):
        # Extract text from content blocks
        text_parts: list[str] = []
        for block in content:
            if isinstance(block, str):
                text_parts.append(block)
            elif isinstance(block, dict):
                if block.get("type") == "text":
                    text_parts.append(block.get("text", ""))
                elif "text" in block:
                    text_parts.append(block["text"])
        return "\n".join(text_parts)
    return str(content)


def generate_readme(content: str, llm: BaseChatModel, role: str = "user") -> GenerationResult:
    """Send ``content`` as a single chat message and return the model's reply.

    Errors are never raised: a 403 from the API and every other failure are
    mapped to fixed user-facing messages.
    """
    try:
        response = llm.invoke([(role, content)])
        return GenerationResult(success=True, content=_message_text(response.content))
    except Exception as e:
        console.print(f"[dim]Chat completion failed: {type(e).__name__}: {escape(str(e))}[/dim]")
        if is_forbidden_error(e):
            return GenerationResult(success=False, content=REQUEST_FAILED_MESSAGE)
        return GenerationResult(success=False, content=CHECK_SETTINGS_MESSAGE)
