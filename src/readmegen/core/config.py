from pathlib import Path

from pydantic import BaseModel, SecretStr

MESSAGE_ROLES = ("user", "system", "assistant")


class Config(BaseModel):
    llm_api_key: SecretStr | None = None
    llm_base_url: str | None = None
    llm_model_name: str = "gpt-3.5-turbo"
    llm_message_role: str = "user"
    custom_prompts_dir: Path | None = None
    settings_path: Path

    model_config = {
        "extra": "forbid",
        "frozen": True,
    }
