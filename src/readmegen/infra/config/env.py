import os
from pathlib import Path

import dotenv
from pydantic import SecretStr

from readmegen.core.config import MESSAGE_ROLES, Config

API_KEY_VAR = "LLM_API_KEY"


def default_settings_path() -> Path:
    override = os.getenv("READMEGEN_SETTINGS")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "readmegen" / "settings.env"


def load_env(settings_path: Path | None = None) -> Config:
    """
    Build the runtime config.

    Process environment (including a local .env) wins over the persistent
    settings file written by ``save_api_key``.
    """
    dotenv.load_dotenv()
    settings_path = settings_path or default_settings_path()
    stored: dict[str, str | None] = {}
    if settings_path.exists():
        stored = dotenv.dotenv_values(settings_path)

    def lookup(key: str) -> str | None:
        return os.getenv(key) or stored.get(key) or None

    llm_api_key = lookup(API_KEY_VAR)
    llm_base_url = lookup("LLM_BASE_URL")
    llm_model_name = lookup("LLM_MODEL") or "gpt-3.5-turbo"
    llm_message_role = lookup("LLM_MESSAGE_ROLE") or "user"
    prompts_dir = lookup("READMEGEN_PROMPTS_DIR")

    if llm_message_role not in MESSAGE_ROLES:
        raise ValueError(
            f"LLM_MESSAGE_ROLE must be one of {', '.join(MESSAGE_ROLES)}, got '{llm_message_role}'"
        )

    return Config(
        llm_api_key=SecretStr(llm_api_key) if llm_api_key else None,
        llm_base_url=llm_base_url,
        llm_model_name=llm_model_name,
        llm_message_role=llm_message_role,
        custom_prompts_dir=Path(prompts_dir).expanduser() if prompts_dir else None,
        settings_path=settings_path,
    )


def save_api_key(key: str, settings_path: Path | None = None) -> Path:
    key = key.strip()
    if not key:
        raise ValueError("API key must not be empty")

    settings_path = settings_path or default_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.touch(exist_ok=True)
    dotenv.set_key(str(settings_path), API_KEY_VAR, key, quote_mode="never")
    return settings_path
