from langchain_openai import ChatOpenAI
from pydantic import SecretStr


def get_gpt_model(
    llm_model_name: str,
    llm_api_key: SecretStr,
    base_url: str | None = None,
    temperature: float = 0.2,
):
    # single attempt, errors are reported to the user instead of retried
    return ChatOpenAI(
        model=llm_model_name,
        api_key=llm_api_key,
        base_url=base_url,
        temperature=temperature,
        max_retries=0,
    )
