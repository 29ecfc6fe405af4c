from pydantic import SecretStr

from readmegen.models.gpt import get_gpt_model


def test_single_attempt_model():
    model = get_gpt_model("m", SecretStr("k"), "http://x/v1")

    assert model.max_retries == 0
    assert model.model_name == "m"
    assert model.openai_api_base == "http://x/v1"
    assert model.temperature == 0.2


def test_default_base_url(monkeypatch):
    monkeypatch.delenv("OPENAI_API_BASE", raising=False)

    model = get_gpt_model("gpt-3.5-turbo", SecretStr("k"))

    assert model.max_retries == 0
    assert model.openai_api_base is None
