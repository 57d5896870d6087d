import json

import pytest

from eatalyzer.errors import AnalysisError, ConfigurationError
from eatalyzer.models.nutrition import NutritionAnalysis
from eatalyzer.prompts.analysis_prompt import build_analysis_prompt
from eatalyzer.services.groq.groq_analysis import GroqAnalysisClient, make_client
from eatalyzer.services.image_encoder import ImageEncoder

from .samples import fake_sdk


def _client(sdk):
    return GroqAnalysisClient(api_key="test-key", model="vision-model", client=sdk)


def test_analyze_parses_reply(meal_reply, jpeg_upload):
    sdk = fake_sdk(content=json.dumps(meal_reply))
    analysis = _client(sdk).analyze(jpeg_upload)

    assert isinstance(analysis, NutritionAnalysis)
    assert analysis.calories == 350
    assert analysis.contents == ["grilled chicken", "rice", "broccoli"]
    assert analysis.nutritional_info.fats.unsaturated == 5
    assert analysis.health_assessment.is_healthy is True
    assert analysis.health_assessment.warnings == []
    assert analysis.to_wire() == meal_reply


def test_request_shape(meal_reply, jpeg_upload):
    sdk = fake_sdk(content=json.dumps(meal_reply))
    _client(sdk).analyze(jpeg_upload)

    calls = sdk.chat.completions.calls
    assert len(calls) == 1
    call = calls[0]
    assert call["model"] == "vision-model"
    assert call["temperature"] == 0.2
    assert call["response_format"] == {"type": "json_object"}

    (message,) = call["messages"]
    assert message["role"] == "user"
    text_part, image_part = message["content"]
    assert text_part == {"type": "text", "text": build_analysis_prompt()}
    assert image_part["type"] == "image_url"
    expected = "data:image/jpeg;base64," + ImageEncoder().to_transport_encoding(jpeg_upload)
    assert image_part["image_url"]["url"] == expected


def test_prompt_names_every_field():
    prompt = build_analysis_prompt()
    for field in ("calories", "contents", "nutritionalInfo", "fats", "saturated",
                  "unsaturated", "trans", "protein", "carbohydrates", "sugar", "fiber",
                  "healthAssessment", "isHealthy", "recommendedConsumption",
                  "warnings", "benefits"):
        assert field in prompt
    assert "ONLY" in prompt


@pytest.mark.parametrize("content", [
    "not json at all",
    "",
    None,
    "[1, 2, 3]",
    json.dumps({"calories": 100}),
    json.dumps({"calories": "lots", "contents": [], "nutritionalInfo": {}, "healthAssessment": {}}),
])
def test_malformed_reply_raises_analysis_error(content, jpeg_upload):
    sdk = fake_sdk(content=content)
    with pytest.raises(AnalysisError):
        _client(sdk).analyze(jpeg_upload)


def test_transport_failure_raises_analysis_error(jpeg_upload):
    boom = ConnectionError("connection reset")
    sdk = fake_sdk(error=boom)
    with pytest.raises(AnalysisError) as exc:
        _client(sdk).analyze(jpeg_upload)
    assert exc.value.__cause__ is boom
    assert len(sdk.chat.completions.calls) == 1


def test_network_and_parse_failures_share_one_message(jpeg_upload):
    messages = set()
    for sdk in (fake_sdk(error=TimeoutError("timed out")), fake_sdk(content="{oops")):
        with pytest.raises(AnalysisError) as exc:
            _client(sdk).analyze(jpeg_upload)
        messages.add(str(exc.value))
    assert messages == {"Failed to analyze food image"}


def test_make_client_requires_key():
    with pytest.raises(ConfigurationError):
        make_client(None)
    with pytest.raises(ConfigurationError):
        GroqAnalysisClient(api_key="", model="m")


def test_make_client_disables_retries():
    client = make_client("test-key")
    assert client.max_retries == 0
    assert "api.groq.com" in str(client.base_url)
    assert client.api_key == "test-key"


def test_from_config_uses_injected_values():
    config = {
        "GROQ_API_KEY": "fake-credential",
        "DEFAULT_MODEL": "some-vision-model",
        "ANALYSIS_TEMPERATURE": 0.2,
    }
    client = GroqAnalysisClient.from_config(config)
    assert client.model == "some-vision-model"
    assert client.temperature == 0.2
    assert client.client.api_key == "fake-credential"


def test_base_url_comes_from_config():
    from eatalyzer.config.settings import Config

    client = GroqAnalysisClient.from_config({"GROQ_API_KEY": "k", "DEFAULT_MODEL": "m"})
    assert str(client.client.base_url).rstrip("/") == Config.GROQ_BASE_URL

    custom = GroqAnalysisClient.from_config({
        "GROQ_API_KEY": "k",
        "DEFAULT_MODEL": "m",
        "GROQ_BASE_URL": "https://example.test/v1",
    })
    assert "example.test" in str(custom.client.base_url)
