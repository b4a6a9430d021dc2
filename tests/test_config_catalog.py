import pytest

from bedrock_adapter.catalog import BEDROCK_MODELS, CUSTOM_MODEL, resolve_model_id
from bedrock_adapter.config import BedrockAdapterConfig
from bedrock_adapter.contracts import ClientConfig
from bedrock_adapter.errors import ConfigurationError


def test_config_reads_aws_environment(monkeypatch):
    monkeypatch.setenv("AWS_PROFILE", "work")
    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    monkeypatch.setenv("BEDROCK_MODEL_ID", "anthropic.claude-3-haiku-20240307-v1:0")

    cfg = BedrockAdapterConfig()

    assert cfg.client_config() == ClientConfig(region="eu-central-1", profile="work")
    assert cfg.require_model_id() == "anthropic.claude-3-haiku-20240307-v1:0"
    assert cfg.structured_field_name == "transcription"
    assert cfg.structured_tool_name == "transcription_output"


def test_config_region_falls_back_to_default_region_then_us_east_1(monkeypatch):
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-1")
    assert BedrockAdapterConfig().region == "ap-northeast-1"

    monkeypatch.delenv("AWS_DEFAULT_REGION")
    assert BedrockAdapterConfig().region == "us-east-1"


def test_blank_profile_means_default_chain():
    assert BedrockAdapterConfig(profile="   ").profile is None
    assert ClientConfig(region="us-east-1", profile="").profile is None


def test_empty_region_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        BedrockAdapterConfig(region=" ").client_config()


def test_missing_model_id_is_a_configuration_error(monkeypatch):
    monkeypatch.delenv("BEDROCK_MODEL_ID", raising=False)
    with pytest.raises(ConfigurationError):
        BedrockAdapterConfig().require_model_id()


def test_catalog_ends_with_custom_sentinel():
    assert BEDROCK_MODELS[-1] == (CUSTOM_MODEL, "Custom Model")


def test_resolve_model_id():
    assert resolve_model_id("  us.amazon.nova-pro-v1:0 ") == "us.amazon.nova-pro-v1:0"
    assert resolve_model_id("custom", " my-arn ") == "my-arn"
    with pytest.raises(ConfigurationError):
        resolve_model_id("custom", "")
    with pytest.raises(ConfigurationError):
        resolve_model_id(None)


def test_client_config_strips_profile_whitespace():
    assert ClientConfig(region="us-east-1", profile=" dev ").profile == "dev"
    assert BedrockAdapterConfig(region="us-east-1", profile=" dev ").client_config().profile == "dev"


def test_require_model_id_resolves_custom_sentinel():
    cfg = BedrockAdapterConfig(region="us-east-1", model_id="custom", custom_model=" my-model ")
    assert cfg.require_model_id() == "my-model"
