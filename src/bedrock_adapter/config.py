from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from .catalog import DEFAULT_REGION, resolve_model_id
from .contracts import ClientConfig
from .errors import ConfigurationError


def _env_region() -> str:
    return os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or DEFAULT_REGION


class BedrockAdapterConfig(BaseModel):
    # Credentials / endpoint
    profile: str | None = Field(default_factory=lambda: os.getenv("AWS_PROFILE"))
    region: str = Field(default_factory=_env_region)

    # Model
    model_id: str | None = Field(default_factory=lambda: os.getenv("BEDROCK_MODEL_ID"))
    custom_model: str | None = Field(default_factory=lambda: os.getenv("BEDROCK_CUSTOM_MODEL"))

    # Structured output
    structured_field_name: str = Field(
        default_factory=lambda: os.getenv("BEDROCK_STRUCTURED_FIELD", "transcription")
    )
    structured_tool_name: str = Field(
        default_factory=lambda: os.getenv("BEDROCK_STRUCTURED_TOOL", "transcription_output")
    )

    # Observability
    enable_metrics: bool = Field(
        default_factory=lambda: os.getenv("ENABLE_METRICS", "false").lower() == "true"
    )
    metrics_bind: str = Field(default_factory=lambda: os.getenv("METRICS_BIND", "127.0.0.1"))
    metrics_port: int = Field(default_factory=lambda: int(os.getenv("METRICS_PORT", "9109")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = Field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))

    @field_validator("profile")
    @classmethod
    def _blank_profile_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    def client_config(self) -> ClientConfig:
        if not self.region or not self.region.strip():
            raise ConfigurationError("An AWS region is required for Bedrock calls.")
        return ClientConfig(region=self.region.strip(), profile=self.profile)

    def require_model_id(self) -> str:
        if not self.model_id:
            raise ConfigurationError("BEDROCK_MODEL_ID is required when no model id is passed.")
        return resolve_model_id(self.model_id, self.custom_model)
