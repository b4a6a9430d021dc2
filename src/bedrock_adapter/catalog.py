from __future__ import annotations

from .errors import ConfigurationError

DEFAULT_REGION = "us-east-1"
CUSTOM_MODEL = "custom"

BEDROCK_MODELS: list[tuple[str, str]] = [
    ("us.anthropic.claude-opus-4-6-v1", "Claude Opus 4.6"),
    ("us.anthropic.claude-sonnet-4-5-20250929-v1:0", "Claude Sonnet 4.5"),
    ("us.anthropic.claude-haiku-4-5-20251001-v1:0", "Claude Haiku 4.5"),
    ("anthropic.claude-3-haiku-20240307-v1:0", "Claude 3 Haiku"),
    ("us.amazon.nova-pro-v1:0", "Amazon Nova Pro"),
    ("us.meta.llama3-3-70b-instruct-v1:0", "Meta Llama 3.3 70B"),
    (CUSTOM_MODEL, "Custom Model"),
]


def resolve_model_id(selected: str | None, custom_model: str | None = None) -> str:
    """Map a picker selection to the model id sent to Bedrock.

    The ``custom`` sentinel resolves to the user-supplied ``custom_model``.
    """
    choice = (selected or "").strip()
    if choice == CUSTOM_MODEL:
        choice = (custom_model or "").strip()
    if not choice:
        raise ConfigurationError("No Bedrock model selected.")
    return choice
