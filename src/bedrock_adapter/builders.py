from __future__ import annotations

from typing import Any

from .documents import to_wire_value
from .errors import MessageBuildFailed, SchemaBuildFailed

DEFAULT_FIELD_NAME = "transcription"
DEFAULT_TOOL_NAME = "transcription_output"


def build_user_message(user_prompt: str) -> dict[str, Any]:
    if not isinstance(user_prompt, str):
        raise MessageBuildFailed(
            f"Failed to build message: user prompt must be a string, got {type(user_prompt).__name__}"
        )
    return {"role": "user", "content": [{"text": user_prompt}]}


def build_system_blocks(system_prompt: str | None) -> list[dict[str, Any]] | None:
    if system_prompt is None:
        return None
    if not isinstance(system_prompt, str):
        raise MessageBuildFailed(
            f"Failed to build message: system prompt must be a string, got {type(system_prompt).__name__}"
        )
    return [{"text": system_prompt}]


def build_output_schema(field_name: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            field_name: {
                "type": "string",
                "description": "The cleaned and processed transcription text",
            }
        },
        "required": [field_name],
        "additionalProperties": False,
    }


def build_tool_config(field_name: str, tool_name: str = DEFAULT_TOOL_NAME) -> dict[str, Any]:
    """Single tool whose input is ``{field_name: str}``, with the model forced to call it."""
    if not isinstance(field_name, str) or not field_name.strip():
        raise SchemaBuildFailed("Failed to build tool spec: field name must be a non-empty string")
    if not isinstance(tool_name, str) or not tool_name.strip():
        raise SchemaBuildFailed("Failed to build tool choice: tool name must be a non-empty string")

    return {
        "tools": [
            {
                "toolSpec": {
                    "name": tool_name,
                    "description": "Output the processed transcription text",
                    "inputSchema": {"json": to_wire_value(build_output_schema(field_name))},
                }
            }
        ],
        "toolChoice": {"tool": {"name": tool_name}},
    }


def build_converse_request(
    *,
    model_id: str,
    user_prompt: str,
    system_prompt: str | None = None,
    tool_config: dict[str, Any] | None = None,
) -> dict[str, Any]:
    request: dict[str, Any] = {
        "modelId": model_id,
        "messages": [build_user_message(user_prompt)],
    }
    system = build_system_blocks(system_prompt)
    if system is not None:
        request["system"] = system
    if tool_config is not None:
        request["toolConfig"] = tool_config
    return request
