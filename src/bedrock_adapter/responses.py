from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from .documents import extract_string_field
from .errors import EmptyResponse, NoTextContent, UnexpectedResponseShape

log = structlog.get_logger()


def extract_message(response: Mapping[str, Any]) -> Mapping[str, Any]:
    output = response.get("output")
    if not output:
        raise EmptyResponse()
    # ConverseOutput is a union; "message" is the only member we understand.
    message = output.get("message") if isinstance(output, Mapping) else None
    if not isinstance(message, Mapping):
        raise UnexpectedResponseShape()
    return message


def _content_blocks(message: Mapping[str, Any]) -> list[Any]:
    content = message.get("content")
    return content if isinstance(content, list) else []


def extract_text_from_content(content: list[Any], *, logger: Any = None) -> str:
    logger = logger or log
    for block in content:
        if isinstance(block, Mapping) and isinstance(block.get("text"), str):
            text = block["text"]
            logger.info("bedrock_text_ok", chars=len(text))
            return text
    raise NoTextContent()


def extract_tool_field(
    content: list[Any], *, tool_name: str, field_name: str, logger: Any = None
) -> str | None:
    """First string ``field_name`` from a ``toolUse`` block calling ``tool_name``.

    A matching block without the field does not end the scan.
    """
    logger = logger or log
    for block in content:
        if not isinstance(block, Mapping):
            continue
        tool_use = block.get("toolUse")
        if not isinstance(tool_use, Mapping) or tool_use.get("name") != tool_name:
            continue
        text = extract_string_field(tool_use.get("input"), field_name)
        if text is not None:
            logger.debug("bedrock_structured_ok", chars=len(text))
            return text
        logger.error("bedrock_tool_input_missing_field", tool=tool_name, field=field_name)
    return None


def extract_text(response: Mapping[str, Any], *, logger: Any = None) -> str:
    message = extract_message(response)
    return extract_text_from_content(_content_blocks(message), logger=logger)


def extract_structured(
    response: Mapping[str, Any], *, tool_name: str, field_name: str, logger: Any = None
) -> tuple[str, bool]:
    """Returns ``(text, used_fallback)``."""
    logger = logger or log
    message = extract_message(response)
    content = _content_blocks(message)
    text = extract_tool_field(content, tool_name=tool_name, field_name=field_name, logger=logger)
    if text is not None:
        return text, False
    logger.debug("bedrock_structured_fallback_to_text", tool=tool_name)
    return extract_text_from_content(content, logger=logger), True
