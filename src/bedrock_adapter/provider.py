from __future__ import annotations

from typing import Any

import structlog

from .builders import DEFAULT_FIELD_NAME, DEFAULT_TOOL_NAME, build_converse_request, build_tool_config
from .config import BedrockAdapterConfig
from .contracts import ClientConfig, CompletionRequest
from .errors import ConfigurationError
from .logging import configure_logging
from .metrics import maybe_start_metrics, request_latency_seconds, requests_total, structured_fallback_total
from .responses import extract_structured, extract_text
from .session import BedrockConverseSession

log = structlog.get_logger()


async def _run(
    session: BedrockConverseSession,
    request: CompletionRequest,
    *,
    tool_name: str,
    logger: Any,
) -> str:
    mode = "structured" if request.structured else "text"
    cfg = session.client_config
    logger.info(
        "bedrock_completion_start",
        mode=mode,
        profile=cfg.profile,
        region=cfg.region,
        model=request.model_id,
    )
    try:
        if not request.model_id:
            raise ConfigurationError("A Bedrock model id is required.")

        tool_config = None
        if request.field_name is not None:
            tool_config = build_tool_config(request.field_name, tool_name)

        payload = build_converse_request(
            model_id=request.model_id,
            user_prompt=request.user_prompt,
            system_prompt=request.system_prompt,
            tool_config=tool_config,
        )

        with request_latency_seconds.labels(mode=mode).time():
            response = await session.converse(payload)

        if request.field_name is None:
            text = extract_text(response, logger=logger)
        else:
            text, used_fallback = extract_structured(
                response, tool_name=tool_name, field_name=request.field_name, logger=logger
            )
            if used_fallback:
                structured_fallback_total.inc()
    except Exception as e:
        requests_total.labels(mode=mode, status="error").inc()
        logger.error("bedrock_completion_error", mode=mode, model=request.model_id, error=str(e))
        raise

    requests_total.labels(mode=mode, status="success").inc()
    return text


class BedrockProvider:
    """Plain and structured Bedrock completions over one reusable session."""

    name = "Bedrock"

    def __init__(
        self,
        cfg: BedrockAdapterConfig | None = None,
        *,
        session: BedrockConverseSession | None = None,
        logger: Any = None,
    ):
        self.cfg = cfg or BedrockAdapterConfig()
        self.log = logger or log
        self.session = session or BedrockConverseSession(self.cfg.client_config(), logger=self.log)

    @classmethod
    def from_env(cls, cfg: BedrockAdapterConfig | None = None) -> BedrockProvider:
        """Build a provider and set up process-wide logging and metrics from ``cfg``."""
        cfg = cfg or BedrockAdapterConfig()
        configure_logging(level=cfg.log_level, fmt=cfg.log_format)
        maybe_start_metrics(enable=cfg.enable_metrics, bind=cfg.metrics_bind, port=cfg.metrics_port)
        return cls(cfg)

    async def complete(
        self,
        user_prompt: str,
        *,
        system_prompt: str | None = None,
        model_id: str | None = None,
    ) -> str:
        request = CompletionRequest(
            model_id=model_id or self.cfg.require_model_id(),
            user_prompt=user_prompt,
            system_prompt=system_prompt,
        )
        return await self.run(request)

    async def complete_structured(
        self,
        user_prompt: str,
        *,
        system_prompt: str | None = None,
        model_id: str | None = None,
        field_name: str | None = None,
    ) -> str:
        request = CompletionRequest(
            model_id=model_id or self.cfg.require_model_id(),
            user_prompt=user_prompt,
            system_prompt=system_prompt,
            field_name=field_name or self.cfg.structured_field_name,
        )
        return await self.run(request)

    async def run(self, request: CompletionRequest) -> str:
        return await _run(
            self.session, request, tool_name=self.cfg.structured_tool_name, logger=self.log
        )


async def complete(
    config: ClientConfig,
    model_id: str,
    system_prompt: str | None,
    user_prompt: str,
    *,
    session: BedrockConverseSession | None = None,
    logger: Any = None,
) -> str:
    """Send one user prompt (plus optional system prompt) and return the model's text."""
    logger = logger or log
    session = session or BedrockConverseSession(config, logger=logger)
    request = CompletionRequest(model_id=model_id, user_prompt=user_prompt, system_prompt=system_prompt)
    return await _run(session, request, tool_name=DEFAULT_TOOL_NAME, logger=logger)


async def complete_structured(
    config: ClientConfig,
    model_id: str,
    system_prompt: str | None,
    user_prompt: str,
    field_name: str = DEFAULT_FIELD_NAME,
    *,
    tool_name: str = DEFAULT_TOOL_NAME,
    session: BedrockConverseSession | None = None,
    logger: Any = None,
) -> str:
    """
    Force the model to call a single-field tool and return that field.

    Falls back to the first text block when the model ignores the tool or
    omits the field.
    """
    logger = logger or log
    session = session or BedrockConverseSession(config, logger=logger)
    request = CompletionRequest(
        model_id=model_id,
        user_prompt=user_prompt,
        system_prompt=system_prompt,
        field_name=field_name,
    )
    return await _run(session, request, tool_name=tool_name, logger=logger)
