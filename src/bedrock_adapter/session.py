from __future__ import annotations

from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from typing import Any

import aioboto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .contracts import ClientConfig
from .errors import RemoteCallFailed

log = structlog.get_logger()

BEDROCK_RUNTIME_SERVICE = "bedrock-runtime"

# One attempt per call: failures surface immediately to the caller.
_NO_RETRY = Config(retries={"total_max_attempts": 1, "mode": "standard"})

ClientFactory = Callable[[ClientConfig], AbstractAsyncContextManager[Any]]


def build_client(profile: str | None, region: str, *, logger: Any = None) -> AbstractAsyncContextManager[Any]:
    """Return the bedrock-runtime client context for ``profile``/``region``.

    ``async with build_client(...) as client`` yields the ready client; the
    default botocore credential chain is used when ``profile`` is None.
    """
    logger = logger or log
    if profile:
        logger.info("bedrock_using_profile", profile=profile)
        session = aioboto3.Session(profile_name=profile)
    else:
        session = aioboto3.Session()
    return session.client(BEDROCK_RUNTIME_SERVICE, region_name=region, config=_NO_RETRY)


class BedrockConverseSession:
    """
    Thin wrapper around the bedrock-runtime ``converse`` call.

    Opens a client per call so concurrent calls share nothing. Pass
    ``client_factory`` to substitute the transport (tests, custom endpoints).
    """

    def __init__(
        self,
        client_config: ClientConfig,
        *,
        client_factory: ClientFactory | None = None,
        logger: Any = None,
    ):
        self.client_config = client_config
        self._client_factory: ClientFactory = client_factory or self._build_client
        self._log = logger or log

    def _build_client(self, cfg: ClientConfig) -> AbstractAsyncContextManager[Any]:
        return build_client(cfg.profile, cfg.region, logger=self._log)

    async def converse(self, request: Mapping[str, Any]) -> dict[str, Any]:
        try:
            async with self._client_factory(self.client_config) as client:
                response = await client.converse(**request)
        except (ClientError, BotoCoreError) as e:
            err = RemoteCallFailed(str(e))
            self._log.error(
                "bedrock_api_error",
                model=request.get("modelId"),
                error_type=type(e).__name__,
                error=str(err),
            )
            raise err from e
        return response
