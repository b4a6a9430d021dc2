from .config import BedrockAdapterConfig
from .contracts import ClientConfig, CompletionRequest
from .provider import BedrockProvider, complete, complete_structured
from .session import BedrockConverseSession, build_client

__all__ = [
    "BedrockAdapterConfig",
    "BedrockConverseSession",
    "BedrockProvider",
    "ClientConfig",
    "CompletionRequest",
    "build_client",
    "complete",
    "complete_structured",
]
