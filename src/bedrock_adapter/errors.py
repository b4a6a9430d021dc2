from __future__ import annotations


class BedrockAdapterError(Exception):
    """Base error for adapter failures."""


class ConfigurationError(BedrockAdapterError):
    pass


class MessageBuildFailed(BedrockAdapterError):
    """The prompt could not be turned into an outbound message."""


class SchemaBuildFailed(BedrockAdapterError):
    """The structured-output tool definition could not be built."""


class RemoteCallFailed(BedrockAdapterError):
    """Transport or Bedrock service rejected / failed the request. Never retried here."""

    def __init__(self, description: str):
        super().__init__(f"Bedrock API error: {description}")
        self.description = description


class EmptyResponse(BedrockAdapterError):
    def __init__(self, message: str = "Bedrock returned an empty response"):
        super().__init__(message)


class UnexpectedResponseShape(BedrockAdapterError):
    def __init__(self, message: str = "Unexpected response type from Bedrock"):
        super().__init__(message)


class NoTextContent(BedrockAdapterError):
    def __init__(self, message: str = "Bedrock response contains no text content"):
        super().__init__(message)
