from contextlib import asynccontextmanager

import pytest

from bedrock_adapter.contracts import ClientConfig
from bedrock_adapter.session import BedrockConverseSession


class FakeBedrockClient:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def converse(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class RecordingLogger:
    def __init__(self):
        self.events = []

    def _record(self, level, event, **kw):
        self.events.append((level, event, kw))

    def debug(self, event, **kw):
        self._record("debug", event, **kw)

    def info(self, event, **kw):
        self._record("info", event, **kw)

    def warning(self, event, **kw):
        self._record("warning", event, **kw)

    def error(self, event, **kw):
        self._record("error", event, **kw)

    def names(self, level=None):
        return [e for lvl, e, _ in self.events if level is None or lvl == level]


def message_response(*blocks):
    return {
        "output": {"message": {"role": "assistant", "content": list(blocks)}},
        "stopReason": "end_turn",
        "usage": {"inputTokens": 3, "outputTokens": 2, "totalTokens": 5},
    }


def fake_session(client, *, region="us-east-1", profile=None, logger=None):
    opened = []

    @asynccontextmanager
    async def factory(cfg):
        opened.append(cfg)
        yield client

    session = BedrockConverseSession(
        ClientConfig(region=region, profile=profile), client_factory=factory, logger=logger
    )
    session.opened = opened
    return session


@pytest.fixture
def recording_logger():
    return RecordingLogger()
