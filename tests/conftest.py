from __future__ import annotations

import json

import httpx
import pytest

from concept_booster.core.store import MemoryStore
from concept_booster.services.gateway import GatewayInvoker
from concept_booster.services.progress_service import ProgressService


def completion_body(content: str | None) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class FakeGateway:
    """Mock transport for the chat-completions endpoint that records every request."""

    def __init__(self, content: str | None = None, status_code: int = 200, error: str = "upstream failure"):
        self.content = content
        self.status_code = status_code
        self.error = error
        self.requests: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": {"message": self.error}})
        return httpx.Response(200, json=completion_body(self.content))

    def invoker(self) -> GatewayInvoker:
        return GatewayInvoker(
            api_key="test-key",
            base_url="https://gateway.test/v1",
            model="test-model",
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handler)),
        )

    @property
    def system_prompt(self) -> str:
        return self.requests[-1]["messages"][0]["content"]

    @property
    def user_message(self) -> str:
        return self.requests[-1]["messages"][1]["content"]


@pytest.fixture
def progress() -> ProgressService:
    return ProgressService(MemoryStore())
