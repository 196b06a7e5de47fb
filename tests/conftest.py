import json

import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock

from sympla_bot.config import SearchConfig, Settings

SEARCH_URL = "https://sympla.test/api/v1/search"


@pytest.fixture
def search_config():
    return SearchConfig(search_url=SEARCH_URL, timeout=2.0)


@pytest.fixture
def settings(search_config):
    return Settings(bot_token="123:abc", search=search_config)


@pytest.fixture
def make_message():
    """Fake aiogram Message: only what the handlers touch."""
    def _make(text, chat_id=42):
        m = MagicMock()
        m.text = text
        m.chat.id = chat_id
        m.answer = AsyncMock()
        return m
    return _make


@pytest.fixture
def upstream():
    """
    Mock Sympla endpoint. Records every request body and answers with
    whatever `reply` is set to (dict -> JSON, bytes -> raw body).
    """
    class Upstream:
        def __init__(self):
            self.requests = []
            self.reply = {"data": []}
            self.status_code = 200

        def handler(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if isinstance(self.reply, (bytes, str)):
                return httpx.Response(self.status_code, content=self.reply)
            return httpx.Response(self.status_code, json=self.reply)

        def client(self):
            return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))

        def sent_json(self, i=-1):
            return json.loads(self.requests[i].content)

    return Upstream()
