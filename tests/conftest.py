"""
Test configuration and fixtures for the edAItorial analysis engine.

Settings are built without reading any .env file, and the checking backend
is replaced by a scripted fake so no test touches the network.
"""

from typing import List, Optional, Union

import pytest

from edaitorial.platform.cache import InMemoryAnalysisCache
from edaitorial.platform.config import Settings


class FakeBackend:
    """
    Scripted checking backend.

    Each call pops the next scripted response; exceptions in the script are
    raised instead of returned. Once the script runs out `default` is used.
    """

    def __init__(self, responses: Optional[List[Union[str, Exception]]] = None, default: str = "[]"):
        self.responses = list(responses or [])
        self.default = default
        self.prompts: List[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        response = self.responses.pop(0) if self.responses else self.default
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        return len(self.prompts)


@pytest.fixture
def make_settings(tmp_path):
    """Factory for isolated Settings with per-test overrides."""
    def _make(**overrides) -> Settings:
        values = {"LOG_DIR": str(tmp_path / "logs"), "LLM_API_KEY": None, "REDIS_URL": None}
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def settings(make_settings) -> Settings:
    return make_settings()


@pytest.fixture
def make_backend():
    def _make(responses=None, default: str = "[]") -> FakeBackend:
        return FakeBackend(responses=responses, default=default)
    return _make


@pytest.fixture
def memory_cache() -> InMemoryAnalysisCache:
    return InMemoryAnalysisCache()


@pytest.fixture
def clean_title() -> str:
    """Title inside the default 30-60 character window."""
    return "How to Write Accessible Articles for the Web"


@pytest.fixture
def clean_body() -> str:
    """Body above the default 300-word minimum with short sentences and a heading."""
    return "<h2>Intro</h2><p>" + "Content is written here. " * 80 + "</p>"
