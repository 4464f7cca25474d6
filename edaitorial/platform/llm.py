import logging
from typing import Optional, Protocol

import openai
from openai import OpenAI

from edaitorial.platform.config import Settings
from edaitorial.platform.exceptions import BackendTimeoutError, BackendUnavailableError

logger = logging.getLogger(__name__)


class ChatBackend(Protocol):
    """Anything that turns a prompt into free response text."""

    def complete(self, prompt: str) -> str:
        ...


class OpenRouterBackend:
    """
    Checking backend talking to an OpenAI-compatible chat endpoint.

    Every failure is raised as a BackendUnavailableError (or its timeout
    subclass) so the analyzer can fall through to the next tier.
    """

    def __init__(self, settings: Settings, client: Optional[OpenAI] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not self.settings.LLM_API_KEY:
                raise BackendUnavailableError("LLM_API_KEY is not configured")
            self._client = OpenAI(
                base_url=self.settings.LLM_BASE_URL,
                api_key=self.settings.LLM_API_KEY,
                timeout=self.settings.LLM_TIMEOUT,
                max_retries=self.settings.LLM_MAX_RETRIES,
            )
        return self._client

    def complete(self, prompt: str) -> str:
        try:
            completion = self.client.chat.completions.create(
                extra_headers={
                    "HTTP-Referer": self.settings.LLM_REFERER,
                    "X-Title": self.settings.APP_NAME,
                },
                model=self.settings.LLM_MODEL,
                messages=[
                    {
                        "role": "user",
                        "content": prompt
                    }
                ],
                temperature=self.settings.LLM_TEMPERATURE,
                timeout=self.settings.LLM_TIMEOUT,
            )
        except openai.APITimeoutError as e:
            logger.error(f"LLM call timed out after {self.settings.LLM_TIMEOUT}s: {str(e)}")
            raise BackendTimeoutError(str(e)) from e
        except openai.OpenAIError as e:
            logger.error(f"LLM call failed: {str(e)}")
            raise BackendUnavailableError(str(e)) from e

        if not completion.choices:
            return ""
        return completion.choices[0].message.content or ""
