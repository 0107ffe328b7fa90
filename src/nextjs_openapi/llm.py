"""Text generation clients.

The pipeline only needs ``generate(prompt) -> str``. ``OllamaClient`` talks
to a local Ollama server directly; ``LitellmClient`` routes through litellm
for hosted models. Both fail with TransportTimeout, ServiceError or
ProtocolError and never retry.
"""

from typing import Protocol

import httpx
import litellm
import openai
from pydantic import BaseModel, ValidationError

from nextjs_openapi.config import DEFAULT_MODEL, DEFAULT_OLLAMA_URL, DEFAULT_TIMEOUT, GeneratorConfig
from nextjs_openapi.errors import ProtocolError, ServiceError, TransportTimeout


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


class GenerationRequest(BaseModel):
    model: str
    prompt: str
    stream: bool = False


class GenerationReply(BaseModel):
    response: str
    done: bool = False


class OllamaClient:
    """Client for Ollama's ``/api/generate`` endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_OLLAMA_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.timeout = timeout
        self._transport = transport

    def generate(self, prompt: str) -> str:
        """Send one non-streaming generate request and return the reply text."""
        request = GenerationRequest(model=self.model, prompt=prompt)
        url = f"{self.base_url}/api/generate"

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(url, json=request.model_dump())
        except httpx.TimeoutException as e:
            raise TransportTimeout(f"no reply from {url} within {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise ServiceError(None, f"request to {url} failed: {e}") from e

        if not response.is_success:
            raise ServiceError(response.status_code)

        try:
            reply = GenerationReply.model_validate_json(response.content)
        except ValidationError as e:
            raise ProtocolError(f"unexpected response body from {url}") from e
        return reply.response


class LitellmClient:
    """Generation through litellm (``ollama/llama3.1``, ``gpt-4o``, ...)."""

    def __init__(self, model: str = DEFAULT_MODEL, api_base: str | None = None, timeout: float = DEFAULT_TIMEOUT):
        self.model = model
        self.api_base = api_base
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        try:
            response = litellm.completion(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                api_base=self.api_base,
                timeout=self.timeout,
                stream=False,
            )
        except openai.APITimeoutError as e:
            raise TransportTimeout(f"no reply from {self.model} within {self.timeout}s") from e
        except openai.APIError as e:
            raise ServiceError(getattr(e, "status_code", None), str(e)) from e

        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError) as e:
            raise ProtocolError(f"unexpected completion object from {self.model}") from e
        if not isinstance(content, str):
            raise ProtocolError(f"completion from {self.model} has no text content")
        return content


def create_client(config: GeneratorConfig) -> TextGenerator:
    """Build the generation client selected by ``config.provider``."""
    if config.provider == "litellm":
        # only ollama-routed models need the local server URL
        api_base = config.ollama_url if config.model.startswith(("ollama/", "ollama_chat/")) else None
        return LitellmClient(model=config.model, api_base=api_base, timeout=config.timeout)
    return OllamaClient(base_url=config.ollama_url, model=config.model, timeout=config.timeout)
