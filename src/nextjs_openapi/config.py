"""Run configuration shared by the CLI and the pipeline."""

from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_MODEL = "llama3.1"
DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_TIMEOUT = 30.0


class GeneratorConfig(BaseModel):
    """Settings for one documentation run."""

    api_dir: str = "./api"
    output: str = "openapi.json"
    model: str = DEFAULT_MODEL
    ollama_url: str = DEFAULT_OLLAMA_URL
    workers: int = Field(default=1, ge=1)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    provider: Literal["ollama", "litellm"] = "ollama"
