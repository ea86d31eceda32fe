"""Typeahead configuration.

Settings come from keyword overrides first, then ``TYPEAHEAD_*`` environment
variables (a ``.env`` file is honoured), then the defaults below.
"""

import os
from typing import Any, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from typeahead.logger import get_logger

logger = get_logger("config")

DEFAULT_SUGGEST_URL = "http://suggestqueries.google.com/complete/search"


class SuggestProviderConfig(BaseModel):
    """Settings for the remote suggestion provider."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(DEFAULT_SUGGEST_URL, description="Suggestion endpoint")
    language: str = Field("en", description="Interface language sent as 'hl'")
    dataset: str = Field("yt", description="Suggestion dataset sent as 'ds'")
    client: str = Field("youtube", description="Client identifier sent as 'client'")
    timeout: float = Field(10.0, gt=0, description="Request timeout in seconds")


class TypeaheadConfig(BaseModel):
    """Top-level typeahead settings."""

    model_config = ConfigDict(frozen=True)

    debounce_ms: int = Field(400, ge=0, description="Quiet interval before a query is dispatched")
    max_results: int = Field(10, ge=1, description="Maximum suggestions kept from one fetch")
    provider: Literal["youtube", "static"] = Field("youtube", description="Suggestion provider to use")
    suggest: SuggestProviderConfig = Field(default_factory=SuggestProviderConfig)

    @property
    def debounce_interval(self) -> float:
        """Quiet interval in seconds."""
        return self.debounce_ms / 1000.0


_ENV_FIELDS = {
    "TYPEAHEAD_DEBOUNCE_MS": "debounce_ms",
    "TYPEAHEAD_MAX_RESULTS": "max_results",
    "TYPEAHEAD_PROVIDER": "provider",
}

_ENV_SUGGEST_FIELDS = {
    "TYPEAHEAD_SUGGEST_URL": "url",
    "TYPEAHEAD_LANGUAGE": "language",
    "TYPEAHEAD_TIMEOUT": "timeout",
}


def load_config(dotenv: bool = True, **overrides: Any) -> TypeaheadConfig:
    """
    Load configuration from the environment.

    Args:
        dotenv: Whether to load a ``.env`` file first
        **overrides: Field values that take precedence over the environment

    Returns:
        TypeaheadConfig: Validated configuration

    Raises:
        ValidationError: If a value is out of range or has the wrong type
    """
    if dotenv:
        load_dotenv()

    data: dict[str, Any] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        value = os.getenv(env_name)
        if value:
            data[field_name] = value

    suggest: dict[str, Any] = {}
    for env_name, field_name in _ENV_SUGGEST_FIELDS.items():
        value = os.getenv(env_name)
        if value:
            suggest[field_name] = value
    if suggest:
        data["suggest"] = suggest

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        config = TypeaheadConfig(**data)
    except ValidationError as e:
        logger.error(f"Invalid typeahead configuration: {e}")
        raise

    logger.debug(
        f"Loaded config: provider={config.provider}, debounce_ms={config.debounce_ms}, "
        f"max_results={config.max_results}"
    )
    return config


def describe(config: Optional[TypeaheadConfig] = None) -> dict[str, Any]:
    """Return the configuration as a plain dictionary (for logs and the CLI)."""
    return (config or TypeaheadConfig()).model_dump()
