"""App configuration from the environment (.env is loaded by backend.app)."""

import logging
import os
from typing import Any

from luma_wisp.llm import LLM, HttpLLM, OfflineLLM

logger = logging.getLogger(__name__)

_CONFIG_DEFAULTS: dict[str, Any] = {
    "openai_api_key": "",
    "openai_base_url": "https://api.openai.com",
    "model": "gpt-4o",
    "llm_timeout": 30.0,
    "environment": "development",
    "public_base_url": "http://localhost:5000",
}

# config key → environment variable
_ENV_VARS: dict[str, str] = {
    "openai_api_key": "OPENAI_API_KEY",
    "openai_base_url": "OPENAI_BASE_URL",
    "model": "LUMA_MODEL",
    "llm_timeout": "LLM_TIMEOUT",
    "environment": "APP_ENV",
    "public_base_url": "PUBLIC_BASE_URL",
}


def get_config(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return defaults merged with environment values, then `overrides`."""
    config = dict(_CONFIG_DEFAULTS)
    for key, var in _ENV_VARS.items():
        value = os.getenv(var)
        if value:
            config[key] = value
    if overrides:
        config.update(overrides)
    try:
        config["llm_timeout"] = float(config["llm_timeout"])
    except (TypeError, ValueError):
        raise ValueError(f"LLM_TIMEOUT must be a number, got {config['llm_timeout']!r}") from None
    if config["llm_timeout"] <= 0:
        raise ValueError("LLM_TIMEOUT must be positive")
    return config


def build_llm(config: dict[str, Any]) -> LLM:
    """HttpLLM when an API key is configured, otherwise OfflineLLM."""
    if not config["openai_api_key"]:
        logger.warning("OPENAI_API_KEY not set; Luma will answer with fallback responses")
        return OfflineLLM()
    return HttpLLM(
        provider_url=config["openai_base_url"],
        api_key=config["openai_api_key"],
        model=config["model"],
        timeout=config["llm_timeout"],
    )
