"""
OpenAI Client Factory for PaddyDoc.

Supports both OpenAI and Azure OpenAI through environment configuration.

Environment Variables:
    For OpenAI:
        OPENAI_API_KEY: Your OpenAI API key

    For Azure OpenAI:
        AZURE_OPENAI_API_KEY: Your Azure OpenAI API key
        AZURE_OPENAI_ENDPOINT: Your Azure endpoint (e.g., https://your-resource.openai.azure.com)
        AZURE_OPENAI_API_VERSION: API version (default: 2024-02-15-preview)
        AZURE_OPENAI_DEPLOYMENT_VISION: Deployment name of the vision-capable model

Usage:
    >>> from paddydoc.utils.openai_client import get_client, get_model_name
    >>> client = get_client()
    >>> model = get_model_name("gpt-4o")  # Returns deployment name for Azure
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from openai import AzureOpenAI, OpenAI

logger = logging.getLogger(__name__)


def is_azure_configured() -> bool:
    """Check if Azure OpenAI is configured via environment variables."""
    return bool(
        os.getenv("AZURE_OPENAI_API_KEY")
        and os.getenv("AZURE_OPENAI_ENDPOINT")
    )


def is_openai_configured() -> bool:
    """Check if OpenAI is configured via environment variables."""
    return bool(os.getenv("OPENAI_API_KEY", ""))


@lru_cache(maxsize=1)
def get_client() -> "OpenAI | AzureOpenAI":
    """
    Get the appropriate OpenAI client based on environment configuration.

    Prefers Azure OpenAI if configured, falls back to OpenAI.

    Raises:
        ValueError: If neither OpenAI nor Azure OpenAI is configured
    """
    if is_azure_configured():
        from openai import AzureOpenAI

        endpoint = os.getenv("AZURE_OPENAI_ENDPOINT")
        api_version = os.getenv("AZURE_OPENAI_API_VERSION", "2024-02-15-preview")
        logger.info("Using Azure OpenAI client: %s", endpoint)
        return AzureOpenAI(
            azure_endpoint=endpoint,
            api_key=os.getenv("AZURE_OPENAI_API_KEY"),
            api_version=api_version,
        )

    if is_openai_configured():
        from openai import OpenAI

        logger.info("Using OpenAI client")
        return OpenAI()

    raise ValueError(
        "No OpenAI configuration found. Please set either:\n"
        "  - OPENAI_API_KEY for OpenAI, or\n"
        "  - AZURE_OPENAI_API_KEY and AZURE_OPENAI_ENDPOINT for Azure OpenAI"
    )


def get_model_name(model: str) -> str:
    """
    For OpenAI the model name is returned as-is; for Azure the vision
    deployment name wins when one is configured.
    """
    if is_azure_configured():
        deployment = os.getenv("AZURE_OPENAI_DEPLOYMENT_VISION", model)
        logger.debug("Azure model mapping: %s -> %s", model, deployment)
        return deployment
    return model


def get_provider() -> str:
    return "azure" if is_azure_configured() else "openai"


def check_configuration() -> dict[str, bool]:
    """
    Returns:
        Dict with 'openai' and 'azure' keys indicating configuration status
    """
    return {
        "openai": is_openai_configured(),
        "azure": is_azure_configured(),
    }
