"""llm_helpers.py
Functions to help with initiating a LLMClient / ExternalAnalyzer
"""
import os
from typing import Optional

from dotenv import load_dotenv

from resume_portfolio.parse_classes.external_analyzer.external_analyzer import ExternalAnalyzer
from resume_portfolio.parse_classes.external_analyzer.helpers.llm_client import LLMClient

load_dotenv()


def is_llm_configured(key_name: str = "ANTHROPIC_API_KEY") -> bool:
    """Return True when an API key for the LLM provider is set (and not a placeholder)."""
    api_key = os.getenv(key_name)
    return bool(api_key) and api_key != "<REPLACE_ME>"


def initialize_llm_if_needed(
    llm_client: Optional[LLMClient] = None,
    function_name: str = "analyze_resume",
) -> Optional[LLMClient]:
    """
    Initialize or validate an LLMClient if one can be used.
    This helper ensures that an `LLMClient` is only created when configured.

    Logic flow:
        1. If an existing `llm_client` is provided validates that it is an instance of `LLMClient`
        and returns it if it is.
        2. If no API key is configured returns `None`.
        3. Otherwise initializes and returns a new LLMClient.

    Args:
        llm_client (Optional[LLMClient]): Existing LLM client instance to use or validate.
        function_name (str): Name of the feature the client is created for.

    Returns:
        Optional[LLMClient]: A ready-to-use or validated LLMClient instance, or None if not configured.

    Raises:
        TypeError: If `llm_client` is provided but not an instance of `LLMClient`.
    """
    # Validate an existing LLMClient
    if llm_client is not None:
        if not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        return llm_client

    if not is_llm_configured():
        return None

    # Initialize new LLM client
    llm_client = LLMClient(function_name=function_name)
    llm_client.initialize_client()

    return llm_client


def build_external_analyzer_if_configured(
    llm_client: Optional[LLMClient] = None,
) -> Optional[ExternalAnalyzer]:
    """
    Build an ExternalAnalyzer when an LLM is available, otherwise return None
    (heuristics-only parsing).
    """
    llm_client = initialize_llm_if_needed(llm_client=llm_client)
    if llm_client is None:
        return None
    return ExternalAnalyzer(llm_client=llm_client)
