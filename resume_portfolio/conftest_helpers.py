"""conftest_helpers.py
Helper functions for `tests/conftest.py`
"""

from resume_portfolio.parse_classes.external_analyzer.helpers.llm_client import LLMClient
from resume_portfolio.parse_classes.external_analyzer.external_analyzer import ExternalAnalyzer


# --------------------------------------------------------------
# SETUP MONKEYPATCH FIXTURES
# --------------------------------------------------------------
def apply_mock_llm_patch(monkeypatch, response_type: str = "success"):
    """
    Core patching logic for LLMClient.

    Forces every LLMClient to use mock LLM responses by default:
      - `test_mode=True` (no API key needed, no network call)
      - `function_name="analyze_resume"`
      - `test_response_type=response_type` (see `llm_client_test_helpers`)

    Explicitly passed kwargs still win, so a test can request e.g.
    `LLMClient(test_response_type="not_json")`.

    Notes:
      - Intended to be called from a fixture to control scope.
      - Does not yield; directly applies the monkeypatch.
    """
    original_init = LLMClient.__init__

    def patched_init(self, *args, **kwargs):
        kwargs.setdefault("test_mode", True)
        kwargs.setdefault("function_name", ExternalAnalyzer.FUNCTION_NAME)
        kwargs.setdefault("test_response_type", response_type)
        original_init(self, *args, **kwargs)

    monkeypatch.setattr(LLMClient, "__init__", patched_init)
