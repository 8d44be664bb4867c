"""external_analyzer.py
Optional LLM-backed second opinion on a resume: verdict plus a structured
candidate extraction.
"""
from typing import Optional

from pydantic import ValidationError

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.exceptions import ExternalAnalyzerError, LLMError
from resume_portfolio.logging import LoggerFactory, running_under_pytest

from resume_portfolio.parse_classes.external_analyzer.helpers.analyzer_prompt import (
    ANALYZER_SYSTEM_PROMPT,
    build_analyzer_user_prompt,
)
from resume_portfolio.parse_classes.external_analyzer.helpers.llm_client import LLMClient
from resume_portfolio.parse_classes.merge_reconciler.helpers.candidate_schema import (
    AnalyzerResponse
)

# Load analyzer specific logger
logger_factory = LoggerFactory()
analyzer_failure_logger = logger_factory.get_logger(
    name="analyzer_failures",
    logger_type="analyzer"
)


class ExternalAnalyzer:
    """
    Asks an LLM whether a document is a resume and, if so, for a
    portfolio-shaped candidate extraction.

    `analyze()` never raises: when the analyzer is not configured or anything
    goes wrong (query failure, non-JSON or non-object response) it logs the
    failure and returns None so the caller falls back to heuristics only.

    Attributes:
        llm_client (Optional[LLMClient]): Initialized client, or None when the
            analyzer is not configured.
        max_input_chars (int): Document text is truncated to this many
            characters before being sent.

    Example:
        >>> analyzer = ExternalAnalyzer(llm_client=client)
        >>> response = analyzer.analyze(resume_text)
        >>> response.is_resume
        True
    """
    FUNCTION_NAME = "analyze_resume"

    def __init__(
        self,
        llm_client: Optional[LLMClient] = None,
        max_input_chars: int = PARSER_DEFAULTS.LLM_MAX_INPUT_CHARS,
    ):
        if llm_client is not None and not isinstance(llm_client, LLMClient):
            raise TypeError("Provided llm_client must be an instance of LLMClient.")
        self.llm_client = llm_client
        self.max_input_chars = max_input_chars

    @property
    def is_configured(self) -> bool:
        return self.llm_client is not None

    @property
    def model(self) -> Optional[str]:
        return self.llm_client.model if self.llm_client else None

    def analyze(self, text: str) -> Optional[AnalyzerResponse]:
        """
        Run the analysis.

        Args:
            text (str): Raw document text.

        Returns:
            AnalyzerResponse | None: The coerced response, or None when not
                configured or on any failure.
        """
        if not self.is_configured:
            return None

        try:
            return self._request_analysis(text)
        except ExternalAnalyzerError as e:
            if not running_under_pytest():
                analyzer_failure_logger.warning(str(e))
            return None

    def _request_analysis(self, text: str) -> AnalyzerResponse:
        """
        Query the LLM and validate its response.

        Raises:
            ExternalAnalyzerError: If the query fails or the response is not a
                JSON object.
        """
        try:
            llm_response = self.llm_client.query(
                system_prompt=ANALYZER_SYSTEM_PROMPT,
                user_prompt=build_analyzer_user_prompt(text, self.max_input_chars),
                temperature=PARSER_DEFAULTS.LLM_TEMPERATURE,
                expect_json=True,
            )
        except LLMError as e:
            raise ExternalAnalyzerError(
                additional_message="LLM query failed",
                provider=self.llm_client.provider,
                model=self.llm_client.model,
                original_exception=e,
            )

        if not isinstance(llm_response, dict):
            raise ExternalAnalyzerError(
                additional_message=(
                    f"Expected a JSON object, got {type(llm_response).__name__}: "
                    f"{str(llm_response)[:200]}"
                ),
                provider=self.llm_client.provider,
                model=self.llm_client.model,
            )

        try:
            return AnalyzerResponse.model_validate(llm_response)
        except ValidationError as e:
            raise ExternalAnalyzerError(
                additional_message="Response did not match the expected shape",
                provider=self.llm_client.provider,
                model=self.llm_client.model,
                original_exception=e,
            )
