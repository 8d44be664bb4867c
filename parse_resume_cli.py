"""parse_resume_cli.py
Run ResumeParserFramework from the command line and print the Portfolio as JSON.
Example: `python parse_resume_cli.py path/to/resume.pdf`

The external analyzer is used when ANTHROPIC_API_KEY is set (see `.env`).
If the LLM client cannot be set up, parsing falls back to heuristics only.
"""
import json
import mimetypes
import sys

from resume_portfolio.exceptions import (
    FileParserError,
    LLMConfigError,
    LLMError,
    ResumeValidationError,
)
from resume_portfolio.logging import LoggerFactory
from resume_portfolio.parse_classes.external_analyzer.helpers.llm_helpers import (
    build_external_analyzer_if_configured
)
from resume_portfolio.parse_classes.resume_parse_framework import ResumeParserFramework

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

logger = LoggerFactory().get_logger(name="parse_resume_cli", logger_type="analyzer", console=False)


def guess_mime_type(file_path: str) -> str:
    if file_path.lower().endswith(".docx"):
        return DOCX_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(file_path)
    return mime_type or "application/octet-stream"


def build_analyzer_or_none():
    """Build the external analyzer, or return None (heuristics only) if its client cannot be set up."""
    try:
        return build_external_analyzer_if_configured()
    except (LLMConfigError, LLMError) as e:
        logger.warning(f"External analyzer disabled: {e}")
        print(f"External analyzer disabled, using heuristics only: {e}", file=sys.stderr)
        return None


def main():
    if len(sys.argv) < 2:
        print("Usage: python parse_resume_cli.py <file_path>")
        sys.exit(1)

    file_path = sys.argv[1]
    with open(file_path, "rb") as f:
        file_bytes = f.read()

    # Initialize the parser
    resume_parser_framework = ResumeParserFramework(external_analyzer=build_analyzer_or_none())

    # Parse the resume
    try:
        portfolio = resume_parser_framework.parse_resume(file_bytes, guess_mime_type(file_path))
    except (FileParserError, ResumeValidationError) as e:
        print(f"Could not parse resume: {e}", file=sys.stderr)
        sys.exit(2)

    # Print the results
    print(json.dumps(portfolio.to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
