"""config.py
Holds various defaults for different resume portfolio parser settings.
"""

from dataclasses import dataclass, field

# --------------------------------------------------------------
# SETUP DEFAULT VALUES
# --------------------------------------------------------------
@dataclass
class PortfolioDefaults:
    """
    Default settings for parameters used across the resume_portfolio package.
    """
    # ---- FileParser settings ----
    MAX_FILE_SIZE_MB: float = field(
        default = 5.0,
        metadata = {
            "description": "Maximum allowed file size in MB"
    })

    # ---- FieldExtractor settings ----
    HEADER_SCAN_LINES: int = field(
        default = 20,
        metadata = {
            "description": "Number of leading lines scanned for contact details and the name"
    })

    # ---- ResumeLikelihoodScorer settings ----
    LIKELIHOOD_THRESHOLD: float = field(
        default = 0.45,
        metadata = {
            "description": "Minimum heuristic score for a document to count as a resume"
    })

    # ---- LLMClient / ExternalAnalyzer settings ----
    LLM_PROVIDER: str = field(
        default = "anthropic",
        metadata = {
            "description": 'LLM provider: "anthropic"'
    })
    ANTHROPIC_MODEL_ID: str = field(
        default = "claude-haiku-4-5",
        metadata = {
            "description": "Anthropic model ID (overridden by the ANTHROPIC_MODEL env variable)"
    })
    LLM_TEMPERATURE: float = field(
        default = 0.2,
        metadata = {
            "description": "Sampling temperature used for resume analysis queries"
    })
    LLM_MAX_OUTPUT_TOKENS: int = field(
        default = 2048,
        metadata = {
            "description": "Maximum number of tokens the LLM may return"
    })
    LLM_MAX_INPUT_CHARS: int = field(
        default = 12000,
        metadata = {
            "description": "Resume text beyond this many characters is truncated before analysis"
    })


# Import this where needed
PARSER_DEFAULTS = PortfolioDefaults()
