"""analyzer_prompt.py
Prompt sent to the LLM by ExternalAnalyzer.
"""
from resume_portfolio.config import PARSER_DEFAULTS

ANALYZER_SYSTEM_PROMPT = (
    "You are an expert resume analyst. Given the raw text of a document, decide if it is "
    "a professional resume. If it is, extract structured data that can populate a portfolio. "
    "Respond with strict JSON (no additional commentary) matching this shape:\n"
    "{\n"
    "    \"is_resume\": boolean,\n"
    "    \"confidence\": number (0-1),\n"
    "    \"reason\": string,\n"
    "    \"candidate\": {\n"
    "        \"name\": string | null,\n"
    "        \"contact\": {\n"
    "            \"email\": string | null,\n"
    "            \"phone\": string | null,\n"
    "            \"location\": string | null,\n"
    "            \"website\": string | null,\n"
    "            \"linkedin\": string | null,\n"
    "            \"github\": string | null,\n"
    "            \"links\": [{\"label\": string | null, \"url\": string}]\n"
    "        },\n"
    "        \"summary\": string | null,\n"
    "        \"experience\": [{\"role\": string | null, \"company\": string | null, "
    "\"start\": string | null, \"end\": string | null, \"highlights\": string[]}],\n"
    "        \"education\": [{\"institution\": string | null, \"degree\": string | null, "
    "\"years\": string | null, \"details\": string[]}],\n"
    "        \"skills\": string[],\n"
    "        \"projects\": [{\"name\": string | null, \"description\": string | null, "
    "\"details\": string[] | null}],\n"
    "        \"achievements\": string[]\n"
    "    }\n"
    "}\n\n"
    "Guidelines:\n"
    "- Preserve key facts from the resume; do not invent data.\n"
    "- Ensure arrays contain trimmed strings with at least 3-5 bullet points when available.\n"
    "- Omit duplicate or contact-only lines from summaries, highlights, and details.\n"
    "- Normalize URLs to include https:// and provide labels for extra links when possible.\n"
    "- If the document is not a resume, set \"is_resume\" to false, supply a brief reason, "
    "and omit the candidate object.\n\n"
    "Do not include any additional text, explanations, or formatting outside the JSON."
)


def truncate_document_text(text: str, max_chars: int = PARSER_DEFAULTS.LLM_MAX_INPUT_CHARS) -> str:
    """
    Cut `text` down to `max_chars` characters, appending a marker with the
    number of dropped characters.

    Example:
        >>> truncate_document_text("abcdef", max_chars=4)
        'abcd\\n\\n[TRUNCATED 2 CHARACTERS]'
    """
    if len(text) <= max_chars:
        return text
    return f"{text[:max_chars]}\n\n[TRUNCATED {len(text) - max_chars} CHARACTERS]"


def build_analyzer_user_prompt(text: str, max_chars: int = PARSER_DEFAULTS.LLM_MAX_INPUT_CHARS) -> str:
    return f'Document text:\n"""{truncate_document_text(text or "", max_chars)}"""'
