"""check_mime_type.py
Checks a document's MIME type and confirms that a FileParser supports it.
"""

from typing import Iterable

from resume_portfolio.exceptions import UnsupportedFormatError

def normalize_mime_type(mime_type: str | None) -> str:
    """Lowercase a MIME type and drop any parameters (e.g. `; charset=utf-8`)."""
    return (mime_type or "").split(";", 1)[0].strip().lower()


def check_mime_type(mime_type: str | None, supported_mime_types: Iterable[str]) -> str:
    """
    Validate a MIME type and return the supported entry it matched.

    Supported entries ending in `/*` (e.g. `text/*`) match any subtype.
    Exact entries are tried before wildcard entries.

    Raises:
        UnsupportedFormatError: If no supported entry matches.
    """
    normalized = normalize_mime_type(mime_type)
    supported_mime_types = list(supported_mime_types)

    for supported in sorted(supported_mime_types, key=lambda entry: entry.endswith("/*")):
        if supported.endswith("/*"):
            if normalized.startswith(supported[:-1]) and len(normalized) > len(supported) - 1:
                return supported
        elif normalized == supported:
            return supported

    raise UnsupportedFormatError(
        mime_type=mime_type or "unknown",
        supported_mime_types=supported_mime_types,
    )
