"""exceptions.py
Defines custom exceptions for this project.
"""
from typing import Optional, List, Dict, Any

# ------------------------ File Parser Errors ------------------------
class FileParserError(Exception):
    """Base exception for file parser errors."""
    pass

class UnsupportedFormatError(FileParserError):
    """Raised when a document has a MIME type no FileParser can decode."""
    def __init__(
        self,
        mime_type: str,
        supported_mime_types: Optional[List[str]] = None,
        context: Optional[str] = None
    ):
        self.mime_type = mime_type
        self.supported_mime_types = supported_mime_types or []
        message = f"Unsupported file type: {mime_type}"
        if self.supported_mime_types:
            message += f". Supported types: {self.supported_mime_types}"
        if context:
            message += f" Context: {context}"
        super().__init__(message)

class FileTooLargeError(FileParserError):
    """Raised when a document exceeds the allowed file size."""
    def __init__(self, max_size: int, actual_size: int):
        super().__init__(
            f"File size is {actual_size} bytes, which exceeds the max allowed {max_size} bytes."
        )
        self.max_size = max_size
        self.actual_size = actual_size

class FileOpenError(FileParserError):
    """Raised when a document's bytes cannot be opened or decoded."""
    def __init__(self, mime_type: str, original_error: str):
        super().__init__(
            f"Failed to open or read `{mime_type}` document. Original error: {original_error}"
        )
        self.mime_type = mime_type
        self.original_error = original_error

# ------------------------ Resume Validation Errors ------------------------
class ResumeValidationError(Exception):
    """
    Raised when a document does not look like a resume.

    This is an expected, user-facing failure. `details` carries the diagnostic
    payload that led to the rejection.

    Attributes:
        message (str): Human-readable description of the rejection.
        details (dict): Always holds `heuristics` (ResumeHeuristics); holds
            `analysis` (AnalyzerResponse) when the external analyzer rejected
            the document.
    """
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    @property
    def heuristics(self):
        return self.details.get("heuristics")

# ------------------------ Field Extraction Errors ------------------------

class FieldExtractionError(Exception):
    """
    Raised when a FieldExtractor fails to extract a value from a document.

    Attributes:
        field_name (str | None): The name of the field being extracted (optional).
        message (str): Human-readable description of the error.
        lines (list[str] | None): Optional lines the extractor searched, useful
            for debugging extraction failures.
    """

    def __init__(
        self,
        field_name: str | None = None,
        message: str = "Failed to extract field",
        lines: list[str] | None = None,
    ):
        self.field_name = field_name
        self.message = message
        self.lines = lines
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        """Construct the complete error message including the searched lines."""
        base_message = (
            f"{self.message}: {self.field_name}" if self.field_name else self.message
        )
        if self.lines:
            lines_display = "\n".join(f"- {line}" for line in self.lines if line)
            base_message += f"\n\nSearched Lines:\n{lines_display}"
        return base_message

# ------------------------ Extractor Map Errors ------------------------
class ExtractorMapConfigError(Exception):
    """
    Raised when the extractor_map configuration is invalid.
    Provides a clear message about what went wrong.
    """
    def __init__(self, message: str):
        super().__init__(f"ExtractorMapConfigError: {message}")


# ------------------------ LLM Querying Errors ------------------------
class LLMConfigError(Exception):
    """Raised when a required configuration (in .env by default) for LLMClient to function
    is missing or invalid."""

    def __init__(
        self,
        variable_name: str,
        message: str = None,
        extra_info: str = None
    ):
        """
        Args:
            variable_name: Name of the config variable.
            message: Optional custom message for the error.
            extra_info: Additional information to append to the error message.
        """
        if message is None:
            message = f"Missing or invalid configuration: {variable_name}. Please set it in your .env file."
        if extra_info:
            message += f" | {extra_info}"
        super().__init__(message)
        self.variable_name = variable_name
        self.extra_info = extra_info

    def __str__(self):
        return f"[CONFIG ERROR] {super().__str__()} | Variable: {self.variable_name}"

class LLMError(Exception):
    """Base exception for all LLM-related errors."""
    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None
    ):
        self.provider = provider
        self.model = model
        self.original_exception = original_exception

        base_msg = message
        if provider:
            base_msg += f" | Provider: {provider}"
        if model:
            base_msg += f" | Model: {model}"
        if original_exception:
            base_msg += f" | Original Exception: {original_exception}"

        super().__init__(base_msg)


class LLMInitializationError(LLMError):
    """Raised when the LLM client fails to initialize."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        additional_message: Optional[str] = None
    ):
        message = "Failed to initialize LLM client"
        if additional_message:
            message += f": {additional_message}"
        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMQueryError(LLMError):
    """Raised when a query to the LLM fails."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        additional_message: Optional[str] = None,
        original_exception: Exception = None,
    ):
        message = "LLM query failed"
        if additional_message:
            message += f": {additional_message}"

        super().__init__(
            message=message,
            provider=provider,
            model=model,
            original_exception=original_exception,
        )


class LLMEmptyResponse(LLMError):
    """Raised when the LLM returns an empty response."""
    def __init__(
        self,
        provider: Optional[str] = None,
        model: Optional[str] = None
    ):
        super().__init__(
            message="LLM returned an empty response",
            provider=provider,
            model=model,
        )


class ExternalAnalyzerError(LLMError):
    """
    Raised inside ExternalAnalyzer when the remote analysis cannot be used
    (query failure, non-JSON or malformed response). Always recovered by
    `ExternalAnalyzer.analyze()`, which degrades to "no candidate".
    """
    def __init__(
        self,
        additional_message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=f"External resume analysis failed: {additional_message}",
            provider=provider,
            model=model,
            original_exception=original_exception,
        )
