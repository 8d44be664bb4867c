"""file_parser.py

Holds abstract FileParser class inherited by format-specific parsers.
"""

from abc import ABC, abstractmethod

from resume_portfolio.config import PARSER_DEFAULTS
from resume_portfolio.exceptions import FileTooLargeError

from resume_portfolio.parse_classes.file_parser.helpers.check_mime_type import check_mime_type

class FileParser(ABC):
    """
    Abstract base class representing a generic document decoder.

    All concrete parsers must implement the `parse` method, which turns the
    raw document bytes into plain text.

    Args:
        file_bytes (bytes): Raw bytes of the uploaded document.
        mime_type (str): Declared MIME type of the document.
        max_file_size_mb (float | None, optional): Maximum allowed size in megabytes.
            If None, no size limit is enforced.

    Attributes:
        file_bytes (bytes): Raw document bytes.
        mime_type (str): Declared MIME type.
        max_file_size_mb (float | None): Maximum allowed file size.
    """
    # MIME types supported by a specific concrete class (to be overwritten by children)
    SUPPORTED_MIME_TYPES = []

    def __init__(
        self,
        file_bytes: bytes,
        mime_type: str,
        max_file_size_mb: float | None = PARSER_DEFAULTS.MAX_FILE_SIZE_MB
    ):
        self.file_bytes = file_bytes
        self.mime_type = mime_type
        self.max_file_size_mb = max_file_size_mb
        self._validate_file()
        check_mime_type(self.mime_type, self.SUPPORTED_MIME_TYPES)

    def _validate_file(self):
        """Validate whether the document can be parsed by this parser.

        Raises:
            TypeError: Raised if file_bytes is not bytes-like
            FileTooLargeError: Raised if the document exceeds max_file_size_mb
        """
        if not isinstance(self.file_bytes, (bytes, bytearray)):
            raise TypeError(
                f"file_bytes must be bytes, got {type(self.file_bytes).__name__}"
            )

        if self.max_file_size_mb is not None:
            # Convert MB to bytes (1 MB = 1024 * 1024 bytes)
            max_size_bytes = int(self.max_file_size_mb * 1024 * 1024)
            actual_size_bytes = len(self.file_bytes)

            if actual_size_bytes > max_size_bytes:
                raise FileTooLargeError(
                    max_size=max_size_bytes,
                    actual_size=actual_size_bytes
                )

    @abstractmethod
    def parse(self) -> str:
        """
        Decode `self.file_bytes` and return the document's raw text.

        Returns:
            str: Extracted text. May be empty for documents without text.
        """
        pass
