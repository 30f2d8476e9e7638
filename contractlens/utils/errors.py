"""Typed failures raised by the extraction core.

Text extraction errors are fatal to the enclosing file run. ConfigurationError
is only raised by callers that explicitly ask for strict credential checks.
"""
from __future__ import annotations


class ContractLensError(Exception):
    """Base class for all contractlens failures."""


class NotFoundError(ContractLensError):
    def __init__(self, path: str):
        super().__init__(f"File not found: {path}")
        self.path = path


class UnsupportedFormatError(ContractLensError):
    def __init__(self, extension: str, supported: str):
        super().__init__(f"Unsupported file type '{extension}'. Supported: {supported}")
        self.extension = extension


class ExtractionFailedError(ContractLensError):
    """Format specific parse or OCR failure; the message carries the cause."""


class NoTextualContentError(ExtractionFailedError):
    pass


class CorruptedPdfError(ExtractionFailedError):
    pass


class ConfigurationError(ContractLensError):
    pass
