from __future__ import annotations

from enum import Enum


class Ans104Error(Exception):
    """Base class for every error raised by this package."""


class RetrievalError(Ans104Error):
    """Fetching the raw bundle from the gateway failed."""


class ConfigurationError(Ans104Error, ValueError):
    """An argument or environment setting is unusable."""


class ParsingError(Ans104Error):
    """The container violates the bundle layout."""


class UnknownSignatureType(ParsingError):
    def __init__(self, code: int) -> None:
        super().__init__(f"unknown signature type: {code}")
        self.code = code


class PersistenceError(Ans104Error):
    """Writing the decoded bundle to its sink failed."""


class EncodingError(Ans104Error):
    """The decoded bundle could not be serialised."""


class ReasonCode(str, Enum):
    CONFIGURATION_ERROR = "configuration_error"
    RETRIEVAL_ERROR = "retrieval_error"
    PARSING_ERROR = "parsing_error"
    UNKNOWN_SIGNATURE_TYPE = "unknown_signature_type"
    PERSISTENCE_ERROR = "persistence_error"
    ENCODING_ERROR = "encoding_error"
    UNKNOWN_ERROR = "unknown_error"


# Subclasses first; the first isinstance match wins.
_REASONS: tuple[tuple[type[Exception], ReasonCode], ...] = (
    (UnknownSignatureType, ReasonCode.UNKNOWN_SIGNATURE_TYPE),
    (ParsingError, ReasonCode.PARSING_ERROR),
    (ConfigurationError, ReasonCode.CONFIGURATION_ERROR),
    (RetrievalError, ReasonCode.RETRIEVAL_ERROR),
    (PersistenceError, ReasonCode.PERSISTENCE_ERROR),
    (EncodingError, ReasonCode.ENCODING_ERROR),
)


def reason_code_for_exception(exc: BaseException) -> str:
    """Map an exception to the short reason string reported by the CLI."""
    for exc_type, code in _REASONS:
        if isinstance(exc, exc_type):
            return code.value
    return ReasonCode.UNKNOWN_ERROR.value
