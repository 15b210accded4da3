"""Custom exceptions for calculator contract errors."""

from typing import Any, Dict, Optional


class ContractError(Exception):
    """Error that maps to a stable API error payload."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        status_code: int = 400,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class UnsupportedLanguageError(ContractError):
    """Requested label language has no translation table."""

    def __init__(self, language: str, supported: list[str]) -> None:
        super().__init__(
            "UNSUPPORTED_LANGUAGE",
            f"Unsupported language: {language}",
            status_code=404,
            details={"language": language, "supported": supported},
        )
