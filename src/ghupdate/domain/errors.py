from __future__ import annotations


class AppError(Exception):
    """Base app error."""


class UpdateCheckError(AppError):
    """Base for failures while evaluating an update."""

    kind = "error"


class ValidationError(UpdateCheckError):
    kind = "validation"


class NetworkError(UpdateCheckError):
    kind = "network"


class PayloadShapeError(UpdateCheckError):
    kind = "payload"


class ApiError(UpdateCheckError):
    kind = "api"

    def __init__(self, message: str):
        super().__init__(f"GitHub API error: {message}")
        self.message = message


class ParseError(UpdateCheckError):
    kind = "parse"

    def __init__(self, text: str, side: str | None = None):
        label = f"{side} version" if side else "version"
        super().__init__(f"Invalid {label}: {text!r}")
        self.text = text
        self.side = side
