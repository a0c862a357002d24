from .models import SemanticVersion, UpdateVerdict
from .errors import (
    ApiError,
    AppError,
    NetworkError,
    ParseError,
    PayloadShapeError,
    UpdateCheckError,
    ValidationError,
)

__all__ = [
    "SemanticVersion",
    "UpdateVerdict",
    "AppError",
    "UpdateCheckError",
    "ValidationError",
    "NetworkError",
    "PayloadShapeError",
    "ApiError",
    "ParseError",
]
