from .base import (
    AppError,
    AuthError,
    ConflictError,
    DomainError,
    InfrastructureError,
    InternalError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .validation import raise_validation_error

__all__ = [
    "AppError",
    "AuthError",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "NotFoundError",
    "StorageError",
    "ValidationError",
    "raise_validation_error",
]
