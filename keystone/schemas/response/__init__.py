from .validation import ValidationResponse, ValidationResult

__all__ = ["ValidationResponse", "ValidationResult"]
