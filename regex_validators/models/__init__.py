from .validation import ValidationRule, ValidationResult


__all__ = [
    "ValidationRule",
    "ValidationResult",
]
