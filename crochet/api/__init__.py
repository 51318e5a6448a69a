from .validate import ValidationReport, validate_pattern

__all__ = [
    "validate_pattern",
    "ValidationReport",
]
