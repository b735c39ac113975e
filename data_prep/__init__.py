"""
Data preparation: form coercion and validation of input records.
"""

from .form import DEFAULT_FORM_VALUES, FormPayload, input_from_form
from .validators import ValidationResult, require_valid_input, validate_input

__all__ = [
    "DEFAULT_FORM_VALUES",
    "FormPayload",
    "input_from_form",
    "ValidationResult",
    "require_valid_input",
    "validate_input",
]
