"""Example client code built on the containers.

- lookup: safe map lookups (Maybe)
- arithmetic: divide-by-zero guards and cascading parsers (Result)
- presence: presence checks converted to field errors (Maybe -> Validation)
- forms: rule, field and form validation (Validation)
"""

from .arithmetic import describe_division, divide_text, parse_number, safe_divide
from .forms import (
    Form,
    FormRules,
    handle_validation,
    handle_validation_with_fold,
    is_valid_email,
    is_valid_password,
    validate_form,
    validate_form_collect,
    validate_forms,
    validate_with_fold,
)
from .lookup import describe_age, handle_maybe, lookup_benefit, safe_get
from .presence import exception_check, is_required_map, is_required_match

__all__ = [
    # lookup
    "safe_get", "handle_maybe", "describe_age", "lookup_benefit",
    # arithmetic
    "safe_divide", "parse_number", "divide_text", "describe_division",
    # presence
    "exception_check", "is_required_match", "is_required_map",
    # forms
    "Form", "FormRules", "is_valid_email", "is_valid_password",
    "validate_form", "validate_form_collect", "validate_forms",
    "handle_validation", "handle_validation_with_fold", "validate_with_fold",
]
