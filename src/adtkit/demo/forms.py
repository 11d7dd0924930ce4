r"""Form validation with accumulating Validation values.

Rules are the basic elements. Each returns Valid(value) or an Invalid holding
a single message, so they concatenate into field validations, and field
validations concatenate into form validations. Every failing rule shows up in
the final error list, in declaration order.

    >>> handle_validation(validate_form(Form(email="good@email.com", password="abc123+-=")))
    'Success: abc123+-='
    >>> validate_form(Form()).errors[:2]
    ['You must enter a value for email.', 'Field <email> does not match expression ^\\w+([.-]?\\w+)*@\\w+([.-]?\\w+)*(\\.\\w{2,3})+$.']
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from ..config import get_settings
from ..monads import Invalid, Valid, Validation, collect
from ..observability import get_logger

log = get_logger("adtkit.demo.forms")


class Form(BaseModel):
    """Sign-up form with two text fields."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    password: str = ""


class FormRules(BaseModel):
    """Patterns and limits applied by validate_form."""

    model_config = ConfigDict(frozen=True)

    email_pattern: re.Pattern[str] = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")
    password_pattern: re.Pattern[str] = Field(
        default=re.compile(r"\W"), description="Password must contain a special symbol"
    )
    password_min: PositiveInt = Field(
        default_factory=lambda: get_settings().validation.password_min,
        description="Password length must exceed this",
    )


# ─────────────────────────────────────────────────────────────────────────────
# Rules
# ─────────────────────────────────────────────────────────────────────────────


def not_empty(field: str, value: str) -> Validation[str, str]:
    return Valid(value) if value.strip() else Invalid([f"You must enter a value for {field}."])


def min_length(field: str, minimum: int, value: str) -> Validation[str, str]:
    """Valid only when value is strictly longer than minimum."""
    return (
        Valid(value)
        if len(value) > minimum
        else Invalid([f"Field <{field}> must contain a minimum of {minimum} characters"])
    )


def matches(field: str, pattern: re.Pattern[str], value: str) -> Validation[str, str]:
    """Valid when pattern is found anywhere in value."""
    return (
        Valid(value)
        if pattern.search(value)
        else Invalid([f"Field <{field}> does not match expression {pattern.pattern}."])
    )


# ─────────────────────────────────────────────────────────────────────────────
# Field & Form Validations
# ─────────────────────────────────────────────────────────────────────────────


def is_valid_email(field: str, value: str, rules: FormRules | None = None) -> Validation[str, str]:
    rules = rules or FormRules()
    return not_empty(field, value).concat(matches(field, rules.email_pattern, value))


def is_valid_password(field: str, value: str, rules: FormRules | None = None) -> Validation[str, str]:
    rules = rules or FormRules()
    return (
        not_empty(field, value)
        .concat(min_length(field, rules.password_min, value))
        .concat(matches(field, rules.password_pattern, value))
    )


def validate_form(form: Form, rules: FormRules | None = None) -> Validation[str, str]:
    """Email then password; Valid holds the password when both pass."""
    rules = rules or FormRules()
    result = is_valid_email("email", form.email, rules).concat(is_valid_password("password", form.password, rules))
    log.debug("form validated", outcome=result.variant, errors=len(result.errors))
    return result


def validate_form_collect(form: Form, rules: FormRules | None = None) -> Validation[str, str]:
    """Same as validate_form, written with collect()."""
    rules = rules or FormRules()
    return collect([
        is_valid_email("email", form.email, rules),
        is_valid_password("password", form.password, rules),
    ])


def validate_forms(forms: Iterable[Form], rules: FormRules | None = None) -> Validation[str, str]:
    """Validate several forms at once; errors from all of them are pooled."""
    rules = rules or FormRules()
    return collect(validate_form(form, rules) for form in forms)


# ─────────────────────────────────────────────────────────────────────────────
# Handling
# ─────────────────────────────────────────────────────────────────────────────


def success_handler(value: Any) -> str:
    return f"Success: {value}"


def failure_handler(errors: list[Any]) -> str:
    """One error per line inside brackets."""
    return "Failure: [\n" + ",\n".join(str(e) for e in errors) + "\n]"


def handle_validation(validation: Validation[Any, Any]) -> str:
    return validation.match_with({"Success": success_handler, "Failure": failure_handler})


def handle_validation_with_fold(validation: Validation[Any, Any]) -> str:
    return validation.fold(failure_handler, success_handler)


def validate_with_fold(form: Form, rules: FormRules | None = None) -> str:
    return handle_validation_with_fold(validate_form(form, rules))


# ─────────────────────────────────────────────────────────────────────────────
# Transformations
# ─────────────────────────────────────────────────────────────────────────────


def success_transformation(_: Any) -> str:
    return "Success"


def failure_transformation(_: Any) -> str:
    return "Failure"


def validate_success(validation: Validation[Any, Any]) -> Validation[str, Any]:
    """map: only a Valid value is replaced."""
    return validation.map(success_transformation)


def validate_failure(validation: Validation[Any, Any]) -> Validation[Any, str]:
    """map_failure: only the error list is replaced (by ["Failure"])."""
    return validation.map_failure(failure_transformation)


def validate_simplify(validation: Validation[Any, Any]) -> Validation[str, str]:
    """bimap: either side collapses to a single marker."""
    return validation.bimap(failure_transformation, success_transformation)
