"""Run every demo scenario and print its displayable output.

    $ python -m adtkit.demo
    $ ADTKIT_LOG_LEVEL=DEBUG python -m adtkit.demo
"""

from __future__ import annotations

import sys
from typing import TextIO

from ..observability import configure_from_settings, get_logger
from .arithmetic import describe_division, divide_text, parse_number, safe_divide
from .forms import (
    Form,
    handle_validation,
    validate_form,
    validate_forms,
    validate_simplify,
    validate_with_fold,
)
from .lookup import describe_age, lookup_benefit, safe_get
from .presence import is_required_map, is_required_match


def run_all_examples(output: TextIO | None = None) -> None:
    """Print each scenario under a heading."""
    out = output or sys.stdout
    log = get_logger("adtkit.demo")

    def section(title: str) -> None:
        print(f"\n== {title}", file=out)

    ages = {"steve": 39, "laura": 38}
    benefits = {39: "benefits", 47: "benefits"}

    section("Maybe: safe lookups")
    for name in ("steve", "steven"):
        print(f"{name}: {safe_get(ages, name)!r} -> {describe_age(safe_get(ages, name))}", file=out)
    for name in ("steve", "laura", "steven"):
        print(f"benefit for {name}: {lookup_benefit(ages, benefits, name)!r}", file=out)

    section("Result: division and parsing")
    print(f"10 / 5 = {safe_divide(10, 5)!r}", file=out)
    print(f"10 / 0 = {safe_divide(10, 0)!r} -> {safe_divide(10, 0).get_or_else('Try again.')}", file=out)
    for text in ("42", "4.5", "four"):
        print(f"parse {text!r}: {parse_number(text)!r}", file=out)
    print(f"'9' / '3' = {divide_text('9', '3')!r}", file=out)
    print(describe_division(10, 4), file=out)
    print(describe_division(1, 0), file=out)

    section("Maybe -> Validation: required fields")
    for value in ("Steve", "", None, float("nan")):
        print(f"{value!r}: {is_required_match(value, 'name')!r} / {is_required_map(value, 'name')!r}", file=out)

    section("Validation: forms")
    forms = [
        Form(),
        Form(email="bademail", password="badpassword"),
        Form(email="good@email.com", password="badpassword"),
        Form(email="good@email.com", password="abc123+"),
        Form(email="good@email.com", password="abc123+-="),
    ]
    for form in forms:
        print(handle_validation(validate_simplify(validate_form(form))), file=out)
    print(validate_with_fold(forms[0]), file=out)
    print(validate_with_fold(forms[-1]), file=out)
    print(handle_validation(validate_forms(forms[:3])), file=out)

    log.info("demo finished", scenarios=4)


def main() -> int:
    configure_from_settings()
    try:
        run_all_examples()
    except Exception:
        get_logger("adtkit.demo").exception("demo failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
