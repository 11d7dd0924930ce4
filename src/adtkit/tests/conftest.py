"""Shared fixtures: sample forms, clean settings, silent logging."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from adtkit.config import clear_settings_cache
from adtkit.demo.forms import Form
from adtkit.observability import configure_logging


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate every test from ADTKIT_* variables and the settings cache."""
    import os

    for key in [k for k in os.environ if k.startswith("ADTKIT_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging("none")
    yield
    clear_settings_cache()


@pytest.fixture
def ages() -> dict[str, int]:
    return {"steve": 39, "laura": 38}


@pytest.fixture
def benefits() -> dict[int, str]:
    return {39: "benefits", 47: "benefits"}


@pytest.fixture
def empty_form() -> Form:
    return Form()


@pytest.fixture
def bad_email_bad_password() -> Form:
    return Form(email="bademail", password="badpassword")


@pytest.fixture
def bad_password() -> Form:
    return Form(email="good@email.com", password="badpassword")


@pytest.fixture
def short_password() -> Form:
    return Form(email="good@email.com", password="abc123+")


@pytest.fixture
def valid_form() -> Form:
    return Form(email="good@email.com", password="abc123+-=")
