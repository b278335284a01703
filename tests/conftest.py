"""Test fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from jwthandler import JWTHandler, RegisteredClaims, TokenDecoder


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo any structlog configuration made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def decoder() -> TokenDecoder[RegisteredClaims]:
    return TokenDecoder(RegisteredClaims)


@pytest.fixture
def handler() -> JWTHandler[RegisteredClaims]:
    return JWTHandler(RegisteredClaims)
