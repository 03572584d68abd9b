"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A mocked user directory with every name and email free
- Valid registration input
"""

from unittest.mock import Mock

import pytest

from src.domain.models import RegistrationInput


@pytest.fixture
def directory() -> Mock:
    """Directory mock reporting every username and email as free."""
    mock = Mock()
    mock.username_is_not_in_use.return_value = True
    mock.email_is_not_in_use.return_value = True
    mock.register.return_value = None
    return mock


@pytest.fixture
def valid_input() -> RegistrationInput:
    """Registration input that passes every rule."""
    return RegistrationInput(
        username="bookworm",
        email="bookworm@example.com",
        password="Abcdefg1@",
        password_confirmation="Abcdefg1@",
    )
