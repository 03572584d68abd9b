"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
the domain validator and its directory adapter into routes.
"""

from fastapi import Request

from src.domain.ports import UserDirectory
from src.domain.registration import RegistrationValidator


def get_user_directory(request: Request) -> UserDirectory:
    """
    Get the user directory from app state.

    The directory is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.directory


def get_registration_validator(request: Request) -> RegistrationValidator:
    """
    Create a validator for one form session.

    HTTP requests are stateless, so every request starts a fresh session;
    clients send the confirmation-touched flag explicitly.
    """
    return RegistrationValidator(directory=get_user_directory(request))
