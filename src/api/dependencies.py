"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the calculator
session, the connectivity monitor and the remote API adapter into routes.
"""

from fastapi import Request

from src.adapters.connectivity import ConnectivityMonitor
from src.domain.calculator import CalculatorSession
from src.domain.ports import EosbApi


def get_api(request: Request) -> EosbApi:
    """
    Get remote API adapter from app state.

    The adapter is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.api


def get_session(request: Request) -> CalculatorSession:
    """Get the calculator session shared by all routes."""
    return request.app.state.session


def get_monitor(request: Request) -> ConnectivityMonitor:
    """Get the connectivity monitor that owns the connectivity state."""
    return request.app.state.monitor
