"""
Testing utilities module.

Provides helpers and utilities for testing applications using service_manager.
"""

from .utilities import StubProvider, TestServiceManager, create_mock_manager

__all__ = [
    "TestServiceManager",
    "create_mock_manager",
    "StubProvider",
]
