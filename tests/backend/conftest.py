"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with service instances bound to
the mock database and response assertion helpers.
"""

import sys
from pathlib import Path

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def user_service(mock_db):
    """UserService over the mock database."""
    from bookvibe.services.user_service import UserService
    return UserService(mock_db)


@pytest.fixture
def catalog_service(mock_db):
    """CatalogService over the mock database."""
    from bookvibe.services.catalog_service import CatalogService
    return CatalogService(mock_db)


@pytest.fixture
def cart_service(mock_db):
    """CartService over the mock database."""
    from bookvibe.services.cart_service import CartService
    return CartService(mock_db)


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
