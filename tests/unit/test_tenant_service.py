"""Unit tests for the tenant directory."""

import pytest

from src.services.errors import AlreadyExistsError, NotFoundError
from src.services.tenant_service import TenantService
from tests.identities import ALICE, BOB


class TestTenantService:
    @pytest.fixture
    def service(self, db_session):
        return TenantService(db_session)

    def test_register_tenant(self, service):
        tenant = service.register_tenant(ALICE, 1, "John Doe", "john@example.com")

        assert tenant.identity == ALICE
        assert tenant.name == "John Doe"
        assert tenant.contact == "john@example.com"
        assert tenant.rating == 5

    def test_register_existing_tenant_fails(self, service):
        service.register_tenant(ALICE, 1, "John Doe", "john@example.com")

        with pytest.raises(AlreadyExistsError):
            service.register_tenant(BOB, 1, "Jane Doe", "jane@example.com")

        assert service.get_tenant(1).identity == ALICE

    def test_resolve_tenant_identity(self, service):
        service.register_tenant(BOB, 2, "Jane Doe", "jane@example.com")

        assert service.resolve_tenant_identity(2) == BOB

    def test_resolve_unknown_tenant(self, service):
        with pytest.raises(NotFoundError):
            service.resolve_tenant_identity(404)
