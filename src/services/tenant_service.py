"""Tenant directory: resolves tenant ids to the identities that registered them.

Lease creation consumes resolve_tenant_identity; leases themselves are not
managed here.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from src.models import Tenant
from src.models.tenant import INITIAL_TENANT_RATING
from src.services.audit_service import AuditService
from src.services.errors import AlreadyExistsError, NotFoundError
from src.services.ledger_state_service import LedgerStateService
from src.services.store import KeyedStore

logger = logging.getLogger(__name__)


class TenantService:
    """Registration and identity lookup of tenants."""

    def __init__(self, db: Session):
        self.db = db
        self.tenants = KeyedStore(db, Tenant, ("tenant_id",))

    def register_tenant(self, caller: str, tenant_id: int, name: str, contact: str) -> Tenant:
        """Register a tenant under the caller's identity.

        Raises:
            AlreadyExistsError: If the tenant id is already registered
        """
        if self.tenants.exists(tenant_id):
            raise AlreadyExistsError(f"Tenant {tenant_id} already exists")

        height = LedgerStateService(self.db).advance_block()
        tenant = self.tenants.insert(
            tenant_id,
            identity=caller,
            name=name,
            contact=contact,
            rating=INITIAL_TENANT_RATING,
        )

        AuditService.log(
            self.db,
            entity_type="tenant",
            entity_key=self.tenants.describe(tenant_id),
            action="register",
            actor=caller,
            block_height=height,
            changes={"name": name},
        )
        logger.info(f"Registered tenant {tenant_id} for {caller}")
        return tenant

    def get_tenant(self, tenant_id: int) -> Optional[Tenant]:
        return self.tenants.get(tenant_id)

    def resolve_tenant_identity(self, tenant_id: int) -> str:
        """Identity of a registered tenant.

        Raises:
            NotFoundError: If the tenant id is unknown
        """
        tenant = self.tenants.get(tenant_id)
        if tenant is None:
            raise NotFoundError(f"Tenant {tenant_id} not found")
        return tenant.identity


__all__ = ["TenantService"]
