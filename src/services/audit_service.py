"""Audit service for logging ledger mutations."""

from sqlalchemy.orm import Session

from src.models.audit_log import AuditLog


class AuditService:
    """Service for audit log operations.

    Provides static method to create minimal audit log entries inside the
    caller's transaction, so a rolled back operation leaves no audit row.
    """

    @staticmethod
    def log(
        db: Session,
        entity_type: str,
        entity_key: str,
        action: str,
        actor: str,
        block_height: int,
        changes: dict | None = None,
    ) -> AuditLog:
        """Create audit log entry (one-liner).

        Args:
            db: Database session
            entity_type: Type of record ("share", "expense", etc.)
            entity_key: Composite key of the record as text ("1:7")
            action: Action performed ("register", "distribute", etc.)
            actor: Identity that invoked the operation
            block_height: Ledger height at which the mutation happened
            changes: Optional JSON snapshot of changed fields

        Returns:
            Created AuditLog object
        """
        audit = AuditLog(
            entity_type=entity_type,
            entity_key=entity_key,
            action=action,
            actor=actor,
            block_height=block_height,
            changes=changes,
        )
        db.add(audit)
        return audit


__all__ = ["AuditService"]
