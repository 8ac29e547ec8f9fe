"""Platform admin back-office operations."""

import logging
from datetime import timedelta

from django.utils import timezone

from accounts.domain import InvitationId, LoginLogPage, LoginLogQuery, LoginLogStats, PlatformSettings
from accounts.stores.interfaces import InvitationStore, LoginLogStore, PlatformSettingsStore
from core.errors import InvalidIdError, InvalidRequestError

logger = logging.getLogger(__name__)

MAX_LOG_PAGE = 200


class PlatformAdminService:
    def __init__(
        self,
        settings_store: PlatformSettingsStore,
        login_logs: LoginLogStore,
        invitations: InvitationStore,
    ) -> None:
        self._settings = settings_store
        self._login_logs = login_logs
        self._invitations = invitations

    def get_settings(self) -> PlatformSettings:
        return self._settings.get_settings()

    def update_settings(self, updates: dict) -> PlatformSettings:
        """Apply already-validated field updates.

        Raises:
            InvalidRequestError: If there is nothing to update.
        """
        if not updates:
            raise InvalidRequestError("No valid updates provided")
        logger.info("Updating platform settings: %s", ", ".join(sorted(updates)))
        return self._settings.update_settings(updates)

    def list_login_logs(
        self, query: LoginLogQuery, include_stats: bool = False
    ) -> tuple[LoginLogPage, LoginLogStats | None]:
        query = LoginLogQuery(
            limit=min(max(query.limit, 1), MAX_LOG_PAGE),
            offset=max(query.offset, 0),
            business_id=query.business_id,
            user_type=query.user_type,
        )
        page = self._login_logs.list_logs(query)
        stats = None
        if include_stats:
            today_start = timezone.localtime().replace(hour=0, minute=0, second=0, microsecond=0)
            stats = self._login_logs.get_stats(today_start)
        return page, stats

    def delete_invitation(self, invitation_id: str) -> None:
        """Delete an invitation; deleting a missing one is not an error.

        Raises:
            InvalidIdError: If the id is not a valid UUID.
        """
        try:
            invitation = InvitationId.from_string(invitation_id)
        except ValueError:
            raise InvalidIdError("Invalid invitation ID format")
        if not self._invitations.delete_invitation(invitation):
            logger.info("Invitation %s already gone", invitation.value)

    def prune_login_logs(self, retention_days: int) -> int:
        """Delete login logs older than the retention window."""
        if retention_days < 1:
            raise InvalidRequestError("Retention must be at least one day")
        cutoff = timezone.now() - timedelta(days=retention_days)
        deleted = self._login_logs.delete_older_than(cutoff)
        logger.info("Pruned %d login logs older than %s", deleted, cutoff.date())
        return deleted
