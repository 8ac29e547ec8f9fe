"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from accounts.domain import (
    Account,
    AccountId,
    Email,
    InvitationId,
    LoginAttempt,
    LoginLog,
    LoginLogPage,
    LoginLogQuery,
    LoginLogStats,
    PlatformSettings,
)


class AccountStore(ABC):
    """Interface for platform user persistence."""

    @abstractmethod
    def get_platform_admin(self, email: Email) -> Account | None:
        """Return the account with this e-mail if it is flagged platform admin."""
        ...

    @abstractmethod
    def get_by_email(self, email: Email) -> Account | None:
        """Return any account with this e-mail, or None."""
        ...

    @abstractmethod
    def get_by_id(self, account_id: AccountId) -> Account | None:
        """Return an account by ID, or None if not found."""
        ...

    @abstractmethod
    def set_password_hash(self, account_id: AccountId, password_hash: str) -> None:
        """Replace the stored credential of an account."""
        ...


class LoginLogStore(ABC):
    """Interface for the login audit trail."""

    @abstractmethod
    def record_admin_login(self, account: Account, attempt: LoginAttempt) -> LoginLog | None:
        """Write an audit row; returns None when the write failed."""
        ...

    @abstractmethod
    def list_logs(self, query: LoginLogQuery) -> LoginLogPage:
        """Return one page of logs, newest first, plus the filtered total."""
        ...

    @abstractmethod
    def get_stats(self, today_start: datetime) -> LoginLogStats:
        """Return aggregate counts over all logs."""
        ...

    @abstractmethod
    def delete_older_than(self, cutoff: datetime) -> int:
        """Delete logs created before ``cutoff`` and return how many were removed."""
        ...


class InvitationStore(ABC):
    """Interface for admin invitation persistence."""

    @abstractmethod
    def delete_invitation(self, invitation_id: InvitationId) -> bool:
        """Delete an invitation; returns whether a row existed."""
        ...


class PlatformSettingsStore(ABC):
    """Interface for the platform settings singleton."""

    @abstractmethod
    def get_settings(self) -> PlatformSettings:
        """Return current settings, creating defaults on first access."""
        ...

    @abstractmethod
    def update_settings(self, updates: dict) -> PlatformSettings:
        """Apply field updates and return the saved settings."""
        ...
