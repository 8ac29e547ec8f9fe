from django.core.management.base import BaseCommand, CommandError

from accounts.services.admin_service import PlatformAdminService
from accounts.stores.django_store import (
    DjangoInvitationStore,
    DjangoLoginLogStore,
    DjangoPlatformSettingsStore,
)
from core.errors import DomainError


class Command(BaseCommand):
    help = "Delete login logs older than the retention window (default 365 days)."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--days", type=int, default=365)

    def handle(self, *args, **options) -> None:
        service = PlatformAdminService(
            DjangoPlatformSettingsStore(), DjangoLoginLogStore(), DjangoInvitationStore()
        )
        try:
            deleted = service.prune_login_logs(options["days"])
        except DomainError as exc:
            raise CommandError(exc.message)
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} login logs"))
