"""Django signals for cache invalidation."""

from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from accounts.cache import SETTINGS_CACHE_KEY
from accounts.models import PlatformSettings


@receiver([post_save, post_delete], sender=PlatformSettings)
def invalidate_settings_cache(sender, instance, **kwargs):
    """Invalidate the cached settings when the singleton is saved or deleted."""
    cache.delete(SETTINGS_CACHE_KEY)
