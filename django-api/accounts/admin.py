from django.contrib import admin

from accounts.models import Account, AdminInvitation, LoginLog, PlatformSettings


@admin.register(Account)
class AccountAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "is_platform_admin", "created_at"]
    list_filter = ["is_platform_admin"]
    search_fields = ["email", "name"]
    exclude = ["password_hash"]


@admin.register(LoginLog)
class LoginLogAdmin(admin.ModelAdmin):
    list_display = ["user_email", "user_type", "business_name", "ip_address", "created_at"]
    list_filter = ["user_type"]
    search_fields = ["user_email", "business_name", "ip_address"]


@admin.register(AdminInvitation)
class AdminInvitationAdmin(admin.ModelAdmin):
    list_display = ["email", "phone", "status", "expires_at"]
    list_filter = ["status"]
    exclude = ["token"]


@admin.register(PlatformSettings)
class PlatformSettingsAdmin(admin.ModelAdmin):
    list_display = ["platform_fee_type", "flat_fee_amount", "percentage_fee", "updated_at"]
