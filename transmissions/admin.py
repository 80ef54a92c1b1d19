from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.utils.html import format_html
from transmissions.models import Dispute, Flag, Handle, Report, User
from transmissions.repos import ReportRepo


@admin.register(User)
class SurfaceLogUserAdmin(UserAdmin):
    """User admin with the linked Firebase uid."""
    list_display = ('email', 'username', 'firebase_uid', 'is_staff', 'date_joined')
    search_fields = ('email', 'username', 'firebase_uid')
    fieldsets = UserAdmin.fieldsets + (("Firebase", {"fields": ("firebase_uid",)}),)


class DisputeInline(admin.StackedInline):
    """Show disputes directly on the report page in Admin."""
    model = Dispute
    extra = 0
    readonly_fields = ['user', 'message', 'created_at']


@admin.register(Handle)
class HandleAdmin(admin.ModelAdmin):
    list_display = ('display', 'canonical_key', 'platform', 'created_at')
    search_fields = ('display', 'canonical_key')
    list_filter = ('platform',)
    readonly_fields = ('canonical_key', 'created_at')


@admin.register(Report)
class ReportAdmin(admin.ModelAdmin):
    """Admin configuration for reports with moderation actions."""
    list_display = ('handle', 'sentiment', 'severity', 'encounter', 'created_at', 'hidden', 'flag_count_display')
    list_filter = ('hidden', 'sentiment', 'severity', 'encounter', 'created_at')
    search_fields = ('description', 'handle__display', 'handle__canonical_key')
    list_select_related = ('handle',)
    actions = ['hide_content', 'approve_content']
    inlines = [DisputeInline]

    def flag_count_display(self, obj):
        """Return formatted count of flags."""
        count = obj.flags.count()
        if count > 0:
            return format_html('<span style="color:red; font-weight:bold;">{} Flags</span>', count)
        return "0"
    flag_count_display.short_description = "Flags"

    @admin.action(description='Hide selected reports')
    def hide_content(self, request, queryset):
        """Mark selected reports as hidden."""
        hidden = ReportRepo().hide(queryset.values_list("id", flat=True))
        self.message_user(request, f"{hidden} report(s) hidden.")

    @admin.action(description='Unhide selected reports')
    def approve_content(self, request, queryset):
        """Unhide selected reports."""
        queryset.update(hidden=False)


@admin.register(Flag)
class FlagAdmin(admin.ModelAdmin):
    list_display = ('report', 'user', 'created_at')
    search_fields = ('user__email',)


@admin.register(Dispute)
class DisputeAdmin(admin.ModelAdmin):
    list_display = ('report', 'user', 'short_message', 'created_at')
    search_fields = ('message', 'user__email')

    def short_message(self, obj):
        """Shorten dispute text for list display."""
        return obj.message[:50] + "..." if len(obj.message) > 50 else obj.message
