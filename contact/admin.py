from django.contrib import admin
from .models import ContactMessage


@admin.register(ContactMessage)
class ContactMessageAdmin(admin.ModelAdmin):
    list_display = ('name', 'email', 'service_type', 'event_date', 'status', 'created_at')
    list_filter = ('status', 'service_type', 'how_found_us')
    search_fields = ('name', 'email', 'message')
    readonly_fields = (
        'name', 'email', 'phone', 'service_type', 'event_date',
        'message', 'how_found_us', 'created_at', 'updated_at',
    )
    actions = ('mark_as_read', 'mark_as_archived')

    def has_add_permission(self, request):
        return False  # messages come from the contact form only

    @admin.action(description='Mark selected messages as read')
    def mark_as_read(self, request, queryset):
        queryset.filter(status=ContactMessage.STATUS_PENDING).update(status=ContactMessage.STATUS_READ)

    @admin.action(description='Archive selected messages')
    def mark_as_archived(self, request, queryset):
        queryset.update(status=ContactMessage.STATUS_ARCHIVED)
