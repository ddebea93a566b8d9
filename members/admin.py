# ============================================
# members/admin.py
# ============================================
from django.contrib import admin
from .models import MemberProfile, Photo


class PhotoInline(admin.TabularInline):
    model = Photo
    extra = 0
    fields = ['url', 'public_id', 'is_main', 'created_at']
    readonly_fields = ['created_at']


@admin.register(MemberProfile)
class MemberProfileAdmin(admin.ModelAdmin):
    list_display = [
        'user',
        'known_as',
        'gender',
        'city',
        'country',
        'last_active'
    ]
    list_filter = ['gender', 'country', 'created']
    search_fields = ['user__username', 'user__email', 'known_as', 'city']
    readonly_fields = ['created', 'last_active']
    inlines = [PhotoInline]

    fieldsets = (
        ('User', {
            'fields': ('user',)
        }),
        ('Basic Information', {
            'fields': (
                'known_as',
                'date_of_birth',
                'gender',
            )
        }),
        ('About', {
            'fields': ('introduction', 'looking_for', 'interests')
        }),
        ('Location', {
            'fields': ('city', 'country')
        }),
        ('Metadata', {
            'fields': ('created', 'last_active'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Photo)
class PhotoAdmin(admin.ModelAdmin):
    list_display = ['member', 'url', 'is_main', 'created_at']
    list_filter = ['is_main', 'created_at']
    search_fields = ['member__user__username', 'public_id']
    readonly_fields = ['created_at']
