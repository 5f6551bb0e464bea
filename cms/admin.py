from django.contrib import admin
from django.utils.html import format_html
from .models import Blueprint, Entry, Fieldset, Navigation, NavTree
import json

# Customize admin site
admin.site.site_header = "Content Store Admin"
admin.site.site_title = "Content Store Admin"
admin.site.index_title = "Imported Content"


def format_json(value):
    """Display a JSON payload as an indented block."""
    if not value:
        return 'No data'
    formatted_json = json.dumps(value, indent=2, sort_keys=False, default=str)
    return format_html(
        '<pre style="max-height: 300px; overflow: auto; background: #f5f5f5; padding: 10px; border: 1px solid #ddd; border-radius: 2px;">{}</pre>',
        formatted_json
    )


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin):
    list_display = ('id', 'collection', 'site', 'slug', 'origin_id', 'published', 'updated_at')
    list_filter = ('collection', 'site', 'published')
    search_fields = ('id', 'slug', 'origin_id')
    readonly_fields = ('id', 'created_at', 'updated_at', 'formatted_data')
    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'collection', 'site', 'slug', 'blueprint', 'published')
        }),
        ('Localization', {
            'fields': ('origin_id',),
            'classes': ('collapse',)
        }),
        ('Ordering', {
            'fields': ('date', 'order'),
            'classes': ('collapse',)
        }),
        ('Data', {
            'fields': ('formatted_data', 'data', 'created_at', 'updated_at'),
        }),
    )

    def formatted_data(self, obj):
        return format_json(obj.data)
    formatted_data.short_description = 'Data (Formatted)'

    def get_queryset(self, request):
        qs = super().get_queryset(request)
        return qs.order_by('collection', 'site', 'slug')


@admin.register(Blueprint)
class BlueprintAdmin(admin.ModelAdmin):
    list_display = ('handle', 'namespace', 'hidden', 'order', 'updated_at')
    list_filter = ('namespace', 'hidden')
    search_fields = ('handle', 'namespace')
    readonly_fields = ('created_at', 'updated_at', 'formatted_data')

    def formatted_data(self, obj):
        return format_json(obj.data)
    formatted_data.short_description = 'Data (Formatted)'


@admin.register(Fieldset)
class FieldsetAdmin(admin.ModelAdmin):
    list_display = ('handle', 'updated_at')
    search_fields = ('handle',)
    readonly_fields = ('created_at', 'updated_at', 'formatted_data')

    def formatted_data(self, obj):
        return format_json(obj.data)
    formatted_data.short_description = 'Data (Formatted)'


class NavTreeInline(admin.TabularInline):
    model = NavTree
    extra = 0
    fields = ('site', 'tree', 'updated_at')
    readonly_fields = ('updated_at',)


@admin.register(Navigation)
class NavigationAdmin(admin.ModelAdmin):
    list_display = ('handle', 'title', 'tree_count', 'updated_at')
    search_fields = ('handle', 'title')
    readonly_fields = ('created_at', 'updated_at')
    inlines = [NavTreeInline]

    def tree_count(self, obj):
        return obj.trees.count()
    tree_count.short_description = 'Trees'
