from django.core.serializers.json import DjangoJSONEncoder
from django.db import models


class Entry(models.Model):
    """Content entry imported from a Markdown file with YAML front matter."""
    id = models.CharField(max_length=64, primary_key=True)  # Front matter 'id'
    site = models.CharField(max_length=50)
    collection = models.CharField(max_length=100)
    slug = models.CharField(max_length=255, blank=True)
    blueprint = models.CharField(max_length=100, blank=True, null=True)
    # Plain column: stragglers may reference entries that were never imported
    origin_id = models.CharField(max_length=64, blank=True, null=True, db_index=True)
    published = models.BooleanField(default=True)
    date = models.DateTimeField(null=True, blank=True)
    order = models.IntegerField(null=True, blank=True)
    data = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'cms_entries'
        verbose_name_plural = 'Entries'
        indexes = [
            models.Index(fields=['collection'], name='cms_entries_collection_idx'),
            models.Index(fields=['site'], name='cms_entries_site_idx'),
            models.Index(fields=['collection', 'slug'], name='cms_entries_coll_slug_idx'),
        ]

    def __str__(self):
        return str(self.data.get('title') or self.slug or self.id)

    @property
    def is_localization(self):
        return bool(self.origin_id)


class Blueprint(models.Model):
    """Blueprint schema; identity is (namespace, handle) taken from its path."""
    id = models.AutoField(primary_key=True)
    namespace = models.CharField(max_length=200, blank=True, null=True)
    handle = models.CharField(max_length=200)
    hidden = models.BooleanField(default=False)
    order = models.IntegerField(null=True, blank=True)
    data = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)  # Sections carry '__count'
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'cms_blueprints'
        unique_together = [['namespace', 'handle']]
        indexes = [
            models.Index(fields=['handle'], name='cms_blueprints_handle_idx'),
        ]

    def __str__(self):
        return f"{self.namespace}::{self.handle}" if self.namespace else self.handle

    def ordered_sections(self):
        """Return sections sorted by their stamped position."""
        sections = self.data.get('sections') or {}
        if isinstance(sections, dict):
            items = sections.items()
        else:
            items = enumerate(sections)
        return sorted(
            items,
            key=lambda item: item[1].get('__count', 0) if isinstance(item[1], dict) else 0,
        )


class Fieldset(models.Model):
    """Reusable field definitions; handle is the dotted relative path."""
    id = models.AutoField(primary_key=True)
    handle = models.CharField(max_length=200, unique=True)
    data = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'cms_fieldsets'

    def __str__(self):
        return self.handle


class Navigation(models.Model):
    """Navigation definition; owns one tree per site."""
    id = models.AutoField(primary_key=True)
    handle = models.CharField(max_length=100, unique=True)
    title = models.CharField(max_length=255, blank=True)
    data = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)  # collections, max_depth, ...
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'cms_navigations'

    def __str__(self):
        return self.title or self.handle


class NavTree(models.Model):
    """Ordered branches of a navigation for one site."""
    id = models.AutoField(primary_key=True)
    navigation = models.ForeignKey(Navigation, on_delete=models.CASCADE, related_name='trees')
    site = models.CharField(max_length=50)
    tree = models.JSONField(default=list, blank=True, encoder=DjangoJSONEncoder)
    settings = models.JSONField(default=dict, blank=True, encoder=DjangoJSONEncoder)
    created_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'cms_nav_trees'
        unique_together = [['navigation', 'site']]
        indexes = [
            models.Index(fields=['site'], name='cms_nav_trees_site_idx'),
        ]

    def __str__(self):
        return f"{self.navigation.handle} ({self.site})"
