"""
Database storage layer - upserts imported records (destination of imports).
"""
import logging
from django.db import transaction
from cms.models import Blueprint, Entry, Fieldset, Navigation, NavTree

logger = logging.getLogger('cms')


class DatabaseStorage:
    """Writes records to the database, keyed by their stable identity.

    Every write is an upsert, so re-running an import updates rows in place.
    Timestamps come from the source file, never from the clock.
    """

    @staticmethod
    def _timestamps(last_modified):
        return {'created_at': last_modified, 'updated_at': last_modified}

    def save_entry(self, record, last_modified):
        """Create or update the Entry row for an EntryRecord."""
        try:
            with transaction.atomic():
                defaults = record.to_model_data()
                defaults.update(self._timestamps(last_modified))
                entry, created = Entry.objects.update_or_create(
                    id=record.key,
                    defaults=defaults,
                )
                logger.debug(f"{'Created' if created else 'Updated'} entry {entry.id}")
                return entry
        except Exception as e:
            logger.error(f"Error saving entry {record.key}: {e}")
            raise

    def save_blueprint(self, namespace, handle, contents, last_modified, hidden=False, order=None):
        try:
            with transaction.atomic():
                blueprint, created = Blueprint.objects.update_or_create(
                    namespace=namespace,
                    handle=handle,
                    defaults={
                        'data': contents,
                        'hidden': bool(hidden),
                        'order': order,
                        **self._timestamps(last_modified),
                    },
                )
                logger.debug(f"{'Created' if created else 'Updated'} blueprint {blueprint}")
                return blueprint
        except Exception as e:
            logger.error(f"Error saving blueprint {namespace}::{handle}: {e}")
            raise

    def save_fieldset(self, handle, contents, last_modified):
        try:
            with transaction.atomic():
                fieldset, created = Fieldset.objects.update_or_create(
                    handle=handle,
                    defaults={'data': contents, **self._timestamps(last_modified)},
                )
                logger.debug(f"{'Created' if created else 'Updated'} fieldset {handle}")
                return fieldset
        except Exception as e:
            logger.error(f"Error saving fieldset {handle}: {e}")
            raise

    def save_navigation(self, record, last_modified):
        try:
            with transaction.atomic():
                navigation, created = Navigation.objects.update_or_create(
                    handle=record.handle,
                    defaults={
                        'title': record.title or '',
                        'data': record.data,
                        **self._timestamps(last_modified),
                    },
                )
                logger.debug(f"{'Created' if created else 'Updated'} navigation {record.handle}")
                return navigation
        except Exception as e:
            logger.error(f"Error saving navigation {record.handle}: {e}")
            raise

    def save_nav_tree(self, record, last_modified):
        """Upsert a tree by (navigation handle, site); the navigation must exist."""
        try:
            with transaction.atomic():
                navigation = Navigation.objects.get(handle=record.handle)
                tree, created = NavTree.objects.update_or_create(
                    navigation=navigation,
                    site=record.site,
                    defaults={
                        'tree': record.tree,
                        'settings': record.settings,
                        **self._timestamps(last_modified),
                    },
                )
                logger.debug(f"{'Created' if created else 'Updated'} tree {record.handle} ({record.site})")
                return tree
        except Exception as e:
            logger.error(f"Error saving tree {record.handle} ({record.site}): {e}")
            raise
