"""
File storage layer - reads flat-file content (source of truth for imports).
"""
import os
import uuid
import logging
from django.conf import settings
from cms import utils
from cms.records import (
    EntryRecord, NavigationRecord, SchemaFile, TreeRecord, timestamp_to_datetime,
)

logger = logging.getLogger('cms')


class FileStorage:
    """Enumerates entries, navigations and schema files on disk."""

    def __init__(self, content_root=None, sites=None):
        self.content_root = content_root or settings.CONTENT_ROOT
        self.sites = list(settings.CMS_SITES if sites is None else sites)
        if not self.sites:
            raise ValueError("At least one site must be configured")

    @property
    def default_site(self):
        return self.sites[0]

    @staticmethod
    def get_file_mtime(file_path):
        """Get file modification time."""
        if os.path.exists(file_path):
            return os.path.getmtime(file_path)
        return None

    def last_modified(self, file_path):
        return timestamp_to_datetime(self.get_file_mtime(file_path))

    @staticmethod
    def load_yaml(file_path):
        """Parse a YAML file into a dict."""
        return utils.load_yaml(file_path)

    def list_schema_files(self, directory, extension='yaml'):
        """
        Find every file with the given extension below directory.

        Returns:
            list[SchemaFile]: Sorted by relative path
        """
        if not os.path.isdir(directory):
            logger.info(f"Directory {directory} does not exist, nothing to import")
            return []

        suffix = '.' + extension
        files = []
        for dirpath, dirnames, filenames in os.walk(directory):
            dirnames.sort()
            for filename in sorted(filenames):
                if not filename.endswith(suffix):
                    continue
                path = os.path.join(dirpath, filename)
                relative_path = os.path.relpath(path, directory).replace(os.sep, '/')
                files.append(SchemaFile(path, relative_path, self.last_modified(path)))
        return files

    # Entries

    def load_entries(self):
        """
        Load every entry of every collection.

        Files directly inside a collection directory belong to the default
        site; files inside a directory named after a configured site belong
        to that site.
        """
        collections_dir = os.path.join(self.content_root, 'collections')
        if not os.path.isdir(collections_dir):
            logger.info(f"No collections directory at {collections_dir}")
            return []

        entries = []
        for collection in sorted(os.listdir(collections_dir)):
            collection_dir = utils.safe_join_path(collections_dir, collection)
            if not os.path.isdir(collection_dir):
                continue

            for name in sorted(os.listdir(collection_dir)):
                path = os.path.join(collection_dir, name)
                if os.path.isdir(path):
                    if name not in self.sites:
                        logger.debug(f"Skipping {path}: not a configured site")
                        continue
                    for filename in sorted(os.listdir(path)):
                        if filename.endswith('.md'):
                            entries.append(self.load_entry(os.path.join(path, filename), collection, name))
                elif name.endswith('.md'):
                    entries.append(self.load_entry(path, collection, self.default_site))

        logger.info(f"Loaded {len(entries)} entries from {collections_dir}")
        return entries

    def load_entry(self, file_path, collection, site):
        """Load a single entry file into an EntryRecord."""
        metadata, body = utils.load_front_matter(file_path)
        slug, date, order = utils.split_entry_filename(os.path.basename(file_path))

        entry_id = metadata.pop('id', None)
        if entry_id is None or entry_id == '':
            relative_path = os.path.relpath(file_path, self.content_root).replace(os.sep, '/')
            entry_id = str(uuid.uuid5(uuid.NAMESPACE_URL, relative_path))
            logger.warning(f"Entry {relative_path} has no id, using {entry_id}")

        data = dict(metadata)
        origin = data.pop('origin', None)
        published = data.pop('published', None)
        blueprint = data.pop('blueprint', None)
        if body.strip():
            data['content'] = body.lstrip('\n')

        return EntryRecord(
            id=str(entry_id),
            collection=collection,
            site=site,
            slug=slug,
            origin=origin,
            data=data,
            last_modified=self.last_modified(file_path),
            published=utils.parse_flag(published, True, file_path, 'published'),
            blueprint=blueprint,
            date=date,
            order=order,
            path=file_path,
        )

    # Navigation

    def load_navigations(self):
        """Load every navigation together with its per-site trees."""
        nav_dir = os.path.join(self.content_root, 'navigation')
        if not os.path.isdir(nav_dir):
            logger.info(f"No navigation directory at {nav_dir}")
            return []

        navigations = []
        for filename in sorted(os.listdir(nav_dir)):
            if not filename.endswith('.yaml'):
                continue
            navigations.append(self.load_navigation(os.path.join(nav_dir, filename)))
        return navigations

    def load_navigation(self, file_path):
        handle = os.path.basename(file_path)[:-len('.yaml')]
        data = self.load_yaml(file_path)
        title = data.pop('title', None) or handle
        inline_tree = data.pop('tree', None)

        navigation = NavigationRecord(
            handle=handle,
            title=title,
            data=data,
            last_modified=self.last_modified(file_path),
            path=file_path,
        )

        trees_dir = os.path.join(self.content_root, 'trees', 'navigation')
        for site in self.sites:
            tree_path = os.path.join(trees_dir, site, handle + '.yaml')
            if site == self.default_site and not os.path.exists(tree_path):
                tree_path = os.path.join(trees_dir, handle + '.yaml')

            if os.path.exists(tree_path):
                navigation.add_tree(self.load_tree(tree_path, handle, site))
            elif site == self.default_site and inline_tree is not None:
                # Older single-site layout keeps the tree in the navigation file
                navigation.add_tree(TreeRecord(
                    handle=handle,
                    site=site,
                    tree=inline_tree,
                    last_modified=navigation.last_modified,
                    path=file_path,
                ))

        return navigation

    def load_tree(self, file_path, handle, site):
        data = self.load_yaml(file_path)
        tree = data.pop('tree', None) or []
        return TreeRecord(
            handle=handle,
            site=site,
            tree=tree,
            settings=data,
            last_modified=self.last_modified(file_path),
            path=file_path,
        )
