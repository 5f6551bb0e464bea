"""
In-memory records read from flat files, before they are written to the database.
"""
from datetime import datetime, timezone


def resolve_origin_id(origin):
    """
    Normalize an entry origin to an identity string.

    An origin is either absent (None or empty), a raw id (str or int), or an
    already-resolved reference exposing an ``id`` attribute (another record,
    a model instance).

    Returns:
        str or None: The origin identity, or None when the entry has no origin
    """
    if origin is None:
        return None
    if isinstance(origin, (str, int)) and not isinstance(origin, bool):
        origin = str(origin).strip()
        return origin or None
    origin_id = getattr(origin, 'id', None)
    if origin_id is None or origin_id == '':
        return None
    return str(origin_id)


def timestamp_to_datetime(mtime):
    """Convert a file modification time to an aware UTC datetime."""
    if mtime is None:
        return None
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


class EntryRecord:
    """An entry loaded from a collection file."""

    def __init__(self, id, collection, site, slug='', origin=None, data=None,
                 last_modified=None, published=True, blueprint=None, date=None,
                 order=None, path=None):
        self.id = id
        self.collection = collection
        self.site = site
        self.slug = slug
        self.origin = origin
        self.data = data or {}
        self.last_modified = last_modified
        self.published = published
        self.blueprint = blueprint
        self.date = date
        self.order = order
        self.path = path

    def __repr__(self):
        return f"<EntryRecord {self.id} ({self.collection}/{self.site})>"

    @property
    def key(self):
        return str(self.id)

    def has_origin(self):
        return resolve_origin_id(self.origin) is not None

    def origin_id(self):
        return resolve_origin_id(self.origin)

    def to_model_data(self):
        """Column values for the Entry row (everything except the id)."""
        return {
            'site': self.site,
            'collection': self.collection,
            'slug': self.slug or '',
            'blueprint': self.blueprint,
            'origin_id': self.origin_id(),
            'published': self.published,
            'date': self.date,
            'order': self.order,
            'data': self.data,
        }


class TreeRecord:
    """A navigation tree for one site."""

    def __init__(self, handle, site, tree=None, settings=None, last_modified=None, path=None):
        self.handle = handle
        self.site = site
        self.tree = tree or []
        self.settings = settings or {}
        self.last_modified = last_modified
        self.path = path

    def __repr__(self):
        return f"<TreeRecord {self.handle} ({self.site})>"


class NavigationRecord:
    """A navigation definition and the trees that belong to it."""

    def __init__(self, handle, title='', data=None, last_modified=None, path=None, trees=None):
        self.handle = handle
        self.title = title
        self.data = data or {}
        self.last_modified = last_modified
        self.path = path
        self._trees = list(trees or [])

    def __repr__(self):
        return f"<NavigationRecord {self.handle}>"

    def trees(self):
        return list(self._trees)

    def add_tree(self, tree):
        self._trees.append(tree)


class SchemaFile:
    """A YAML schema file (blueprint or fieldset) found under a root directory."""

    def __init__(self, path, relative_path, last_modified):
        self.path = path
        self.relative_path = relative_path
        self.last_modified = last_modified

    def __repr__(self):
        return f"<SchemaFile {self.relative_path}>"
