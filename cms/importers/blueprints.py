"""
Blueprint and fieldset importers.

Schema files are independent of each other, so they are written in path
order with no dependency handling.
"""
import logging
from cms import utils
from cms.importers.progress import NullProgress

logger = logging.getLogger('cms')


def stamp_section_order(contents):
    """
    Record each section's position in a ``__count`` key.

    JSON objects in the database do not keep their key order, so the
    position is stored alongside each section. A blank section (``main:``
    with nothing under it) becomes a mapping holding only its position.
    """
    sections = contents.get('sections')
    if isinstance(sections, dict):
        stamped = {}
        for count, (name, section) in enumerate(sections.items()):
            if section is None:
                section = {}
            if isinstance(section, dict):
                section = {**section, '__count': count}
            stamped[name] = section
        contents['sections'] = stamped
    elif isinstance(sections, list):
        contents['sections'] = [
            {**(section or {}), '__count': count}
            if section is None or isinstance(section, dict) else section
            for count, section in enumerate(sections)
        ]
    return contents


class BlueprintImporter:
    def __init__(self, directory, source, sink, progress=None, extension='yaml'):
        self.directory = directory
        self.source = source
        self.sink = sink
        self.progress = progress or NullProgress()
        self.extension = extension

    def run(self):
        """Import every blueprint file; returns the (namespace, handle) pairs written."""
        files = self.source.list_schema_files(self.directory, self.extension)
        logger.info(f"Importing {len(files)} blueprints from {self.directory}")

        imported = []
        for schema_file in files:
            namespace, handle = utils.namespace_and_handle(schema_file.relative_path, self.extension)
            contents = stamp_section_order(self.source.load_yaml(schema_file.path))
            hidden = utils.parse_flag(contents.pop('hide', None), False, schema_file.path, 'hide')
            order = contents.pop('order', None)

            self.sink.save_blueprint(
                namespace, handle, contents, schema_file.last_modified,
                hidden=hidden, order=order,
            )
            imported.append((namespace, handle))
            self.progress.advance(f"{namespace}::{handle}" if namespace else handle)

        self.progress.done('Blueprints imported')
        return imported


class FieldsetImporter:
    def __init__(self, directory, source, sink, progress=None, extension='yaml'):
        self.directory = directory
        self.source = source
        self.sink = sink
        self.progress = progress or NullProgress()
        self.extension = extension

    def run(self):
        """Import every fieldset file; returns the handles written."""
        files = self.source.list_schema_files(self.directory, self.extension)
        logger.info(f"Importing {len(files)} fieldsets from {self.directory}")

        imported = []
        for schema_file in files:
            handle = utils.path_to_handle(schema_file.relative_path, self.extension)
            contents = self.source.load_yaml(schema_file.path)
            self.sink.save_fieldset(handle, contents, schema_file.last_modified)
            imported.append(handle)
            self.progress.advance(handle)

        self.progress.done('Fieldsets imported')
        return imported
