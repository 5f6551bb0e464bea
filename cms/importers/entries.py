"""
Entry importer.

Localized entries reference the entry they were translated from through
their ``origin``. An entry is only written once its origin has been
written, so the importer works in passes:

1. entries without an origin,
2. entries whose origin was written in the previous pass, repeated until a
   pass selects nothing,
3. whatever is left (missing or cyclic origins), in no particular order.

Each pass only looks at the entries written by the pass right before it,
so a chain root -> fr -> fr-CA takes three passes.
"""
import logging
from cms.importers.progress import NullProgress

logger = logging.getLogger('cms')


class EntryImporter:
    """Writes entries so that origins always come before their localizations."""

    def __init__(self, source, sink, progress=None):
        self.source = source
        self.sink = sink
        self.progress = progress or NullProgress()

    def run(self, entries=None):
        """
        Import every entry exactly once.

        Args:
            entries: Records to import; loaded from the source when omitted

        Returns:
            list: Entry ids in the order they were written
        """
        if entries is None:
            entries = self.source.load_entries()

        batch = self._key_batch(entries)
        written = []

        # A phase banner is only printed when the phase has entries to write
        roots = {key: entry for key, entry in batch.items() if not entry.has_origin()}
        if roots:
            self.progress.phase('Importing origin entries')
            logger.info(f"Importing {len(roots)} origin entries")
        for key, entry in roots.items():
            self._write(entry, written)
            del batch[key]

        processed = roots
        while batch:
            localized = {
                key: entry for key, entry in batch.items()
                if entry.origin_id() in processed
            }
            if not localized:
                break

            self.progress.phase('Importing localized entries')
            logger.info(f"Importing {len(localized)} localized entries")
            for key, entry in localized.items():
                self._write(entry, written)
                del batch[key]

            # Next pass only needs the entries that just became available
            processed = localized

        if batch:
            self.progress.phase('Importing remaining localized entries')
            logger.warning(f"{len(batch)} entries have an origin that could not be resolved")
            for entry in list(batch.values()):
                logger.warning(f"Entry {entry.key} imported without its origin {entry.origin_id()}")
                self._write(entry, written)
            batch.clear()

        self.progress.done('Entries imported')
        return written

    def _key_batch(self, entries):
        batch = {}
        for entry in entries:
            if entry.key in batch:
                logger.warning(f"Duplicate entry id {entry.key}: {entry.path} replaces {batch[entry.key].path}")
            batch[entry.key] = entry
        return batch

    def _write(self, entry, written):
        self.sink.save_entry(entry, entry.last_modified)
        written.append(entry.key)
        self.progress.advance(entry.key)
