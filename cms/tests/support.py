import os
import shutil
import tempfile
from datetime import datetime, timezone

from cms.records import EntryRecord


def entry(id, origin=None, **kwargs):
    kwargs.setdefault('collection', 'pages')
    kwargs.setdefault('site', 'default')
    kwargs.setdefault('last_modified', datetime(2024, 1, 1, tzinfo=timezone.utc))
    return EntryRecord(id=id, origin=origin, **kwargs)


class RecordingSink:
    """Sink that remembers the order of writes instead of touching the database."""

    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.writes = []
        self.saved = {}

    def save_entry(self, record, last_modified):
        if record.key == self.fail_on:
            raise RuntimeError(f"cannot write {record.key}")
        self.writes.append((record.key, last_modified))
        self.saved[record.key] = record
        return record

    @property
    def order(self):
        return [key for key, _ in self.writes]


class RecordingProgress:
    def __init__(self):
        self.phases = []
        self.items = []
        self.finished = []

    def phase(self, message):
        self.phases.append(message)

    def advance(self, label):
        self.items.append(label)

    def done(self, message):
        self.finished.append(message)


class ContentTreeMixin:
    """Builds a throwaway content directory for each test."""

    def setUp(self):
        super().setUp()
        self.root = tempfile.mkdtemp(prefix='cms-test-')

    def tearDown(self):
        shutil.rmtree(self.root, ignore_errors=True)
        super().tearDown()

    def path(self, *parts):
        return os.path.join(self.root, *parts)

    def write(self, relative_path, text, mtime=None):
        path = self.path(*relative_path.split('/'))
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path
