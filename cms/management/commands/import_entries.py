"""
Management command to import file based entries into the database.
"""
from django.core.management.base import BaseCommand
from cms.importers import ConsoleProgress, EntryImporter
from cms.storage import DatabaseStorage, FileStorage


class Command(BaseCommand):
    help = 'Imports file based entries into the database'

    def handle(self, *args, **options):
        source = FileStorage()
        progress = ConsoleProgress(self.stdout, self.style, options.get('verbosity', 1))

        self.stdout.write(f'Loading entries from {source.content_root}...')
        importer = EntryImporter(source, DatabaseStorage(), progress)
        written = importer.run()

        self.stdout.write(f'{len(written)} entries written')
