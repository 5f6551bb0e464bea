"""
Management command to import file based blueprints and fieldsets into the database.
"""
from django.conf import settings
from django.core.management.base import BaseCommand
from cms.importers import BlueprintImporter, ConsoleProgress, FieldsetImporter
from cms.storage import DatabaseStorage, FileStorage


class Command(BaseCommand):
    help = 'Imports file based blueprints and fieldsets into the database'

    def handle(self, *args, **options):
        source = FileStorage()
        sink = DatabaseStorage()
        verbosity = options.get('verbosity', 1)

        self.stdout.write(f'Importing blueprints from {settings.BLUEPRINTS_ROOT}...')
        BlueprintImporter(
            settings.BLUEPRINTS_ROOT, source, sink,
            ConsoleProgress(self.stdout, self.style, verbosity),
        ).run()

        self.stdout.write(f'Importing fieldsets from {settings.FIELDSETS_ROOT}...')
        FieldsetImporter(
            settings.FIELDSETS_ROOT, source, sink,
            ConsoleProgress(self.stdout, self.style, verbosity),
        ).run()
