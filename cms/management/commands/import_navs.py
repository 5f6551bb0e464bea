"""
Management command to import file based navigations and their trees into the database.
"""
from django.core.management.base import BaseCommand
from cms.importers import ConsoleProgress, NavigationImporter
from cms.storage import DatabaseStorage, FileStorage


class Command(BaseCommand):
    help = 'Imports file based navs into the database'

    def handle(self, *args, **options):
        source = FileStorage()
        progress = ConsoleProgress(self.stdout, self.style, options.get('verbosity', 1))

        self.stdout.write('Importing navigations...')
        NavigationImporter(source, DatabaseStorage(), progress).run()
