"""
Progress reporters used by the importers.

Reporters only observe; they never change what gets imported.
"""


class NullProgress:
    """Discards all progress notifications."""

    def phase(self, message):
        pass

    def advance(self, label):
        pass

    def done(self, message):
        pass


class ConsoleProgress:
    """Writes phase banners and per-item lines to a management command's stdout."""

    def __init__(self, stdout, style, verbosity=1):
        self.stdout = stdout
        self.style = style
        self.verbosity = verbosity
        self.count = 0

    def phase(self, message):
        self.stdout.write(self.style.MIGRATE_HEADING(message))

    def advance(self, label):
        self.count += 1
        if self.verbosity >= 2:
            self.stdout.write(f'  [{self.count}] {label}')

    def done(self, message):
        self.stdout.write(self.style.SUCCESS(message))
