from .blueprints import BlueprintImporter, FieldsetImporter
from .entries import EntryImporter
from .navigation import NavigationImporter
from .progress import ConsoleProgress, NullProgress

__all__ = [
    'BlueprintImporter', 'FieldsetImporter', 'EntryImporter',
    'NavigationImporter', 'ConsoleProgress', 'NullProgress',
]
