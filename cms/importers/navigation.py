import logging
from cms.importers.progress import NullProgress

logger = logging.getLogger('cms')


class NavigationImporter:
    """Writes each navigation, then its trees (one per site)."""

    def __init__(self, source, sink, progress=None):
        self.source = source
        self.sink = sink
        self.progress = progress or NullProgress()

    def run(self, navigations=None):
        """Returns the handles of the imported navigations."""
        if navigations is None:
            navigations = self.source.load_navigations()
        logger.info(f"Importing {len(navigations)} navigations")

        imported = []
        for navigation in sorted(navigations, key=lambda nav: nav.handle):
            self.sink.save_navigation(navigation, navigation.last_modified)
            for tree in navigation.trees():
                self.sink.save_nav_tree(tree, tree.last_modified)
                logger.debug(f"Imported tree {tree.handle} ({tree.site})")
            imported.append(navigation.handle)
            self.progress.advance(navigation.handle)

        self.progress.done('Navs imported')
        return imported
