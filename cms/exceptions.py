class ContentFileError(Exception):
    """A content file could not be read or parsed."""

    def __init__(self, path, message):
        self.path = path
        super().__init__(f"{path}: {message}")
