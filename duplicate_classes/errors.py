"""Exceptions raised while looking for duplicate classes."""


class DuplicateClassesError(Exception):
    pass


class ConfigurationError(DuplicateClassesError):
    """The run cannot continue, e.g. an archive path has no valid locator."""


class ManifestError(ConfigurationError):
    def __init__(self, path, lineno, message):
        super().__init__(f'{path}:{lineno}: {message}')
        self.path = path
        self.lineno = lineno


class ExtractionFailure(DuplicateClassesError):
    """An archive could not be listed; the archive is treated as having no classes."""

    def __init__(self, identifier, cause):
        super().__init__(f'{identifier}: {cause}')
        self.identifier = identifier
        self.cause = cause
