class UpdaterError(Exception):
    """Base class for errors raised while bumping a plugin version."""


class NotFound(UpdaterError, LookupError):
    pass


class MissingField(NotFound):
    """A required header line is absent from its source."""

    def __init__(self, field: str, source: str):
        self.field = field
        self.source = source
        super().__init__(f"{field} not found in {source}")


class VersionFormatError(UpdaterError, ValueError):
    pass


class NetworkFailure(UpdaterError):
    """Fetching or decoding a remote version failed. Recovered by asking the user."""

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {cause}")
