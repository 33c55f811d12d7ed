"""Error kinds raised by regtag."""

from contextlib import contextmanager
from typing import Iterator, Optional


class RegtagError(Exception):
    """Base class for every error regtag reports to the user.

    ``context`` names the step that failed, e.g. ``listTags failed``.
    """

    context: Optional[str] = None


class ParseError(RegtagError, ValueError):
    """Denotes an image reference that could not be parsed."""

    pass


class ConfigError(RegtagError):
    """Denotes an unreadable or invalid configuration file."""

    pass


class CredentialError(RegtagError):
    """Denotes a failed lookup of stored registry credentials."""

    pass


class TransportError(RegtagError):
    """Denotes a network level failure talking to the registry."""

    pass


class DecodeError(RegtagError, ValueError):
    """Denotes a registry response body that is not the expected JSON."""

    pass


class RegistryError(RegtagError):
    """Denotes a registry response with an unexpected status code."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super(RegistryError, self).__init__(message)
        self.status_code = status_code
        self.body = body


@contextmanager
def error_context(context: str) -> Iterator[None]:
    """Label any RegtagError raised in the block with ``context``.

    The innermost label wins.
    """
    try:
        yield
    except RegtagError as e:
        if e.context is None:
            e.context = context
        raise
