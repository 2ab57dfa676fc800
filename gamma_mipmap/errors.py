"""Exceptions raised while building a mipmap chain."""


class MipmapError(Exception):
    """Base class for mipmap generation failures."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class DecodeError(MipmapError):
    """The base image could not be read as an RGBA image."""


class PersistenceError(MipmapError):
    """A generated level could not be written."""
