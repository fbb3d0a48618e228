"""
repositories/errors.py
----------------------
Exceptions raised by the data access layer.
"""


class RepositoryError(RuntimeError):
    """Base class for repository failures. The driver exception, if any, is the __cause__."""


class StatementError(RepositoryError):
    """An INSERT/SELECT could not be executed by the database."""


class DecodeError(RepositoryError):
    """A returned row did not match the expected column shape."""
