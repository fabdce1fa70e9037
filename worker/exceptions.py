"""Custom exception classes for the file system worker."""


class WorkerException(Exception):
    """
    Base exception class for all worker errors.
    """
    pass


class MissingParameterError(WorkerException):
    """
    Raised when a required job parameter is absent.
    """
    pass


class PathNotFoundError(WorkerException):
    """
    Raised when a source path is neither a file nor a directory.
    """
    pass


class FileSystemOperationError(WorkerException):
    """
    Raised when an underlying filesystem operation (copy, delete, mkdir, read) fails.
    """
    pass


class UnknownActionError(WorkerException):
    """
    Raised when the action selector does not match any known action.
    """
    pass


class RequirementsNotMetError(WorkerException):
    """
    Raised when a path listed in the job requirements does not exist.
    """
    pass


class InvalidMessageError(WorkerException):
    """
    Raised when an incoming job message cannot be parsed.
    """
    pass
