"""Exception hierarchy for listmark."""


class ListmarkError(Exception):
    """Base exception for all listmark errors."""


class TreeError(ListmarkError):
    """Raised when a document tree violates its structural shape."""


class SerializeError(TreeError):
    """Raised when a tree cannot be rendered back to markdown."""


class ConfigError(ListmarkError):
    """Raised when configuration is invalid or missing."""


class PipelineError(ListmarkError):
    """Raised when a file-level conversion step fails."""


class RunConsistencyError(ListmarkError, AssertionError):
    """Raised when the list builder receives a run of mixed marker kinds.

    Indicates a grouping defect, never a problem with the input text.
    """
