"""
Exception types for the component core.

Exceptions raised inside caller-supplied init/update/view functions are
never wrapped; these types cover the core's own failure modes only.
"""


class ElmError(Exception):
    """Base class for component core errors."""
    pass


class InvalidConfigError(ElmError):
    """Raised when a component configuration lacks a required callable."""
    pass


class DispatchLoopError(ElmError):
    """Raised when chained dispatches exceed the configured limit."""
    pass


class NotMountedError(ElmError):
    """Raised when dispatching or rendering without a mounted state container."""
    pass
