class SparseConfigError(ValueError):
    """Base class for sparse container configuration errors."""
    pass

class SparseRuntimeError(RuntimeError):
    """Base class for sparse container runtime errors."""
    pass



class InvalidPruneModeError(SparseConfigError):
    """Raised when an invalid row pruning mode is provided."""

    def __init__(self, mode: str, valid_modes: list):
        self.mode = mode
        self.valid_modes = valid_modes
        message = f"Invalid prune mode '{mode}'. Must be one of: {valid_modes}"
        super().__init__(message)


class UnsupportedDefaultError(SparseConfigError):
    """Raised when the default value cannot serve as the "unoccupied" marker."""

    def __init__(self, default, reason: str = None):
        self.default = default
        self.reason = reason
        if reason is None:
            message = f"Unsupported default value {default!r}. "
        else:
            message = f"Unsupported default value {default!r}: {reason}"
        super().__init__(message)


class InvalidIndexError(TypeError):
    """Raised when an index is not an integer or a matrix key has the wrong shape."""

    def __init__(self, key, context: str = ""):
        self.key = key
        self.context = context
        message = f"Sparse indices must be integers, got {key!r}{f' ({context})' if context else ''}"
        super().__init__(message)


class PastTheEndError(SparseRuntimeError, IndexError):
    """Raised when a matrix iterator positioned past the end is dereferenced."""

    def __init__(self, context: str = ""):
        self.context = context
        message = f"Cannot dereference a past-the-end matrix iterator{f' in {context}' if context else ''}"
        super().__init__(message)
