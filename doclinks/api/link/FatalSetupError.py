"""Error raised when a run cannot start."""


class FatalSetupError(RuntimeError):
    """The root cannot be scanned or the context pool cannot be created.

    This is the only error that aborts a run; per-link failures are always
    recorded as outcomes instead.
    """
