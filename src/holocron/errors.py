"""Exceptions raised by Holocron."""


class HolocronError(Exception):
    """Base class for all Holocron errors."""


class StoreConnectionError(HolocronError, ConnectionError):
    """A data store could not be reached during the connect step."""

    def __init__(self, store: str, reason: str = ""):
        self.store = store
        self.reason = reason
        message = f"Cannot connect to {store}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ReconcileError(HolocronError):
    """A reconcile statement failed; recorded in the report, never raised past it."""

    def __init__(self, step: str, cause: BaseException):
        self.step = step
        self.cause = cause
        super().__init__(f"{step} failed: {cause}")


class SchemaError(HolocronError):
    """A natural-key unique index or constraint could not be created.

    Usually the store already holds duplicate keys from an earlier,
    unconstrained load.
    """

    def __init__(self, store: str, name: str, key: str, cause: BaseException):
        self.store = store
        self.name = name
        self.key = key
        self.cause = cause
        super().__init__(
            f"Cannot enforce unique {key!r} on {store} {name}: {cause}. "
            f"Run `holocron sweep` to list duplicate keys."
        )
