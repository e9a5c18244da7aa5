"""Exceptions raised across the cliptails package."""


class CliptailsError(Exception):
    """Base exception for cliptails errors."""

    pass


class HostError(CliptailsError):
    """A host collaborator (clipboard, command dispatch, UI) failed."""

    pass


class ClipboardError(HostError):
    """Reading or writing the system clipboard failed."""

    pass


class CommandError(HostError):
    """A host command could not be dispatched or did not complete."""

    pass


class StateStorageError(CliptailsError):
    """Persisted state could not be read or written."""

    pass
