"""Failure taxonomy for fragment loading.

None of these are fatal: the loader absorbs them and reports through
diagnostics. An empty fragment body is a valid terminal state, not an error.
"""


class HydratorError(Exception):
    """Base class for fragment loading failures."""

    def __init__(self, fragment_id: str, message: str = ""):
        self.fragment_id = fragment_id
        self.message = message or self.__class__.__name__
        super().__init__(f"{fragment_id}: {self.message}")


class FragmentNotFound(HydratorError):
    """The content source has no such fragment. Retried on the next pass."""


class TransportError(HydratorError):
    """Network or I/O failure while fetching. Retried on the next pass."""


class UnmappedTarget(HydratorError):
    """No page element is registered for the fragment. Never recovers."""
