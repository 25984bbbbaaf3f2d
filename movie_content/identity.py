"""
Viewer identity as seen by the content page.

Session management lives elsewhere; the page only reads the current viewer,
which may not be resolved yet (or ever, for anonymous visitors).
"""

import asyncio
from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True, slots=True)
class Viewer:
    user_id: str
    primary_email: Optional[str] = None

    @property
    def handle(self) -> Optional[str]:
        """Identifier matched against review authors (the primary email)."""
        return self.primary_email


class IdentityProvider(Protocol):
    def current_viewer(self) -> Optional[Viewer]:
        """Return the resolved viewer, or None while unresolved/anonymous. Never blocks."""
        ...


class StaticIdentityProvider:
    """Identity provider with a fixed viewer (None for anonymous)."""

    def __init__(self, viewer: Optional[Viewer] = None) -> None:
        self._viewer = viewer

    def current_viewer(self) -> Optional[Viewer]:
        return self._viewer


class DeferredIdentityProvider:
    """
    Identity provider whose viewer is resolved later by the session layer.

    Readers get None until resolve() is called; wait_resolved() lets async
    callers suspend until then.
    """

    def __init__(self) -> None:
        self._viewer: Optional[Viewer] = None
        self._resolved = asyncio.Event()

    def current_viewer(self) -> Optional[Viewer]:
        return self._viewer

    def resolve(self, viewer: Optional[Viewer]) -> None:
        """Publish the viewer (None for anonymous) and wake any waiters."""
        self._viewer = viewer
        self._resolved.set()

    @property
    def is_resolved(self) -> bool:
        return self._resolved.is_set()

    async def wait_resolved(self, timeout: Optional[float] = None) -> Optional[Viewer]:
        """Wait until resolve() is called, then return the viewer. Raises TimeoutError on timeout."""
        await asyncio.wait_for(self._resolved.wait(), timeout)
        return self._viewer
