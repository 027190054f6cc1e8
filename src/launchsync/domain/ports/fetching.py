"""Ports for fetching the external launch manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from launchsync.domain.reconciliation.contracts import ManifestRow


@runtime_checkable
class ManifestFetcher(Protocol):
    """Callable port returning manifest rows in manifest order."""

    def __call__(self) -> Sequence[ManifestRow]: ...


__all__ = ["ManifestFetcher"]
