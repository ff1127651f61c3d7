from __future__ import annotations

from typing import Iterable, Mapping, Protocol, Sequence

from .model import School


class SchoolRepository(Protocol):
    def list_all(self) -> Sequence[School]:
        """All schools ordered by name ascending."""

        raise NotImplementedError

    def names_by_ids(self, school_ids: Iterable[str]) -> Mapping[str, str]:
        """Lookup used to enrich attendance rows with a display name."""

        raise NotImplementedError
