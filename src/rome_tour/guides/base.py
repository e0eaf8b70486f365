from typing import Callable, Optional, Protocol, Sequence

from rome_tour.schemas.location_schema import Location

Narrator = Callable[[str], None]


class ConstructionError(ValueError):
    """Raised when a guide is built over an empty or missing place list."""


class Guide(Protocol):
    def has_next(self) -> bool: ...

    def next(self) -> Optional[Location]: ...


def require_places(places: Optional[Sequence[Location]], guide_name: str) -> Sequence[Location]:
    if not places:
        raise ConstructionError(f"{guide_name}: places cannot be empty")
    return places
