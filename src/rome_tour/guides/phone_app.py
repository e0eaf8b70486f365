from typing import List, Optional, Sequence

from rome_tour.guides.base import Narrator, require_places
from rome_tour.guides.catalog import POPULAR_PRIORITY
from rome_tour.schemas.location_schema import Location


class PhoneApp:
    """Popular places first, in priority order; everything else as listed."""

    def __init__(self, places: Sequence[Location], priority: Sequence[str] = POPULAR_PRIORITY,
                 narrator: Narrator = print):
        self.places = require_places(places, "PhoneApp")
        self.priority = tuple(priority)
        self.visited = 0
        self.narrator = narrator
        self.sorted_places = self._sort_by_popularity()

    def _rank(self, place: Location) -> int:
        try:
            return self.priority.index(place.name)
        except ValueError:
            return len(self.priority)

    def _sort_by_popularity(self) -> List[Location]:
        # sorted() is stable, so unranked places keep their original relative order
        return sorted(self.places, key=self._rank)

    def narrate(self, place: Location) -> str:
        return f"📱 App suggests: {place.name} (popular destination)"

    def next(self) -> Optional[Location]:
        if not self.has_next():
            return None

        place = self.sorted_places[self.visited]
        self.visited += 1
        self.narrator(self.narrate(place))
        return place

    def has_next(self) -> bool:
        return self.visited < len(self.sorted_places)
