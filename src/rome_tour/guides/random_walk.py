import random
from typing import List, Optional, Sequence

from rome_tour.guides.base import Narrator, require_places
from rome_tour.schemas.location_schema import Location


class RandomWalk:
    """Visits every place once, in an order shuffled when the walk starts."""

    def __init__(self, places: Sequence[Location], rng: Optional[random.Random] = None,
                 narrator: Narrator = print):
        self.places = require_places(places, "RandomWalk")
        self.visited = 0
        self.narrator = narrator
        self.order = self._shuffle_order(rng or random.Random())

    def _shuffle_order(self, rng: random.Random) -> List[int]:
        # Fisher-Yates over indices; the shared place list itself is never touched
        order = list(range(len(self.places)))
        for i in range(len(order) - 1, 0, -1):
            j = rng.randint(0, i)
            order[i], order[j] = order[j], order[i]
        return order

    def narrate(self, place: Location) -> str:
        return f"🚶 Randomly found: {place.name}"

    def next(self) -> Optional[Location]:
        if not self.has_next():
            return None

        place = self.places[self.order[self.visited]]
        self.visited += 1
        self.narrator(self.narrate(place))
        return place

    def has_next(self) -> bool:
        return self.visited < len(self.places)
