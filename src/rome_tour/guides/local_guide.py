from typing import Mapping, Optional, Sequence

from rome_tour.guides.base import Narrator, require_places
from rome_tour.guides.catalog import DEFAULT_SECRET, LOCAL_SECRETS
from rome_tour.schemas.location_schema import Location


class LocalGuide:
    def __init__(self, places: Sequence[Location], secrets: Mapping[str, str] = LOCAL_SECRETS,
                 narrator: Narrator = print):
        self.places = require_places(places, "LocalGuide")
        self.secrets = secrets
        self.visited = 0
        self.narrator = narrator

    def secret_for(self, place: Location) -> str:
        return self.secrets.get(place.name, DEFAULT_SECRET)

    def narrate(self, place: Location) -> str:
        return f"🎭 Guide says: Visit {place.name} - {self.secret_for(place)}"

    def next(self) -> Optional[Location]:
        if not self.has_next():
            return None

        place = self.places[self.visited]
        self.visited += 1
        self.narrator(self.narrate(place))
        return place

    def has_next(self) -> bool:
        return self.visited < len(self.places)
