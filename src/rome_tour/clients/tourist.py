from typing import Callable, List

from rome_tour.guides.base import Guide
from rome_tour.schemas.location_schema import Location
from rome_tour.utils.logger import write_log


class Tourist:
    def __init__(self, name: str, output: Callable[[str], None] = print):
        if not name or not name.strip():
            raise ValueError("Tourist name cannot be empty")
        self.name = name
        self.output = output

    def visit(self, guide: Guide, max_places: int = 3) -> List[Location]:
        """Follow ``guide`` for at most ``max_places`` stops and return the places seen."""
        if guide is None:
            raise ValueError("Guide cannot be None")
        if max_places <= 0:
            raise ValueError("Maximum places must be positive")

        self.output(f"{self.name} starting tour...")
        seen: List[Location] = []

        while guide.has_next() and len(seen) < max_places:
            place = guide.next()
            # A None here means the guide ran dry between has_next() and next()
            if place is None:
                break
            self.output(f"  ✅ Visited: {place.name} ({place.category})")
            seen.append(place)

        self.output(f"{self.name} tour finished! Saw {len(seen)} places.\n")
        write_log("tour", {
            "tourist": self.name,
            "guide": type(guide).__name__,
            "visited": [place.name for place in seen],
        })
        return seen

    def get_name(self) -> str:
        return self.name
