import random
from typing import List, Optional, Sequence

from rome_tour.guides.base import ConstructionError, Guide, Narrator
from rome_tour.guides.catalog import ROME
from rome_tour.guides.local_guide import LocalGuide
from rome_tour.guides.phone_app import PhoneApp
from rome_tour.guides.random_walk import RandomWalk
from rome_tour.schemas.location_schema import CityCollection, Location
from rome_tour.utils.logger import write_log


class Rome:
    """Owns the city's places and hands out a fresh guide for every tour."""

    def __init__(self, places: Optional[Sequence[Location]] = None, name: str = ROME.name,
                 rng: Optional[random.Random] = None, narrator: Narrator = print):
        city = CityCollection(name=name, places=list(ROME.places if places is None else places))
        self.name = city.name
        self._places = tuple(city.places)
        self.rng = rng
        self.narrator = narrator

    # Each factory logs and re-raises; a broken guide is never handed out
    def random_walk(self) -> Guide:
        try:
            return RandomWalk(self._places, rng=self.rng, narrator=self.narrator)
        except ConstructionError as e:
            write_log("tour_errors", f"Error creating RandomWalk guide for {self.name}: {e}")
            raise

    def phone_app(self) -> Guide:
        try:
            return PhoneApp(self._places, narrator=self.narrator)
        except ConstructionError as e:
            write_log("tour_errors", f"Error creating PhoneApp guide for {self.name}: {e}")
            raise

    def local_guide(self) -> Guide:
        try:
            return LocalGuide(self._places, narrator=self.narrator)
        except ConstructionError as e:
            write_log("tour_errors", f"Error creating LocalGuide guide for {self.name}: {e}")
            raise

    def get_all_places(self) -> List[Location]:
        return list(self._places)
