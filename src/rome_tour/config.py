import os
from typing import Optional
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field


class TourSettings(BaseModel):
    max_places: int = Field(default=5, ge=1)       # Upper bound of the "how many places" prompt
    compare_limit: int = Field(default=3, ge=1)    # Visits per strategy in compare mode
    seed: Optional[int] = None
    tourist_name: str = Field(default="You", min_length=1)


def load_settings() -> TourSettings:
    """Build settings from the environment, picking up a .env from the working directory first."""
    load_dotenv(find_dotenv(usecwd=True))

    raw = {
        "max_places": os.getenv("ROME_TOUR_MAX_PLACES"),
        "compare_limit": os.getenv("ROME_TOUR_COMPARE_LIMIT"),
        "seed": os.getenv("ROME_TOUR_SEED"),
        "tourist_name": os.getenv("ROME_TOUR_TOURIST"),
    }
    # Unset variables fall back to the model defaults
    return TourSettings(**{k: v for k, v in raw.items() if v not in (None, "")})
