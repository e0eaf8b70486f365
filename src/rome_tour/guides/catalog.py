from types import MappingProxyType

from rome_tour.schemas.location_schema import CityCollection, Location


# ==========================================
# DEFAULT CITY
# ==========================================
ROME = CityCollection(
    name="Rome",
    places=[
        Location(name="Colosseum", category="ancient"),
        Location(name="Vatican", category="religious"),
        Location(name="Trevi Fountain", category="fountain"),
        Location(name="Pantheon", category="ancient"),
        Location(name="Spanish Steps", category="stairs"),
    ],
)


# ==========================================
# PHONE APP: POPULARITY
# ==========================================
# Most famous first. Anything not listed keeps its original position relative to the others.
POPULAR_PRIORITY = ("Colosseum", "Vatican", "Trevi Fountain")


# ==========================================
# LOCAL GUIDE: SECRETS
# ==========================================
LOCAL_SECRETS = MappingProxyType({
    "Colosseum": "Visit early morning to avoid crowds!",
    "Vatican": "The secret passage connects to Castel Sant'Angelo",
    "Trevi Fountain": "Throw coin with right hand over left shoulder",
    "Pantheon": "The hole in the roof is exactly 9 meters wide",
    "Spanish Steps": "Best gelato shop is hidden nearby",
})

DEFAULT_SECRET = "Amazing place!"
