import pytest

from rome_tour.schemas.location_schema import Location

ENV_VARS = (
    "ROME_TOUR_MAX_PLACES",
    "ROME_TOUR_COMPARE_LIMIT",
    "ROME_TOUR_SEED",
    "ROME_TOUR_TOURIST",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep logs out of the working tree and ignore any developer .env values."""
    monkeypatch.setenv("ROME_TOUR_LOG_DIR", str(tmp_path / "logs"))
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return tmp_path / "logs"


@pytest.fixture
def rome_places():
    return [
        Location(name="Colosseum", category="ancient"),
        Location(name="Vatican", category="religious"),
        Location(name="Trevi Fountain", category="fountain"),
        Location(name="Pantheon", category="ancient"),
        Location(name="Spanish Steps", category="stairs"),
    ]


class ScriptedInput:
    """Feeds canned answers to a prompt; raises EOFError once they run out."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
