import pytest
from unittest.mock import AsyncMock, Mock

from accuracy_monitoring.config import get_settings
from accuracy_monitoring.db.accuracy import PredictionAccuracyRepository
from race_common.models import PydanticPrediction, PydanticRaceResult

@pytest.fixture(autouse=True)
def test_env():
    """Ensure we're using test settings."""
    with pytest.MonkeyPatch().context() as mp:
        mp.setenv("ENV_NAME", "test")
        get_settings.cache_clear()
        yield
    get_settings.cache_clear()

@pytest.fixture
def mock_db():
    """Create a mock async session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.add = Mock()
    return session

@pytest.fixture
def repository(mock_db):
    """Create a PredictionAccuracyRepository instance with a mock db."""
    return PredictionAccuracyRepository(mock_db)

@pytest.fixture
def sample_prediction():
    """Create a prediction ranking A, B, C with a bet on A."""
    return PydanticPrediction(
        id="pred1",
        race_id="race1",
        predicted_rankings=[
            {"competitor": "A", "rank": 1, "score": 0.6},
            {"competitor": "B", "rank": 2, "score": 0.3},
            {"competitor": "C", "rank": 3, "score": 0.1},
        ],
        top_pick="A",
        top_pick_confidence=0.8,
        betting_signal="bet",
    )

@pytest.fixture
def sample_result():
    """Create a race result where A wins at 2.5."""
    return PydanticRaceResult(
        id="result1",
        race_id="race1",
        actual_rankings=[
            {"competitor": "A", "position": 1, "odds": 2.5},
            {"competitor": "B", "position": 2, "odds": 4.0},
            {"competitor": "C", "position": 3, "odds": 10.0},
        ],
        winner="A",
    )

@pytest.fixture
def reversed_result():
    """Create a race result finishing in the reverse of the predicted order."""
    return PydanticRaceResult(
        id="result2",
        race_id="race1",
        actual_rankings=[
            {"competitor": "C", "position": 1, "odds": 10.0},
            {"competitor": "B", "position": 2, "odds": 4.0},
            {"competitor": "A", "position": 3, "odds": 2.5},
        ],
        winner="C",
    )
