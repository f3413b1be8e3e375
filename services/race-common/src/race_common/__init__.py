"""Shared data contracts for race prediction monitoring services."""

# For now, just re-export models
from race_common.models import (
    PydanticPrediction,
    PydanticRaceResult,
    RankedEntry,
    FinishEntry,
    AccuracyRecord,
    BettingOutcome,
    Base,
    Prediction,
    RaceResult,
    PredictionAccuracy,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    'PydanticPrediction',
    'PydanticRaceResult',
    'RankedEntry',
    'FinishEntry',
    'AccuracyRecord',
    'BettingOutcome',
    'Base',
    'Prediction',
    'RaceResult',
    'PredictionAccuracy',
]
