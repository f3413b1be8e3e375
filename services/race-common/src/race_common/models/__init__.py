from race_common.models.pydantic import Prediction as PydanticPrediction
from race_common.models.pydantic import RaceResult as PydanticRaceResult
from race_common.models.pydantic import RankedEntry
from race_common.models.pydantic import FinishEntry
from race_common.models.pydantic import AccuracyRecord
from race_common.models.pydantic import BettingOutcome

from race_common.models.sqlalchemy import Base
from race_common.models.sqlalchemy import Prediction
from race_common.models.sqlalchemy import RaceResult
from race_common.models.sqlalchemy import PredictionAccuracy

__all__ = [
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
