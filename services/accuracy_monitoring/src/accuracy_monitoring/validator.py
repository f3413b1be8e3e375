from typing import List, Optional, Protocol
import logging

from accuracy_monitoring.db.accuracy import PredictionAccuracyRepository
from accuracy_monitoring.db.database import get_session_maker
from accuracy_monitoring.metrics import (
    PREDICTIONS_VALIDATED_TOTAL,
    VALIDATION_RUNS_TOTAL,
    VALIDATION_TIME,
)
from accuracy_monitoring.scorer import AccuracyValidationError, PredictionScorer, get_scorer
from race_common.models import AccuracyRecord, PydanticPrediction, PydanticRaceResult

logger = logging.getLogger(__name__)

class AccuracyStore(Protocol):
    """Storage operations needed to validate the predictions of a race."""

    async def load_predictions_by_race(self, race_id: str) -> List[PydanticPrediction]:
        ...

    async def load_result_by_race(self, race_id: str) -> Optional[PydanticRaceResult]:
        ...

    async def insert_accuracy_record(self, record: AccuracyRecord) -> None:
        ...

class ValidationRun:
    """Validates every prediction for a race once its result is available.

    Predictions are scored one at a time and each record is persisted before
    the next prediction is scored. The first failure aborts the run.
    """

    def __init__(self, store: AccuracyStore, scorer: Optional[PredictionScorer] = None) -> None:
        self.store = store
        self.scorer = scorer or get_scorer()

    async def run(self, race_id: str) -> int:
        """Score and persist all predictions for a race.

        Args:
            race_id: The ID of the race to validate

        Returns:
            Number of accuracy records persisted, 0 if the race is not ready
        """
        with VALIDATION_TIME.time():
            predictions = await self.store.load_predictions_by_race(race_id)
            if not predictions:
                logger.info(f"No predictions found for race {race_id}")
                VALIDATION_RUNS_TOTAL.labels(status="skipped").inc()
                return 0

            result = await self.store.load_result_by_race(race_id)
            if result is None:
                logger.info(f"No race result found for race {race_id}, skipping validation")
                VALIDATION_RUNS_TOTAL.labels(status="skipped").inc()
                return 0

            try:
                for prediction in predictions:
                    await self._validate_one(race_id, prediction, result)
            except Exception:
                VALIDATION_RUNS_TOTAL.labels(status="failed").inc()
                raise

        VALIDATION_RUNS_TOTAL.labels(status="completed").inc()
        logger.info(f"Successfully validated {len(predictions)} predictions for race {race_id}")
        return len(predictions)

    async def _validate_one(
            self,
            race_id: str,
            prediction: PydanticPrediction,
            result: PydanticRaceResult,
    ) -> None:
        try:
            record = self.scorer.score(prediction, result)
        except AccuracyValidationError as e:
            logger.error(f"Failed to score prediction {prediction.id} for race {race_id}: {str(e)}")
            raise
        except Exception as e:
            logger.error(f"Failed to score prediction {prediction.id} for race {race_id}: {str(e)}")
            raise AccuracyValidationError(
                f"Scoring failed: {str(e)}", race_id=race_id, prediction_id=prediction.id
            ) from e

        try:
            await self.store.insert_accuracy_record(record)
        except Exception as e:
            logger.error(
                f"Failed to persist accuracy record for prediction {prediction.id} in race {race_id}: {str(e)}"
            )
            raise
        PREDICTIONS_VALIDATED_TOTAL.inc()

async def validate_race(race_id: str) -> int:
    """Validate a race using a database-backed store."""
    session_maker = get_session_maker()
    async with session_maker() as session:
        return await ValidationRun(PredictionAccuracyRepository(session)).run(race_id)
