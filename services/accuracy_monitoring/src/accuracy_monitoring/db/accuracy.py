from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import class_mapper
import logging

from race_common.models import (
    AccuracyRecord,
    Prediction,
    PredictionAccuracy,
    PydanticPrediction,
    PydanticRaceResult,
    RaceResult,
)

logger = logging.getLogger(__name__)

def model_to_dict(obj):
    """Convert SQLAlchemy model instance to dictionary."""
    mapper = class_mapper(obj.__class__)
    return {
        column.key: getattr(obj, column.key)
        for column in mapper.columns
        if hasattr(obj, column.key) and getattr(obj, column.key) is not None
    }

class PredictionAccuracyRepository:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def load_predictions_by_race(self, race_id: str) -> List[PydanticPrediction]:
        """Get all predictions made for a race.

        Args:
            race_id: The ID of the race

        Returns:
            List of predictions, empty if none were made
        """
        stmt = select(Prediction).where(Prediction.race_id == race_id)
        result = await self.db.execute(stmt)
        predictions = result.scalars().all()

        return [PydanticPrediction.model_validate(model_to_dict(prediction)) for prediction in predictions]

    async def load_result_by_race(self, race_id: str) -> Optional[PydanticRaceResult]:
        """Get the ground truth result for a race.

        Args:
            race_id: The ID of the race

        Returns:
            The race result if found, None otherwise
        """
        stmt = select(RaceResult).where(RaceResult.race_id == race_id)
        result = await self.db.execute(stmt)
        race_result = result.scalar_one_or_none()

        if race_result is None:
            return None

        return PydanticRaceResult.model_validate(model_to_dict(race_result))

    async def insert_accuracy_record(self, record: AccuracyRecord) -> None:
        """Persist an accuracy record.

        Args:
            record: The accuracy record to insert
        """
        accuracy = PredictionAccuracy(**record.model_dump(mode="json"))
        self.db.add(accuracy)
        await self.db.commit()
        logger.debug(f"Inserted accuracy record {record.id} for prediction {record.prediction_id}")

    async def get_accuracy_records_by_race(self, race_id: str) -> List[AccuracyRecord]:
        """Get all accuracy records for the predictions of a race."""
        stmt = (
            select(PredictionAccuracy)
            .join(Prediction, PredictionAccuracy.prediction_id == Prediction.id)
            .where(Prediction.race_id == race_id)
        )
        result = await self.db.execute(stmt)
        records = result.scalars().all()

        return [AccuracyRecord.model_validate(model_to_dict(record)) for record in records]
