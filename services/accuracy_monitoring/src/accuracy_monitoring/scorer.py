from typing import Optional, Tuple
import logging
import uuid

from accuracy_monitoring.config import get_settings
from accuracy_monitoring.correlation import spearman_correlation
from accuracy_monitoring.metrics import MISSING_ODDS_TOTAL
from race_common.models import (
    AccuracyRecord,
    BettingOutcome,
    PydanticPrediction,
    PydanticRaceResult,
)

logger = logging.getLogger(__name__)

DEFAULT_STAKE = 10.0
AVOID_SIGNAL = "avoid"
DEFAULT_ODDS = 1.0

class AccuracyValidationError(ValueError):
    """Raised when a prediction cannot be scored against its race result."""

    def __init__(self, message: str, race_id: str, prediction_id: Optional[str] = None) -> None:
        self.race_id = race_id
        self.prediction_id = prediction_id
        if prediction_id is not None:
            message = f"{message} (race {race_id}, prediction {prediction_id})"
        else:
            message = f"{message} (race {race_id})"
        super().__init__(message)

class PredictionScorer:
    """Scores a single prediction against the ground truth result of its race.

    Scoring is pure apart from the fresh record id, so one scorer can be
    shared between concurrent validation runs.
    """

    def __init__(self, stake: float = DEFAULT_STAKE, avoid_signal: str = AVOID_SIGNAL) -> None:
        self.stake = stake
        self.avoid_signal = avoid_signal

    def score(self, prediction: PydanticPrediction, result: PydanticRaceResult) -> AccuracyRecord:
        """Compute all accuracy metrics for a prediction.

        Args:
            prediction: The prediction to score
            result: The race result for the same race

        Returns:
            A new AccuracyRecord linking the prediction and the result
        """
        if prediction.race_id != result.race_id:
            raise AccuracyValidationError(
                f"Result {result.id} belongs to race {result.race_id}",
                race_id=prediction.race_id,
                prediction_id=prediction.id,
            )

        actual_positions = {entry.competitor: entry.position for entry in result.actual_rankings}
        actual_odds = {entry.competitor: entry.odds for entry in result.actual_rankings}

        top_pick_correct = prediction.top_pick == result.winner
        top_pick_position = actual_positions.get(prediction.top_pick)

        ordered = sorted(prediction.predicted_rankings, key=lambda entry: entry.rank)
        top3_accuracy = result.winner in [entry.competitor for entry in ordered[:3]]

        rank_correlation = spearman_correlation(
            [(entry.competitor, entry.rank) for entry in prediction.predicted_rankings],
            [(entry.competitor, entry.position) for entry in result.actual_rankings],
        )

        target = 1.0 if top_pick_correct else 0.0
        confidence_error = abs(prediction.top_pick_confidence - target)

        betting_outcome, profit_loss = self._simulate_bet(
            prediction, top_pick_correct, actual_odds.get(prediction.top_pick)
        )

        return AccuracyRecord(
            id=str(uuid.uuid4()),
            prediction_id=prediction.id,
            race_result_id=result.id,
            top_pick_correct=top_pick_correct,
            top_pick_position=top_pick_position,
            top3_accuracy=top3_accuracy,
            rank_correlation=rank_correlation,
            confidence_error=confidence_error,
            betting_outcome=betting_outcome,
            profit_loss=profit_loss,
        )

    def _simulate_bet(
            self,
            prediction: PydanticPrediction,
            top_pick_correct: bool,
            top_pick_odds: Optional[float],
    ) -> Tuple[BettingOutcome, float]:
        if not prediction.betting_signal or prediction.betting_signal == self.avoid_signal:
            return BettingOutcome.NO_BET, 0.0

        if not top_pick_correct:
            return BettingOutcome.LOSS, -self.stake

        if top_pick_odds is None:
            # Settled at decimal odds of 1.0, which nets zero
            logger.warning(
                f"No odds for top pick {prediction.top_pick} in race {prediction.race_id}, "
                f"prediction {prediction.id}; recording zero profit"
            )
            MISSING_ODDS_TOTAL.inc()
            top_pick_odds = DEFAULT_ODDS

        return BettingOutcome.WIN, self.stake * (top_pick_odds - 1)

def get_scorer() -> PredictionScorer:
    settings = get_settings()
    return PredictionScorer(stake=settings.BETTING_STAKE, avoid_signal=settings.AVOID_SIGNAL)

def score_prediction(prediction: PydanticPrediction, result: PydanticRaceResult) -> AccuracyRecord:
    """Score a prediction with the configured stake."""
    return get_scorer().score(prediction, result)
