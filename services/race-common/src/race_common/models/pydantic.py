from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

class BettingOutcome(str, Enum):
    WIN = "win"
    LOSS = "loss"
    NO_BET = "no_bet"

class RankedEntry(BaseModel):
    """A single competitor in a predicted ranking."""
    competitor: str
    rank: int = Field(ge=1)
    score: float

class FinishEntry(BaseModel):
    """A single competitor in an actual finishing order."""
    competitor: str
    position: int = Field(ge=1)
    odds: float = Field(gt=0)

class Prediction(BaseModel):
    """Prediction model for request/response data."""
    id: str
    race_id: str
    predicted_rankings: List[RankedEntry]
    top_pick: str
    top_pick_confidence: float = Field(ge=0.0, le=1.0)
    betting_signal: Optional[str] = None

    @model_validator(mode="after")
    def check_rankings(self) -> "Prediction":
        ranks = [entry.rank for entry in self.predicted_rankings]
        if len(set(ranks)) != len(ranks):
            raise ValueError(f"Prediction {self.id} has duplicate ranks")
        competitors = [entry.competitor for entry in self.predicted_rankings]
        if len(set(competitors)) != len(competitors):
            raise ValueError(f"Prediction {self.id} ranks the same competitor more than once")
        if self.top_pick not in {entry.competitor for entry in self.predicted_rankings}:
            raise ValueError(
                f"Prediction {self.id} top pick {self.top_pick} is not in its predicted rankings"
            )
        return self

class RaceResult(BaseModel):
    """Race result (ground truth) model for request/response data."""
    id: str
    race_id: str
    actual_rankings: List[FinishEntry]
    winner: str

    @model_validator(mode="after")
    def check_rankings(self) -> "RaceResult":
        positions = [entry.position for entry in self.actual_rankings]
        if len(set(positions)) != len(positions):
            raise ValueError(f"Race result {self.id} has duplicate positions")
        competitors = [entry.competitor for entry in self.actual_rankings]
        if len(set(competitors)) != len(competitors):
            raise ValueError(f"Race result {self.id} lists the same competitor more than once")
        first = next((entry for entry in self.actual_rankings if entry.position == 1), None)
        if first is None or first.competitor != self.winner:
            raise ValueError(
                f"Race result {self.id} winner {self.winner} does not finish in position 1"
            )
        return self

class AccuracyRecord(BaseModel):
    """Accuracy metrics for one prediction scored against its race result."""
    model_config = ConfigDict(frozen=True)

    id: str
    prediction_id: str
    race_result_id: str
    top_pick_correct: bool
    top_pick_position: Optional[int] = None
    top3_accuracy: bool
    rank_correlation: Optional[float] = Field(default=None, ge=-1.0, le=1.0)
    confidence_error: float = Field(ge=0.0)
    betting_outcome: BettingOutcome
    profit_loss: float
