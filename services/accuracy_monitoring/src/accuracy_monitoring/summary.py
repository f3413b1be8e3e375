from typing import Iterable, Optional
import numpy as np
from pydantic import BaseModel

from accuracy_monitoring.scorer import DEFAULT_STAKE
from race_common.models import AccuracyRecord, BettingOutcome

class AccuracySummary(BaseModel):
    """Aggregate accuracy over a set of validated predictions."""
    total_predictions: int = 0
    top_pick_hit_rate: float = 0.0
    top3_hit_rate: float = 0.0
    mean_rank_correlation: Optional[float] = None
    mean_confidence_error: float = 0.0
    bets_placed: int = 0
    bets_won: int = 0
    total_profit_loss: float = 0.0
    roi: Optional[float] = None

def summarize_accuracy(records: Iterable[AccuracyRecord], stake: float = DEFAULT_STAKE) -> AccuracySummary:
    """Summarize accuracy records.

    Rank correlation is averaged over records that have one. ROI is total
    profit over total amount staked and is None when no bets were placed.
    """
    records = list(records)
    if not records:
        return AccuracySummary()

    correlations = [r.rank_correlation for r in records if r.rank_correlation is not None]
    bets = [r for r in records if r.betting_outcome != BettingOutcome.NO_BET]
    total_profit_loss = float(sum(r.profit_loss for r in bets))

    return AccuracySummary(
        total_predictions=len(records),
        top_pick_hit_rate=float(np.mean([r.top_pick_correct for r in records])),
        top3_hit_rate=float(np.mean([r.top3_accuracy for r in records])),
        mean_rank_correlation=round(float(np.mean(correlations)), 4) if correlations else None,
        mean_confidence_error=float(np.mean([r.confidence_error for r in records])),
        bets_placed=len(bets),
        bets_won=sum(1 for r in bets if r.betting_outcome == BettingOutcome.WIN),
        total_profit_loss=total_profit_loss,
        roi=total_profit_loss / (stake * len(bets)) if bets else None,
    )
