from typing import Iterable, Optional, Sequence, Tuple
import logging
import numpy as np

logger = logging.getLogger(__name__)

def has_ties(values: Sequence[float]) -> bool:
    return len(set(values)) != len(values)

def ordinal_ranks(values: Sequence[float]) -> np.ndarray:
    """Rank values 1..n in ascending order, ties keeping their input order."""
    order = np.argsort(np.asarray(values, dtype=float), kind="stable")
    ranks = np.empty(len(values), dtype=float)
    ranks[order] = np.arange(1, len(values) + 1)
    return ranks

def spearman_correlation(
        predicted: Iterable[Tuple[str, int]],
        actual: Iterable[Tuple[str, int]],
) -> Optional[float]:
    """Spearman rank correlation between a predicted ranking and an actual finishing order.

    Only competitors present in both rankings are compared, re-ranked 1..n
    among themselves before applying the tie-free formula
    rho = 1 - 6 * sum(d^2) / (n * (n^2 - 1)). When both rankings cover the
    same competitors this equals the formula on the raw ranks. On a partial
    overlap it does not: a scratched top pick with the rest in predicted order
    gives 1.0 here, where raw rank differences would give a value that can
    fall outside [-1, 1]. Tied values are broken by competitor key, so the
    result is only an approximation when ties exist.

    Args:
        predicted: (competitor, predicted rank) pairs
        actual: (competitor, actual position) pairs

    Returns:
        The coefficient rounded to 4 decimal places, or None if fewer than
        2 competitors appear in both rankings

    Raises:
        ValueError: If a competitor appears more than once in either ranking
    """
    predicted = list(predicted)
    actual = list(actual)
    predicted_ranks = dict(predicted)
    actual_positions = dict(actual)
    if len(predicted_ranks) != len(predicted) or len(actual_positions) != len(actual):
        raise ValueError("Competitor listed more than once in a ranking")

    common = sorted(competitor for competitor in predicted_ranks if competitor in actual_positions)
    if len(common) < 2:
        return None

    ranks = [predicted_ranks[c] for c in common]
    positions = [actual_positions[c] for c in common]
    if has_ties(ranks) or has_ties(positions):
        logger.warning(f"Tied ranks among {len(common)} common competitors, correlation is approximate")

    n = len(common)
    d = ordinal_ranks(ranks) - ordinal_ranks(positions)
    sum_d_squared = float(np.sum(d ** 2))
    correlation = 1 - (6 * sum_d_squared) / (n * (n * n - 1))
    return round(correlation, 4)
