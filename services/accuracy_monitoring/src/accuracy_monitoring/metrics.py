from prometheus_client import Counter, Histogram

VALIDATION_RUNS_TOTAL = Counter(
    "accuracy_validation_runs_total", "Total number of race validation runs", ["status"]
)

PREDICTIONS_VALIDATED_TOTAL = Counter(
    "accuracy_predictions_validated_total", "Total number of predictions scored and persisted"
)

MISSING_ODDS_TOTAL = Counter(
    "accuracy_missing_odds_total", "Winning bets scored without odds for the top pick"
)

VALIDATION_TIME = Histogram(
    "accuracy_validation_seconds", "Time spent validating all predictions for a race"
)
