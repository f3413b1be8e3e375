import pytest
from pydantic import ValidationError

from race_common.models import AccuracyRecord, BettingOutcome, PydanticPrediction, PydanticRaceResult

def prediction_data(**overrides):
    data = {
        "id": "pred1",
        "race_id": "race1",
        "predicted_rankings": [
            {"competitor": "A", "rank": 1, "score": 0.6},
            {"competitor": "B", "rank": 2, "score": 0.4},
        ],
        "top_pick": "A",
        "top_pick_confidence": 0.6,
        "betting_signal": "bet",
    }
    data.update(overrides)
    return data

def result_data(**overrides):
    data = {
        "id": "result1",
        "race_id": "race1",
        "actual_rankings": [
            {"competitor": "A", "position": 1, "odds": 2.0},
            {"competitor": "B", "position": 2, "odds": 3.5},
        ],
        "winner": "A",
    }
    data.update(overrides)
    return data

def test_valid_prediction():
    prediction = PydanticPrediction.model_validate(prediction_data())
    assert prediction.predicted_rankings[0].competitor == "A"

def test_prediction_without_signal():
    data = prediction_data()
    del data["betting_signal"]
    assert PydanticPrediction.model_validate(data).betting_signal is None

@pytest.mark.parametrize("confidence", [-0.1, 1.5])
def test_prediction_confidence_out_of_range(confidence):
    with pytest.raises(ValidationError):
        PydanticPrediction.model_validate(prediction_data(top_pick_confidence=confidence))

def test_prediction_top_pick_not_ranked():
    with pytest.raises(ValidationError, match="top pick Z"):
        PydanticPrediction.model_validate(prediction_data(top_pick="Z"))

def test_prediction_duplicate_ranks():
    rankings = [
        {"competitor": "A", "rank": 1, "score": 0.6},
        {"competitor": "B", "rank": 1, "score": 0.4},
    ]
    with pytest.raises(ValidationError, match="duplicate ranks"):
        PydanticPrediction.model_validate(prediction_data(predicted_rankings=rankings))

def test_valid_result():
    result = PydanticRaceResult.model_validate(result_data())
    assert result.actual_rankings[1].odds == 3.5

def test_result_non_positive_odds():
    rankings = [
        {"competitor": "A", "position": 1, "odds": 0.0},
        {"competitor": "B", "position": 2, "odds": 3.5},
    ]
    with pytest.raises(ValidationError):
        PydanticRaceResult.model_validate(result_data(actual_rankings=rankings))

def test_result_winner_not_first():
    with pytest.raises(ValidationError, match="winner B"):
        PydanticRaceResult.model_validate(result_data(winner="B"))

def test_result_duplicate_positions():
    rankings = [
        {"competitor": "A", "position": 1, "odds": 2.0},
        {"competitor": "B", "position": 1, "odds": 3.5},
    ]
    with pytest.raises(ValidationError, match="duplicate positions"):
        PydanticRaceResult.model_validate(result_data(actual_rankings=rankings))

def test_accuracy_record_rejects_negative_error():
    with pytest.raises(ValidationError):
        AccuracyRecord(
            id="acc1",
            prediction_id="pred1",
            race_result_id="result1",
            top_pick_correct=True,
            top_pick_position=1,
            top3_accuracy=True,
            confidence_error=-0.1,
            betting_outcome=BettingOutcome.WIN,
            profit_loss=5.0,
        )

def test_prediction_duplicate_competitors():
    """Test a competitor ranked twice is rejected."""
    rankings = [
        {"competitor": "A", "rank": 1, "score": 0.5},
        {"competitor": "B", "rank": 2, "score": 0.3},
        {"competitor": "A", "rank": 3, "score": 0.2},
    ]
    with pytest.raises(ValidationError, match="same competitor more than once"):
        PydanticPrediction.model_validate(prediction_data(predicted_rankings=rankings))

def test_result_duplicate_competitors():
    """Test a competitor finishing twice is rejected."""
    rankings = [
        {"competitor": "A", "position": 1, "odds": 2.0},
        {"competitor": "B", "position": 2, "odds": 3.5},
        {"competitor": "A", "position": 3, "odds": 2.0},
    ]
    with pytest.raises(ValidationError, match="same competitor more than once"):
        PydanticRaceResult.model_validate(result_data(actual_rankings=rankings))

def test_result_without_first_place():
    """Test a result with no position 1 cannot name a winner."""
    rankings = [
        {"competitor": "B", "position": 2, "odds": 3.5},
        {"competitor": "C", "position": 3, "odds": 6.0},
    ]
    with pytest.raises(ValidationError, match="winner A"):
        PydanticRaceResult.model_validate(result_data(actual_rankings=rankings))

def test_result_without_rankings():
    with pytest.raises(ValidationError, match="does not finish in position 1"):
        PydanticRaceResult.model_validate(result_data(actual_rankings=[]))
