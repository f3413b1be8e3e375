from datetime import datetime
from typing import Optional
from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass

class Prediction(Base):
    """Prediction model for database storage."""
    __tablename__ = "predictions"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    race_id: Mapped[str] = mapped_column(String, index=True)
    predicted_rankings: Mapped[list] = mapped_column(JSON)
    top_pick: Mapped[str] = mapped_column(String)
    top_pick_confidence: Mapped[float] = mapped_column(Float)
    betting_signal: Mapped[Optional[str]] = mapped_column(String, nullable=True)

class RaceResult(Base):
    """Race result model for database storage."""
    __tablename__ = "race_results"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    race_id: Mapped[str] = mapped_column(String, index=True)
    actual_rankings: Mapped[list] = mapped_column(JSON)
    winner: Mapped[str] = mapped_column(String)

class PredictionAccuracy(Base):
    """Prediction accuracy model for database storage."""
    __tablename__ = "prediction_accuracy"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    prediction_id: Mapped[str] = mapped_column(String, ForeignKey("predictions.id"))
    race_result_id: Mapped[str] = mapped_column(String, ForeignKey("race_results.id"))
    top_pick_correct: Mapped[bool] = mapped_column(Boolean)
    top_pick_position: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    top3_accuracy: Mapped[bool] = mapped_column(Boolean)
    rank_correlation: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    confidence_error: Mapped[float] = mapped_column(Float)
    betting_outcome: Mapped[str] = mapped_column(String)
    profit_loss: Mapped[float] = mapped_column(Float)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
