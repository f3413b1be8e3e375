"""Database package for accuracy monitoring service."""

from .database import get_db
from .accuracy import PredictionAccuracyRepository

__all__ = ['get_db', 'PredictionAccuracyRepository']
