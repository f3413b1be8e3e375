import argparse
import logging
from typing import List
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app
from sqlalchemy.ext.asyncio import AsyncSession

from accuracy_monitoring.config import get_settings
from accuracy_monitoring.db.database import get_db
from accuracy_monitoring.db.accuracy import PredictionAccuracyRepository
from accuracy_monitoring.summary import AccuracySummary, summarize_accuracy
from race_common.models import AccuracyRecord

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

async def get_accuracy_repository(db: AsyncSession = Depends(get_db)) -> PredictionAccuracyRepository:
    return PredictionAccuracyRepository(db)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application."""
    # Startup
    logger.info("Starting accuracy monitoring service...")
    yield
    # Shutdown
    logger.info("Shutting down accuracy monitoring service...")

def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(title="Accuracy Monitoring Service", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add Prometheus metrics endpoint
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    @app.get("/races/{race_id}/accuracy", response_model=List[AccuracyRecord])
    async def get_race_accuracy(
        race_id: str,
        repository: PredictionAccuracyRepository = Depends(get_accuracy_repository),
    ) -> List[AccuracyRecord]:
        try:
            return await repository.get_accuracy_records_by_race(race_id)
        except Exception as e:
            logger.error(f"Failed to get accuracy records for race {race_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

    @app.get("/races/{race_id}/accuracy/summary", response_model=AccuracySummary)
    async def get_race_accuracy_summary(
        race_id: str,
        repository: PredictionAccuracyRepository = Depends(get_accuracy_repository),
    ) -> AccuracySummary:
        try:
            records = await repository.get_accuracy_records_by_race(race_id)
        except Exception as e:
            logger.error(f"Failed to get accuracy records for race {race_id}: {str(e)}")
            raise HTTPException(status_code=500, detail="Internal server error") from e

        if not records:
            raise HTTPException(status_code=404, detail="No accuracy records for race")
        return summarize_accuracy(records, stake=settings.BETTING_STAKE)

    return app

# Create the app at module level
app = create_app()

def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="0.0.0.0", help="Host to run the server on")
    parser.add_argument("--port", type=int, default=8000, help="Port to run the server on")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--log-level", type=str, default="info", help="Logging level")

    args = parser.parse_args()

    uvicorn.run(
        "accuracy_monitoring.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
    )

if __name__ == "__main__":
    main()
