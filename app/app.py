# Main script to run the calendar api, startup scripts, start the different routers

import logging
from contextlib import asynccontextmanager
import config
import db_setup
import database
from fastapi import FastAPI
from routers import events, recurring_events

# Initialize logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Refuse to start with a horizon that can not be parsed
    logger.info(f"Recurrence horizon: {config.get_repeat_horizon()}")
    # Check if the database is set up, if not, create it and the events table
    db_setup.setup_database()
    yield
    database.close_connection()


# Initialize FastAPI app
app = FastAPI(title="Calendar-API", version="1.0.0", lifespan=lifespan)

# Include routers
app.include_router(events.router, prefix="/api", tags=["events"])
app.include_router(recurring_events.router, prefix="/api", tags=["recurring-events"])

# Health check endpoint
@app.get("/health")
async def health():
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
