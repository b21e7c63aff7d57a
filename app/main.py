from fastapi import FastAPI
from contextlib import asynccontextmanager
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import logger
from app.api.v1.endpoints import api_router
from app.api.v1.endpoints.testing import router as testing_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Code to run on startup ---
    logger.info("Application startup...")
    if settings.TESTING_ENDPOINTS_ENABLED:
        logger.warning("Testing endpoints are enabled; DELETE /api/v1/testing/all-data wipes the database")

    yield # --- The application is now running ---

    # --- Code to run on shutdown ---
    logger.info("Application shutdown...")

app = FastAPI(title="Blog Platform Backend", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True, # Allows authorization headers.
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(api_router, prefix="/api/v1")
if settings.TESTING_ENDPOINTS_ENABLED:
    app.include_router(testing_router, prefix="/api/v1/testing", tags=["testing"])

@app.get("/")
def read_root():
    return {"message": "Welcome to Blog Platform Backend"}
