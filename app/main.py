import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.dependencies.game import close_game_session, get_game_session
from app.routers import game

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s", settings.APP_TITLE)
    logger.debug("Debug mode: %s", settings.DEBUG)

    get_game_session()
    logger.info("Game session initialized")

    yield

    logger.info("Shutting down %s", settings.APP_TITLE)
    close_game_session()


app = FastAPI(
    title=settings.APP_TITLE,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
logger.debug("CORS configured with origins: %s", settings.CORS_ORIGINS)

app.include_router(game.router, prefix="/api/v1")
logger.debug("Routers registered: /api/v1/game")


@app.get("/")
def root():
    return {"message": settings.APP_TITLE}


@app.get("/health")
def health():
    return {"status": "healthy"}
