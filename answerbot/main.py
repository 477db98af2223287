# Run from project root: uvicorn answerbot.main:app --reload  (or: python -m answerbot.main)

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from answerbot.api.dependencies import get_pipeline
from answerbot.api.routes import router
from answerbot.core.config import CORS_ORIGINS, HOST, LOG_LEVEL, PORT

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Load the corpus at startup rather than on the first request
    pipeline = get_pipeline()
    logger.info("Answer pipeline ready: %s", " -> ".join(pipeline.stage_names))
    yield


app = FastAPI(title="Answerbot", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.include_router(router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
