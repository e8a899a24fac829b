from contextlib import asynccontextmanager

from fastapi import FastAPI

from api.router import router
from core.logging_config import setup_logging
from db.session import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    init_db()
    yield


app = FastAPI(
    title="Popup Tree Select",
    description="HTML popup tree selector widget",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Service is running. See /demo and /trees/{root_id}/widget.",
    }
