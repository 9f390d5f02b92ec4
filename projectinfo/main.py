# /projectinfo/main.py
# This is the main entry point for the Project Info application. It sets up the FastAPI app, including configuration, routes, services, and error handling.
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .settings import settings
from .utils.errors import AppError
from .utils.log import setup_logging
from .api.routes import router
from .services.github_client import GitHubClient
from .services.projectinfo_service import ProjectInfoService

logger = logging.getLogger(__name__)


@asynccontextmanager # For FastAPI lifespan event, to open the GitHub HTTP client and close it on shutdown.
async def lifespan(app: FastAPI):
    github = GitHubClient()
    app.state.svc = ProjectInfoService(github=github)

    yield

    await github.aclose()


# no docs routes: every path other than the project route answers 400
app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)
app.include_router(router)


@app.exception_handler(AppError)
async def app_error_handler(_: Request, exc: AppError):
    return PlainTextResponse(exc.message + "\n", status_code=exc.status_code)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("unhandled error serving %s", request.url.path)
    return PlainTextResponse("Internal server error\n", status_code=500)


def run() -> None:
    setup_logging(settings.log_level)
    logger.info("listening on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
