from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from concept_booster.api.v1.router import api_router
from concept_booster.core.config import SUPABASE_CLIENT_HEADERS, settings
from concept_booster.core.errors import InvalidRequest, TutorError
from concept_booster.core.rate_limit import RateLimitMiddleware
from concept_booster.core.store import store

logger = logging.getLogger("concept_booster")


@asynccontextmanager
async def lifespan(_: FastAPI):
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    await store.connect()
    yield
    await store.close()


async def catch_unexpected(request: Request, call_next):
    # Sits inside CORSMiddleware so crashes still carry CORS headers.
    try:
        return await call_next(request)
    except Exception:
        logger.exception("%s %s crashed", request.method, request.url.path)
        return JSONResponse(status_code=TutorError.status_code, content={"error": TutorError.default_message})


def validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return InvalidRequest.default_message
    first = errors[0]
    message = str(first.get("msg", "")).removeprefix("Value error, ")
    fields = [str(part) for part in first.get("loc", ()) if part != "body"]
    return f"{'.'.join(fields)}: {message}" if fields else message


app = FastAPI(
    title="Concept Booster API",
    version="1.0.0",
    description="AI doubt answering, topic lessons and quizzes for school students.",
    lifespan=lifespan,
)

app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unexpected)
app.add_middleware(RateLimitMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=SUPABASE_CLIENT_HEADERS,
)


@app.exception_handler(TutorError)
async def tutor_error_handler(request: Request, exc: TutorError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = InvalidRequest(validation_message(exc))
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(api_router, prefix=settings.api_v1_prefix)
