"""HTTP service exposing quotes and simulated execution for payment intents.

The service is stateless and keeps no per-client accounting. Throttling
belongs to whatever sits in front of it.
"""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from intent_solver import __version__
from intent_solver.api.endpoints import router

HOST = os.environ.get("INTENT_SOLVER_HOST", "0.0.0.0")
PORT = int(os.environ.get("INTENT_SOLVER_PORT", "8000"))
DEBUG = os.environ.get("INTENT_SOLVER_DEBUG", "false").lower() in ("true", "1", "yes")

# An intent is a few hundred bytes; 1 MB is far above any legitimate body
MAX_REQUEST_SIZE = 1024 * 1024

app = FastAPI(
    title="Intent Payments Solver",
    description="Simulated solver proposing cross-chain settlement plans for payment intents",
    version=__version__,
)


@app.middleware("http")
async def limit_request_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Answer 413 when the declared body length exceeds MAX_REQUEST_SIZE."""
    content_length = request.headers.get("content-length")
    if content_length and int(content_length) > MAX_REQUEST_SIZE:
        return JSONResponse(status_code=413, content={"detail": "Request too large"})
    return await call_next(request)


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Liveness check."""
    return {"status": "ok"}


def run() -> None:
    """Serve the app with uvicorn.

    Reads INTENT_SOLVER_HOST (default 0.0.0.0), INTENT_SOLVER_PORT (default
    8000) and INTENT_SOLVER_DEBUG, which turns on auto-reload.
    """
    uvicorn.run(
        "intent_solver.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()
