from pathlib import Path

import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from backend.api.routes import router as api_router
from backend.config import settings
from backend.logging_config import configure_logging

logger = logging.getLogger(__name__)

configure_logging()

app = FastAPI(title="Veo Director", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)

frontend_path = Path(settings.frontend_dir)
frontend_path.mkdir(parents=True, exist_ok=True)

app.mount("/static", StaticFiles(directory=str(frontend_path)), name="static")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/", include_in_schema=False)
async def serve_index():
    index_file = frontend_path / "index.html"
    return FileResponse(index_file)


def run() -> None:
    import uvicorn

    uvicorn.run(app, host=settings.app_host, port=settings.app_port, log_config=None)
