"""FastAPI app: check dependency listings posted as text or uploaded as a file."""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from depcheck import SAMPLE_INPUT, DependencyCheckError, process

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"
DEFAULT_MAX_UPLOAD_BYTES = 1024 * 1024

CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("DEPCHECK_CORS_ORIGINS", DEFAULT_CORS_ORIGINS).split(",")
    if origin.strip()
]
MAX_UPLOAD_BYTES = int(os.environ.get("DEPCHECK_MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES))

app = FastAPI(
    title="depcheck API",
    description="Library dependency analysis backend",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CheckRequest(BaseModel):
    """Body of POST /api/check."""

    text: str


def _check(text: str) -> dict:
    try:
        result = process(text)
    except DependencyCheckError as e:
        logger.info("Rejected document: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return result.to_dict()


@app.get("/api/sample")
def get_sample() -> dict:
    """Return the sample document shown by the front-end."""
    return {"text": SAMPLE_INPUT}


@app.post("/api/check")
def check_text(request: CheckRequest) -> dict:
    """Check pasted text; returns input, output and the expanded dependencies."""
    return _check(request.text)


@app.post("/api/check/file")
async def check_file(file: UploadFile = File(...)) -> dict:
    """Check an uploaded .txt file; same response as POST /api/check."""
    data = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(data) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large (max: {MAX_UPLOAD_BYTES} bytes)",
        )
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text") from e
    return _check(text)
