"""FastAPI server exposing the tree hash of uploaded text files."""

from __future__ import annotations

import io
from typing import Optional

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .calculator import tree_hash_report
from .errors import DecodingError, HashAlgorithmUnavailable

app = FastAPI(
    title="Tree Hash API",
    description="Upload a text file and get its line-wise SHA-256 tree hash.",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/tree-hash")
async def upload_tree_hash(
    file: UploadFile = File(...),
    algorithm: Optional[str] = Query(None),
    encoding: Optional[str] = Query(None),
    include_leaves: bool = Query(False),
):
    data = await file.read()
    try:
        return tree_hash_report(
            io.BytesIO(data),
            algorithm=algorithm,
            encoding=encoding,
            include_leaves=include_leaves,
            source_name=file.filename,
        )
    except HashAlgorithmUnavailable as exc:
        raise HTTPException(status_code=400, detail=exc.to_dict()) from exc
    except DecodingError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
