# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for Thyroid Panel Ingestion

Receives OCR transcripts from the capture front end and returns the
extracted indicators. Recognition itself happens upstream; this service
only sees text.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from thyroid_ingestion import __version__
from thyroid_ingestion.constants import get_catalog
from thyroid_ingestion.core import extract_indicators
from thyroid_ingestion.extractors import extract_checkup_name
from thyroid_ingestion.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)


app = FastAPI(
    title="Thyroid Panel Ingestion API",
    description="Extract thyroid function indicators from OCR transcripts",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Models
# ============================================================================

class ExtractionRequest(BaseModel):
    text: str = Field(..., description="Newline-joined OCR lines in reading order")
    indicators: Optional[List[str]] = Field(
        default=None,
        description="Restrict extraction to these indicators (panel type)"
    )


class CheckupRequest(BaseModel):
    text: str


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Thyroid Panel Ingestion API"}


@app.get("/api/health")
async def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.get("/api/indicators")
async def list_indicators() -> Dict[str, Any]:
    """Catalog of supported indicators."""
    catalog = get_catalog()
    return {
        "version": catalog.version,
        "standard_order": list(catalog.standard_order),
        "indicators": [
            {
                "name": d.name,
                "display_name": d.display_name,
                "unit": d.unit,
                "normal_range": d.normal_range_string,
                "aliases": list(d.aliases),
            }
            for d in catalog.indicators.values()
        ],
    }


@app.post("/api/extract")
def extract(request: ExtractionRequest) -> Dict[str, Any]:
    """
    Extract indicator values from an OCR transcript.

    An empty `indicators` mapping in the response means nothing plausible
    was found; that is not an error.
    """
    try:
        result = extract_indicators(request.text, request.indicators)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return result.to_dict()


@app.post("/api/checkup-name")
def checkup_name(request: CheckupRequest) -> Dict[str, str]:
    """Name of the examination on a non-panel record."""
    return {"checkup_name": extract_checkup_name(request.text)}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
