# ============================================================================
# api/main.py
# ============================================================================
"""
FastAPI Backend for the Lab Report Analyzer

Runs on port 8000. Accepts OCR text (the OCR step happens upstream) and
returns classified parameters and insights. Reports are not stored here;
the caller persists what it receives.
"""

import sys
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lab_analyzer import PARAMETER_DICTIONARY, analyze_report
from lab_analyzer.config import logging_settings
from lab_analyzer.utils.logging import setup_logging
from lab_analyzer.validators import RangeClassifier

setup_logging(
    level=logging_settings.LOG_LEVEL,
    log_file=logging_settings.LOG_FILE,
    format_json=logging_settings.LOG_FORMAT_JSON,
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="Lab Report Analyzer API",
    description="Extract and classify health parameters from lab report OCR text",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

classifier = RangeClassifier()


# ============================================================================
# Models
# ============================================================================

class AnalyzeRequest(BaseModel):
    text: str
    filename: str = "report.txt"
    seed: Optional[int] = Field(default=None, ge=0, le=999)


class ClassifyRequest(BaseModel):
    value: float = Field(gt=0)
    range_spec: str


class ClassifyResponse(BaseModel):
    status: str
    range_valid: bool


class ParameterInfo(BaseModel):
    name: str
    unit: str
    normal_range: str
    category: str
    aliases: List[str]


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "Lab Report Analyzer API"}


@app.get("/api/health")
def health():
    """Health check for monitoring."""
    return {"status": "healthy"}


@app.get("/api/parameters", response_model=List[ParameterInfo])
def list_parameters():
    """Known parameters, in matching order."""
    return [
        ParameterInfo(
            name=definition.display_name,
            unit=definition.unit,
            normal_range=definition.range_spec,
            category=definition.category,
            aliases=list(definition.aliases),
        )
        for definition in PARAMETER_DICTIONARY
    ]


@app.post("/api/analyze")
def analyze(request: AnalyzeRequest) -> Dict[str, Any]:
    """
    Extract, classify and summarize one report's OCR text.

    Always returns parameters; check "source" to see whether they were read
    from the text ("dictionary", "generic") or are demo data ("synthetic").
    """
    report = analyze_report(request.text, request.filename, seed=request.seed)
    return report.to_dict()


@app.post("/api/classify", response_model=ClassifyResponse)
def classify(request: ClassifyRequest):
    """Classify a single value against a range such as '<200' or '0.6-1.2'."""
    result = classifier.classify(request.value, request.range_spec)
    return ClassifyResponse(status=result.status.value, range_valid=result.range_valid)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
