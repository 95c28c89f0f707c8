# -*- coding: utf-8 -*-
"""
NeuroSynth API routes

- POST /api/generate: synthesize, enrich and export one batch
- GET  /api/conditions, /api/guide, /api/guide/{condition}
- POST /api/insights, /api/assessment
- GET  /api/health
"""

from fastapi import APIRouter, Body, HTTPException
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, Any, Optional, List
import datetime

from .core.insights import AssessmentAnswers, score_self_assessment, summarize_batch, summarize_run
from .knowledge.catalog import CONDITIONS, DEFAULT_CONDITION, resolve_condition
from .knowledge.disease_guide import get_guide, list_guides
from .main import get_engine
from .models.record import PatientRecord
from .utils.error_handler import GENERIC_ERROR_MESSAGE, sanitize_error_message
from .utils.logger import get_logger

router = APIRouter(prefix="/api", tags=["NeuroSynth"])
logger = get_logger("API")

# ==================== Request models ====================

def _string_or_none(v: Any) -> Optional[str]:
    # Non-string conditions fall through to the default condition
    return v if isinstance(v, str) else None


class GenerateRequest(BaseModel):
    """
    Batch generation request

    Both fields are loose on purpose: unknown conditions and odd counts are
    normalized by the exporter instead of being rejected.
    """
    model_config = ConfigDict(extra="ignore")

    disease_type: Optional[str] = Field(default=None, description="Condition name")
    num_records: Optional[Any] = Field(default=None, description="Number of records (default 10)")

    @field_validator("disease_type", mode="before")
    @classmethod
    def validate_disease_type(cls, v):
        return _string_or_none(v)


class InsightsRequest(BaseModel):
    disease_type: Optional[str] = None
    records: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("disease_type", mode="before")
    @classmethod
    def validate_disease_type(cls, v):
        return _string_or_none(v)


class AssessmentAnswersModel(BaseModel):
    age: int = Field(default=50, ge=0, le=130)
    memory_issues: bool = False
    seizures: bool = False
    speech_trouble: bool = False
    low_mood: bool = False
    anxious: bool = False


class AssessmentRequest(BaseModel):
    disease_type: Optional[str] = None
    answers: AssessmentAnswersModel = Field(default_factory=AssessmentAnswersModel)

    @field_validator("disease_type", mode="before")
    @classmethod
    def validate_disease_type(cls, v):
        return _string_or_none(v)


def _internal_error(message: str) -> HTTPException:
    return HTTPException(
        status_code=500,
        detail={
            "message": message,
            "error": GENERIC_ERROR_MESSAGE
        }
    )


# ==================== Endpoints ====================

@router.post("/generate", response_model=Dict[str, Any])
async def generate(
    body: Optional[GenerateRequest] = Body(default=None)
):
    """
    Generate one batch of synthetic records

    Returns:
        {disease_type, records, csv_base64, filename}

    Raises:
        HTTPException:
            - 405: non-POST method (handled by the router)
            - 422: body is not a JSON object
            - 500: internal error
    """
    body = body or GenerateRequest()
    start_time = datetime.datetime.now()

    logger.info(f"📥 Generate request: disease_type={body.disease_type!r}, num_records={body.num_records!r}")

    try:
        batch = await get_engine().export(body.disease_type, body.num_records)

        processing_time = (datetime.datetime.now() - start_time).total_seconds()
        logger.info(f"✅ Generated {len(batch.records)} records for {batch.condition} in {processing_time:.2f}s")

        return batch.to_dict()

    except Exception as e:
        logger.error(f"❌ Generate failed: {e}", exc_info=True)
        raise _internal_error("Failed to generate records")


@router.get("/conditions", response_model=Dict[str, Any])
async def conditions():
    return {"conditions": list(CONDITIONS), "default": DEFAULT_CONDITION}


@router.get("/guide", response_model=Dict[str, Any])
async def guide_index():
    return {"guides": list_guides()}


@router.get("/guide/{condition}", response_model=Dict[str, Any])
async def guide(condition: str):
    """Guide entry; unknown conditions resolve to the default condition"""
    return get_guide(condition)


@router.post("/insights", response_model=Dict[str, Any])
async def insights(body: InsightsRequest = Body(...)):
    """
    Distributions, risk scores and a run summary for a batch of records
    """
    try:
        records = [PatientRecord.from_dict(r) for r in body.records]
    except (TypeError, ValueError) as e:
        logger.warning(f"⚠️ Invalid records in insights request: {e}")
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Invalid record payload",
                "error": sanitize_error_message(e)
            }
        )

    condition = resolve_condition(body.disease_type or (records[0].diagnosis if records else None))
    return {
        **summarize_batch(records),
        "run": summarize_run(condition, records).to_dict(),
    }


@router.post("/assessment", response_model=Dict[str, Any])
async def assessment(body: AssessmentRequest = Body(...)):
    """Score the self-assessment quiz for the selected condition"""
    answers = AssessmentAnswers(**body.answers.model_dump())
    result = score_self_assessment(body.disease_type, answers)
    return result.to_dict()


@router.get("/health", response_model=Dict[str, Any])
async def health_check():
    try:
        engine = get_engine()
        return {
            "status": "healthy",
            "timestamp": datetime.datetime.now().isoformat(),
            **engine.health()
        }
    except Exception as e:
        logger.error(f"❌ Health check failed: {e}", exc_info=True)
        return {
            "status": "unhealthy",
            "timestamp": datetime.datetime.now().isoformat(),
            "error": sanitize_error_message(e)
        }
