# server/api/ats.py

import logging
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from resume_builder.ats import (
    ATSEngine, ConfigurationError, InvalidInputError, KeywordExtractor, get_config
)
from resume_builder.ats.text import decode_resume_bytes
from server.config import settings
from server.schemas import AnalyzeRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def get_engine() -> ATSEngine:
    """Engine for one request"""
    try:
        return ATSEngine(get_config())
    except ConfigurationError as e:
        logger.error(f"Invalid ATS configuration: {e}")
        raise HTTPException(status_code=500, detail=f"Invalid ATS configuration: {e}")


def _check_length(field: str, text: Optional[str]):
    """Apply the upload size limit to pasted text"""
    if text is not None and len(text.encode("utf-8")) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"{field} exceeds {settings.max_upload_bytes} bytes"
        )


def _run_analysis(
    engine: ATSEngine,
    resume_text: str,
    job_description: Optional[str],
    target_role: Optional[str]
) -> Dict:
    try:
        result = engine.analyze(resume_text, job_description, target_role)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return result.to_dict()


@router.post("/analyze")
async def analyze(request: AnalyzeRequest, engine: ATSEngine = Depends(get_engine)) -> Dict:
    """Analyze pasted resume text"""
    _check_length("resumeText", request.resume_text)
    _check_length("jobDescription", request.job_description)

    return _run_analysis(
        engine,
        request.resume_text,
        request.job_description,
        request.target_role
    )


@router.post("/analyze/file")
async def analyze_file(
    resume: UploadFile = File(...),
    job_description: Optional[str] = Form(None),
    target_role: Optional[str] = Form(None),
    engine: ATSEngine = Depends(get_engine)
) -> Dict:
    """Analyze an uploaded plain-text resume"""
    suffix = Path(resume.filename or "").suffix.lower()
    if suffix not in settings.allowed_upload_suffixes:
        raise HTTPException(
            status_code=415,
            detail=f"Unsupported file type '{suffix or resume.filename}'. Upload a .txt file"
        )

    data = await resume.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds {settings.max_upload_bytes} bytes"
        )

    try:
        resume_text = decode_resume_bytes(data)
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    _check_length("job_description", job_description)

    logger.info(f"Analyzing uploaded resume {resume.filename} ({len(data)} bytes)")
    return _run_analysis(engine, resume_text, job_description or None, target_role or None)


@router.get("/roles")
async def list_roles() -> List[str]:
    """Target roles with a dedicated keyword list"""
    return KeywordExtractor.role_names()
