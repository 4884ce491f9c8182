import json

from fastapi import APIRouter, Body, File, Form, HTTPException, Request, UploadFile
from pydantic import ValidationError
from slowapi import Limiter
from slowapi.util import get_remote_address

from resume_screener.config import settings
from resume_screener.exceptions import ScreeningError
from resume_screener.models.requests import BatchScreenRequest, ScreenRequest
from resume_screener.models.responses import (
    BatchScreeningResult,
    DetailedScreeningReport,
    ScreeningResult,
)
from resume_screener.models.schemas.job_requirements import JobRequirements
from resume_screener.models.schemas.resume_input import RawResumeInput
from resume_screener.services import pdf_parser
from resume_screener.services.pipeline import orchestrator

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_resume_length(resume) -> None:
    if isinstance(resume, RawResumeInput) and len(resume.text) > settings.max_resume_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Resume text too long (max {settings.max_resume_chars} chars)",
        )


@router.get("/health")
async def health():
    return {**orchestrator.agent_status(), "status": "ok"}


@router.post("/screen", response_model=ScreeningResult)
@limiter.limit(settings.rate_limit)
async def screen(request: Request, body: ScreenRequest):
    _check_resume_length(body.resume)
    return await orchestrator.screen_resume(body.resume, body.requirements)


@router.post("/screen/batch", response_model=BatchScreeningResult)
@limiter.limit(settings.rate_limit)
async def screen_batch(request: Request, body: BatchScreenRequest):
    _check_resume_length(body.resume)
    return await orchestrator.screen_against_jobs(body.resume, body.jobs)


@router.post("/screen/report", response_model=DetailedScreeningReport)
@limiter.limit(settings.rate_limit)
async def screen_report(request: Request, body: ScreenRequest):
    _check_resume_length(body.resume)
    try:
        return await orchestrator.generate_detailed_report(body.resume, body.requirements)
    except ScreeningError as exc:
        raise HTTPException(status_code=500, detail=exc.to_dict())


@router.post("/screen/upload", response_model=ScreeningResult)
@limiter.limit(settings.rate_limit)
async def screen_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    requirements: str | None = Form(None),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    job_requirements = None
    if requirements:
        try:
            job_requirements = JobRequirements.model_validate(json.loads(requirements))
        except (json.JSONDecodeError, ValidationError):
            raise HTTPException(status_code=400, detail="Invalid job requirements JSON")

    # Extract text from PDF
    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception:
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    return await orchestrator.screen_resume(RawResumeInput(text=resume_text), job_requirements)


@router.post("/requirements/validate")
async def validate_requirements(data: dict = Body(...)):
    errors = orchestrator.validate_job_requirements(data)
    return {"valid": not errors, "errors": errors}
