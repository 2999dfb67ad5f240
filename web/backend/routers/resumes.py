#!/usr/bin/env python3
"""
Resume endpoints - submit and view resumes.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.analysis import AnalysisProvider
from storage import Storage, Resume
from ..dependencies import get_storage, get_analysis_provider
from ..models.requests import ResumeCreate
from ..services.resume_service import ResumeService
from ..utils import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/resumes", tags=["resumes"])


@router.get("", response_model=List[Resume])
def list_resumes(
    session_id: Optional[str] = Query(default=None, alias="sessionId", description="Only resumes from this session"),
    storage: Storage = Depends(get_storage)
):
    """
    Get resumes in upload order, optionally filtered by session.
    """
    # An empty sessionId means no filter
    return ResumeService(storage).list_resumes(session_id or None)


@router.get("/{resume_id}", response_model=Resume)
def get_resume(
    resume_id: str,
    storage: Storage = Depends(get_storage)
):
    """Get a single resume."""
    return ResumeService(storage).get_resume(parse_id(resume_id, "resume_id"))


@router.post("", response_model=Resume, status_code=201)
def create_resume(
    request: ResumeCreate,
    storage: Storage = Depends(get_storage),
    provider: AnalysisProvider = Depends(get_analysis_provider)
):
    """
    Submit a resume as extracted text.

    The file size is recorded as the UTF-8 size of the content; skills,
    experience and education are extracted and stored with it.
    """
    return ResumeService(storage, provider).create_resume(request)
