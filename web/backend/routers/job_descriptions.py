#!/usr/bin/env python3
"""
Job description endpoints - submit and view job descriptions.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from core.analysis import AnalysisProvider
from storage import Storage, JobDescription
from ..dependencies import get_storage, get_analysis_provider
from ..models.requests import JobDescriptionCreate
from ..models.responses import JobDescriptionDetail
from ..services.job_description_service import JobDescriptionService
from ..utils import parse_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/job-descriptions", tags=["job-descriptions"])


@router.get("", response_model=List[JobDescription])
def list_job_descriptions(storage: Storage = Depends(get_storage)):
    """
    Get all job descriptions in submission order.
    """
    return JobDescriptionService(storage).list_job_descriptions()


@router.get("/{job_description_id}", response_model=JobDescriptionDetail)
def get_job_description(
    job_description_id: str,
    storage: Storage = Depends(get_storage)
):
    """
    Get one job description with its analysis.

    The ``analysis`` key is always present and is null until the
    job description has been analysed.
    """
    jd_id = parse_id(job_description_id, "job_description_id")
    return JobDescriptionService(storage).get_job_description_detail(jd_id)


@router.post("", response_model=JobDescriptionDetail, status_code=201)
def create_job_description(
    request: JobDescriptionCreate,
    storage: Storage = Depends(get_storage),
    provider: AnalysisProvider = Depends(get_analysis_provider)
):
    """
    Submit a job description.

    Skills and a bias review are extracted and stored with it.
    """
    return JobDescriptionService(storage, provider).create_job_description(request)
