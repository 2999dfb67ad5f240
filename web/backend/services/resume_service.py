#!/usr/bin/env python3
"""
Resume service - business logic for resume operations.
"""

import logging
from typing import List, Optional

from core.analysis import AnalysisProvider
from storage import Storage, Resume, InsertResume
from ..exceptions import ResumeNotFoundException
from ..models.requests import ResumeCreate
from ..utils import utf8_size

logger = logging.getLogger(__name__)


class ResumeService:
    """Service for managing resumes."""

    def __init__(self, storage: Storage, provider: Optional[AnalysisProvider] = None):
        self.storage = storage
        self.provider = provider

    def list_resumes(self, session_id: Optional[str] = None) -> List[Resume]:
        """
        List resumes, optionally restricted to one client session.

        Args:
            session_id: Exact session tag to filter on.

        Returns:
            Resumes in upload order.
        """
        return self.storage.get_resumes(session_id)

    def get_resume(self, resume_id: int) -> Resume:
        """
        Raises:
            ResumeNotFoundException: If the resume does not exist.
        """
        resume = self.storage.get_resume(resume_id)
        if resume is None:
            raise ResumeNotFoundException(f"Resume {resume_id} not found")
        return resume

    def create_resume(self, request: ResumeCreate) -> Resume:
        """
        Store a resume and attach its analysis.

        The resume is stored first so that a failing analysis provider
        still leaves the upload recorded (with analyzedData null).
        """
        resume = self.storage.create_resume(InsertResume(
            filename=request.filename,
            file_size=utf8_size(request.content),
            file_type=request.file_type,
            content=request.content,
            session_id=request.session_id,
        ))

        if self.provider is None:
            return resume

        analysis = self.provider.analyze_resume(resume.content)
        updated = self.storage.update_resume_analysis(resume.id, analysis)
        logger.info(f"Analysed resume {resume.id}: {len(analysis.get('skills', []))} skills")
        return updated or resume
