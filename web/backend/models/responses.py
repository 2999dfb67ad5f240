#!/usr/bin/env python3
"""
Response models for API endpoints.

Entity records from ``storage.entities`` are returned as-is for collection
and single-record routes; the models here cover the other shapes.
"""

from datetime import datetime
from typing import Optional, Dict, Any

from pydantic import ConfigDict

from storage.entities import EntityModel, JobDescription


class HealthResponse(EntityModel):
    """Liveness probe response."""
    status: str = "ok"


class JobDescriptionDetail(EntityModel):
    """
    A job description with its analysis attached.

    ``analysis`` is always present and is null until the job description
    has been analysed.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Senior Python Developer",
                "description": "We are looking for a Python developer with FastAPI experience.",
                "created": "2026-02-01T12:00:00Z",
                "analysis": {
                    "skills": ["Python", "FastAPI"],
                    "biasAnalysis": {
                        "hasBias": False,
                        "biasTypes": [],
                        "explanation": "No bias detected",
                        "suggestedImprovements": []
                    }
                }
            }
        }
    )

    id: int
    title: str
    description: str
    created: datetime
    analysis: Optional[Dict[str, Any]] = None

    @classmethod
    def from_entity(cls, job_description: JobDescription) -> "JobDescriptionDetail":
        return cls(
            id=job_description.id,
            title=job_description.title,
            description=job_description.description,
            created=job_description.created,
            analysis=job_description.analyzed_data,
        )
