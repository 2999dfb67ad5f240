#!/usr/bin/env python3
"""
Request models for API endpoints.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional


class CamelModel(BaseModel):
    """Accepts camelCase JSON keys as well as snake_case."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class JobDescriptionCreate(CamelModel):
    """Request to submit a job description."""
    title: str = Field(..., min_length=1, description="Job title")
    description: str = Field(..., min_length=1, description="Full job description text")


class ResumeCreate(CamelModel):
    """Request to submit a resume as extracted text."""
    filename: str = Field(..., min_length=1, description="Original file name")
    file_type: str = Field(..., min_length=1, description="MIME type of the original file")
    content: str = Field(..., min_length=1, description="Extracted resume text")
    session_id: Optional[str] = Field(None, description="Client session tag")
