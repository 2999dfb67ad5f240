"""API route handlers."""

from .health import router as health_router
from .job_descriptions import router as job_descriptions_router
from .resumes import router as resumes_router
from .analysis import router as analysis_router
