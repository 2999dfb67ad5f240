#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from core.analysis import AnalysisProviderError
from storage import StorageUnavailableError

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class NotFoundException(ServiceException):
    """Raised when a requested record does not exist."""
    status_code = 404


class ResumeNotFoundException(NotFoundException):
    pass


class JobDescriptionNotFoundException(NotFoundException):
    pass


class InterviewQuestionsNotFoundException(NotFoundException):
    pass


class ValidationException(ServiceException):
    """Raised when a request parameter is malformed."""
    status_code = 400


def _error_response(status_code: int, error, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": error,
            "type": error_type
        }
    )


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return _error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query parameters and bodies as 400."""
    messages = [
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return _error_response(400, "; ".join(messages) or "Invalid request", "ValidationError")


async def storage_unavailable_handler(
    request: Request,
    exc: StorageUnavailableError
) -> JSONResponse:
    """Backing store failures surface as 503; this layer never retries."""
    logger.error(f"Storage unavailable in {request.url.path}: {exc}")
    return _error_response(503, "Storage unavailable", "StorageUnavailable")


async def analysis_provider_error_handler(
    request: Request,
    exc: AnalysisProviderError
) -> JSONResponse:
    logger.error(f"Analysis provider failed in {request.url.path}: {exc}")
    return _error_response(502, str(exc), "AnalysisProviderError")


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.

    Args:
        request: The FastAPI request.
        exc: The HTTP exception.

    Returns:
        JSONResponse with error details.
    """
    return _error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.

    Args:
        request: The FastAPI request.
        exc: The exception.

    Returns:
        JSONResponse with error details.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return _error_response(500, "Internal server error", "InternalError")


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the app."""
    app.add_exception_handler(ServiceException, service_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(StorageUnavailableError, storage_unavailable_handler)
    app.add_exception_handler(AnalysisProviderError, analysis_provider_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
