import logging
from typing import Mapping, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from capstone_catalog.backend.app.domain.files.errors import UploadError
from capstone_catalog.backend.app.domain.projects import errors as project_errors

logger = logging.getLogger(__name__)


def error_response(
        status_code: int,
        code: str,
        detail: str,
        errors: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"code": code, "detail": detail, "errors": dict(errors or {})},
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(project_errors.AttachmentTooLarge)
    async def attachment_too_large(_: Request, exc: project_errors.AttachmentTooLarge):
        return error_response(
            413,
            "attachment_too_large",
            str(exc),
            exc.errors,
        )

    @app.exception_handler(project_errors.ValidationError)
    async def validation_error(_: Request, exc: project_errors.ValidationError):
        return error_response(
            422,
            "validation_error",
            str(exc),
            exc.errors,
        )

    @app.exception_handler(UploadError)
    async def upload_error(_: Request, exc: UploadError):
        logger.warning("Upload failed: %s", exc, exc_info=exc.__cause__)
        return error_response(
            status.HTTP_502_BAD_GATEWAY,
            "upload_failed",
            str(exc),
        )

    @app.exception_handler(project_errors.RecordWriteError)
    async def record_write_error(_: Request, exc: project_errors.RecordWriteError):
        logger.error("Record write failed: %s", exc, exc_info=exc.__cause__)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "record_write_failed",
            str(exc),
        )

    @app.exception_handler(project_errors.ProjectNotFound)
    async def project_not_found(_: Request, exc: project_errors.ProjectNotFound):
        return error_response(
            status.HTTP_404_NOT_FOUND,
            "not_found",
            str(exc),
        )

    @app.exception_handler(project_errors.ProjectBusy)
    async def project_busy(_: Request, exc: project_errors.ProjectBusy):
        return error_response(
            status.HTTP_409_CONFLICT,
            "busy",
            str(exc),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_error",
            "Internal server error",
        )
