# capstone_catalog/frontend/streamlit_app/services/api.py
from __future__ import annotations

from functools import wraps
from typing import Any, Dict, Optional, Tuple

import httpx

FileTuple = Tuple[str, bytes, str]


class ApiError(RuntimeError):
    """Raised when an HTTP/API error occurs, with a human-readable message."""

    def __init__(
            self,
            message: str,
            *,
            code: Optional[str] = None,
            errors: Optional[Dict[str, str]] = None,
            status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.errors = errors or {}
        self.status_code = status_code


def unwrap_error(e: Exception) -> ApiError:
    """Turn an httpx exception into an ApiError carrying the backend's error code."""
    if isinstance(e, httpx.HTTPStatusError):
        # The request reached the server, but the response had an error code
        try:
            data = e.response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            detail = data.get("detail") or e.response.reason_phrase
            return ApiError(
                str(detail),
                code=data.get("code"),
                errors=data.get("errors") or {},
                status_code=e.response.status_code,
            )
        return ApiError(
            f"{e.response.status_code} {e.response.reason_phrase}",
            status_code=e.response.status_code,
        )

    if isinstance(e, httpx.ConnectError):
        return ApiError("Failed to connect to server. Is it running?")

    if isinstance(e, httpx.TimeoutException):
        return ApiError("Request timed out.")

    if isinstance(e, httpx.RequestError):
        # DNS failures, protocol errors, etc.
        return ApiError(f"Request failed: {e.__class__.__name__}: {e}")

    return ApiError(str(e))


def handle_httpx_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ApiError:
            raise
        except httpx.HTTPError as e:
            raise unwrap_error(e) from e

    return wrapper


class Api:
    """
    Thin client for the catalog API.

      GET    /projects            -> {"items": [...], "domains", "passout_years", "total", "recent"}
      POST   /projects            -> project (multipart form + optional file)
      PUT    /projects/{id}       -> {"project": ..., "orphaned_blob": ...}
      DELETE /projects/{id}       -> {"project_id": ..., "orphaned_blob": ...}
    """

    def __init__(self, base_url: str, timeout: float = 60.0, transport: Optional[httpx.BaseTransport] = None):
        # base_url should already include "/api/v1"
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _files(file: Optional[FileTuple]) -> Optional[Dict[str, FileTuple]]:
        if file is None:
            return None
        return {"file": file}

    @handle_httpx_errors
    def list_projects(
            self,
            *,
            search: str = "",
            domain: str = "",
            passout_year: str = "",
    ) -> Dict[str, Any]:
        params = {
            k: v for k, v in
            {"search": search, "domain": domain, "passout_year": passout_year}.items()
            if v
        }
        resp = self._client.get("/projects", params=params)
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def get_project(self, project_id: str) -> Dict[str, Any]:
        resp = self._client.get(f"/projects/{project_id}")
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def create_project(self, form: Dict[str, str], file: Optional[FileTuple] = None) -> Dict[str, Any]:
        resp = self._client.post("/projects", data=form, files=self._files(file))
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def update_project(
            self,
            project_id: str,
            form: Dict[str, str],
            file: Optional[FileTuple] = None,
    ) -> Dict[str, Any]:
        resp = self._client.put(f"/projects/{project_id}", data=form, files=self._files(file))
        resp.raise_for_status()
        return resp.json()

    @handle_httpx_errors
    def delete_project(self, project_id: str) -> Dict[str, Any]:
        resp = self._client.delete(f"/projects/{project_id}")
        resp.raise_for_status()
        return resp.json()
