from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from capstone_catalog.frontend.streamlit_app.services.api import Api, ApiError
from capstone_catalog.frontend.streamlit_app.settings import (
    ACCEPTED_FILE_TYPES,
    MAX_ATTACHMENT_BYTES,
    PASSOUT_YEARS,
)

FIELDS = [
    ("name", "Project name"),
    ("description", "Project description"),
    ("student_name", "Name of student"),
    ("department", "Department name"),
    ("guide", "Project guide name"),
    ("domain", "Domain name"),
]


def _show_field_errors(errors: Dict[str, str]) -> None:
    for message in errors.values():
        st.error(message)


def _request_submit() -> None:
    # runs before the rerun, so the submit button is already disabled while the request is sent
    if st.session_state["submitting"]:
        return
    st.session_state["submitting"] = True
    st.session_state["submit_requested"] = True


def render_project_form(api: Api, editing: Optional[Dict[str, Any]], on_done) -> None:
    """
    Create/edit form. While a submission is in flight the submit button stays disabled
    and a second submit is ignored.
    """
    st.session_state.setdefault("submitting", False)
    st.session_state.setdefault("form_uploader_key", 0)
    is_edit = editing is not None
    current = editing or {}

    st.subheader("Edit project" if is_edit else "Add new project")
    with st.form("project_form", clear_on_submit=False):
        values: Dict[str, str] = {}
        for field, label in FIELDS:
            if field == "description":
                values[field] = st.text_area(f"{label} *", value=current.get(field, ""))
            else:
                values[field] = st.text_input(f"{label} *", value=current.get(field, ""))

        year = current.get("passout_year", "")
        options = [""] + PASSOUT_YEARS
        values["passout_year"] = st.selectbox(
            "Year of pass out *",
            options,
            index=options.index(year) if year in options else 0,
            format_func=lambda y: y or "Select pass out year",
        )

        if is_edit and current.get("file"):
            st.caption(f"Current file: {current['file']['name']} (uploading a new file replaces it)")
        upload = st.file_uploader(
            "Project file (optional, up to 10 MB)",
            type=ACCEPTED_FILE_TYPES,
            key=f"project_file_{st.session_state['form_uploader_key']}",
        )

        cols = st.columns(2)
        cols[0].form_submit_button(
            "Update project" if is_edit else "Submit project",
            key="project_form_submit",
            on_click=_request_submit,
            disabled=st.session_state["submitting"],
            use_container_width=True,
        )
        cancelled = cols[1].form_submit_button(
            "Cancel",
            key="project_form_cancel",
            use_container_width=True,
        )

    if cancelled:
        on_done()
        st.rerun()
    if not st.session_state.pop("submit_requested", False):
        return

    try:
        if upload is not None and upload.size > MAX_ATTACHMENT_BYTES:
            st.error(f"File must be at most {MAX_ATTACHMENT_BYTES // (1024 * 1024)} MB")
            return

        file = None
        if upload is not None:
            file = (upload.name, upload.getvalue(), upload.type or "application/octet-stream")

        with st.spinner("Updating..." if is_edit else "Submitting..."):
            if is_edit:
                result = api.update_project(current["id"], values, file)
                orphan = result.get("orphaned_blob")
                if orphan:
                    st.toast(orphan.get("detail", "Previous file could not be removed."))
            else:
                api.create_project(values, file)
    except ApiError as e:
        if e.errors:
            _show_field_errors(e.errors)
        else:
            st.error(f"Failed to submit project. {e}")
        return
    finally:
        # the request has returned (or never started); accept the next submit
        st.session_state["submitting"] = False

    st.session_state["form_uploader_key"] += 1
    st.toast("Project updated" if is_edit else "Project created")
    on_done()
    st.rerun()
