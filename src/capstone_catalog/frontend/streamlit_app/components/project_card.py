from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from capstone_catalog.frontend.streamlit_app.services.api import Api, ApiError


def _format_size(size: int) -> str:
    if not size:
        return "Size unknown"
    return f"{size / 1024 / 1024:.2f} MB"


def render_project_card(api: Api, project: Dict[str, Any], on_edit) -> None:
    pid = project["id"]
    with st.container(border=True):
        head = st.columns([8, 1, 1], gap="small")
        head[0].markdown(f"**{project['name']}**")
        if head[1].button("✎", key=f"edit_{pid}", help="Edit"):
            on_edit(project)

        with head[2].popover("🗑", help="Delete"):
            st.warning("Delete is permanent.")
            confirm = st.checkbox("I understand", key=f"del_confirm_{pid}")
            if st.button("Delete", key=f"delete_{pid}", disabled=not confirm, use_container_width=True):
                try:
                    result = api.delete_project(pid)
                except ApiError as e:
                    st.error(f"Failed to delete project. {e}")
                else:
                    orphan = result.get("orphaned_blob")
                    if orphan:
                        st.toast(orphan.get("detail", "Stored file could not be removed."))
                    st.rerun()

        st.write(project["description"])
        st.caption(
            f"👤 {project['student_name']} · 🏛 {project['department']} · "
            f"🎓 {project['guide']} · 🏷 {project['domain']} · 📅 {project['passout_year']}"
        )

        file = project.get("file")
        if file:
            cols = st.columns([4, 1])
            cols[0].caption(f"📄 {file['name']} ({_format_size(file.get('size', 0))})")
            cols[1].link_button("Download", file["download_url"], use_container_width=True)
