from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from capstone_catalog.frontend.streamlit_app.components.project_card import render_project_card
from capstone_catalog.frontend.streamlit_app.components.project_form import render_project_form
from capstone_catalog.frontend.streamlit_app.services.api import Api, ApiError
from capstone_catalog.frontend.streamlit_app.settings import BASE_URL, LIST_REFRESH_SECONDS
from capstone_catalog.frontend.streamlit_app.ui.layout import filter_bar, hide_sidebar_nav, page_header, stats_row


@st.cache_resource
def get_api() -> Api:
    return Api(base_url=BASE_URL)


def _open_create() -> None:
    st.session_state["form_open"] = True
    st.session_state["editing_project_id"] = None


def _open_edit(project: Dict[str, Any]) -> None:
    st.session_state["form_open"] = True
    # only the id is kept; the form re-reads the record so it never edits a stale copy
    st.session_state["editing_project_id"] = project["id"]
    st.rerun()


def _close_form() -> None:
    st.session_state["form_open"] = False
    st.session_state["editing_project_id"] = None


def _form_section(api: Api) -> None:
    if not st.session_state.get("form_open"):
        return
    editing: Optional[Dict[str, Any]] = None
    project_id = st.session_state.get("editing_project_id")
    if project_id:
        try:
            editing = api.get_project(project_id)
        except ApiError as e:
            st.error(str(e))
            _close_form()
            return
    with st.container(border=True):
        render_project_form(api, editing, on_done=_close_form)


@st.fragment(run_every=LIST_REFRESH_SECONDS)
def _list_section(api: Api) -> None:
    """
    Stats, filters and cards, re-read from the API on every run.

    Streamlit scripts cannot hold the `/projects/feed` WebSocket open between reruns, so
    this fragment polls `GET /projects` every LIST_REFRESH_SECONDS instead. Nothing is
    cached between runs; the API stays the only source of the list.
    """
    try:
        catalog = api.list_projects(
            search=st.session_state.get("filter_search", ""),
            domain=st.session_state.get("filter_domain", ""),
            passout_year=st.session_state.get("filter_year", ""),
        )
    except ApiError as e:
        st.error(str(e))
        return

    stats_row(catalog.get("total", 0), catalog.get("recent", 0))
    if filter_bar(catalog.get("domains", []), catalog.get("passout_years", [])):
        # the fetch above used a filter value that no longer exists
        st.rerun()
    st.divider()

    items = catalog.get("items", [])
    if not items:
        if catalog.get("total", 0):
            st.info("No projects match your filters.")
        else:
            st.info("No projects yet. Get started by adding your first project.")
        return

    cols = st.columns(3)
    for i, project in enumerate(items):
        with cols[i % 3]:
            render_project_card(api, project, on_edit=_open_edit)


def main() -> None:
    st.set_page_config(page_title="Capstone Projects", layout="wide")
    hide_sidebar_nav()
    st.session_state.setdefault("form_open", False)
    st.session_state.setdefault("editing_project_id", None)

    api = get_api()
    page_header(on_add=_open_create)
    _form_section(api)
    _list_section(api)


if __name__ == "__main__":
    main()
