from __future__ import annotations

from typing import Sequence

import streamlit as st


def hide_sidebar_nav() -> None:
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none;}</style>",
        unsafe_allow_html=True,
    )


def page_header(on_add) -> None:
    cols = st.columns([6, 1])
    with cols[0]:
        st.title("Project Repository")
        st.caption("Manage and explore student capstone projects")
    with cols[1]:
        st.write("")
        if st.button("＋ Add project", use_container_width=True, key="nav_add_project"):
            on_add()


def stats_row(total: int, recent: int) -> None:
    cols = st.columns(2)
    cols[0].metric("Total projects", total)
    cols[1].metric("Added this week", recent)


def _facet_select(label: str, key: str, options: Sequence[str], all_label: str) -> bool:
    # a value that dropped out of the facets (its last project was deleted) falls back to "all"
    choices = [""] + list(options)
    stale = st.session_state.get(key, "") not in choices
    if stale:
        st.session_state[key] = ""
    st.selectbox(label, choices, key=key, format_func=lambda v: v or all_label)
    return stale


def filter_bar(domains: Sequence[str], passout_years: Sequence[str]) -> bool:
    """
    Filter widgets built from the catalog facets. Values live in session_state; the list
    section reads them before it fetches. Returns True when a stale selection was cleared.
    """
    cols = st.columns([3, 2, 1])
    with cols[0]:
        st.text_input(
            "Search",
            key="filter_search",
            placeholder="Search projects, students, or descriptions...",
        )
    with cols[1]:
        stale_domain = _facet_select("Domain", "filter_domain", domains, "All domains")
    with cols[2]:
        stale_year = _facet_select("Year", "filter_year", passout_years, "All years")
    return stale_domain or stale_year
