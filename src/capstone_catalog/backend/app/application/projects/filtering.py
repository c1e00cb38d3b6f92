from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Sequence

from .dto import ListProjectsInputDTO, ProjectDTO

RECENT_WINDOW = timedelta(days=7)


def matches(project: ProjectDTO, criteria: ListProjectsInputDTO) -> bool:
    term = criteria.search.strip().lower()
    matches_search = (
        term in project.name.lower()
        or term in project.student_name.lower()
        or term in project.description.lower()
    )
    domain = criteria.domain.strip().lower()
    matches_domain = not domain or domain in project.domain.lower()
    year = criteria.passout_year.strip()
    matches_year = not year or project.passout_year == year
    return matches_search and matches_domain and matches_year


def filter_projects(projects: Iterable[ProjectDTO], criteria: ListProjectsInputDTO) -> list[ProjectDTO]:
    return [p for p in projects if matches(p, criteria)]


def distinct_domains(projects: Sequence[ProjectDTO]) -> list[str]:
    # first-appearance order of the (already ordered) list
    return list(dict.fromkeys(p.domain for p in projects))


def distinct_passout_years(projects: Sequence[ProjectDTO]) -> list[str]:
    return sorted({p.passout_year for p in projects})


def count_recent(projects: Sequence[ProjectDTO], now: datetime) -> int:
    since = now - RECENT_WINDOW
    return sum(1 for p in projects if p.created_at >= since)
