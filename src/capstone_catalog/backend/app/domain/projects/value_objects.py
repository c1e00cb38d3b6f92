# capstone_catalog/backend/app/domain/projects/value_objects.py
from __future__ import annotations

from dataclasses import dataclass, fields

from .errors import ValidationError

PASSOUT_YEARS: tuple[str, ...] = tuple(str(year) for year in range(2000, 2051))

REQUIRED_FIELD_MESSAGES: dict[str, str] = {
    "name": "Project name is required",
    "description": "Description is required",
    "student_name": "Student name is required",
    "department": "Department is required",
    "guide": "Project guide is required",
    "domain": "Domain is required",
    "passout_year": "Pass out year is required",
}


@dataclass(frozen=True)
class ProjectDetails:
    """
    The seven descriptive fields of a capstone project.

    Every field is required and stored trimmed. All violations are collected and raised
    together as a single ValidationError keyed by field name.
    """
    name: str
    description: str
    student_name: str
    department: str
    guide: str
    domain: str
    passout_year: str

    def __post_init__(self) -> None:
        errors: dict[str, str] = {}
        for f in fields(self):
            raw = getattr(self, f.name)
            value = raw.strip() if isinstance(raw, str) else ""
            if not value:
                errors[f.name] = REQUIRED_FIELD_MESSAGES[f.name]
            # normalize stored value
            object.__setattr__(self, f.name, value)

        if "passout_year" not in errors and self.passout_year not in PASSOUT_YEARS:
            errors["passout_year"] = (
                f"Pass out year must be between {PASSOUT_YEARS[0]} and {PASSOUT_YEARS[-1]}"
            )

        if errors:
            raise ValidationError(errors)
