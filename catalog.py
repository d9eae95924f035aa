"""
Reference catalog of job roles and the skills/frameworks each one requires.

The dataset is maintained by hand in a spreadsheet with the columns
``JOB ROLES``, ``PROGRAMMING SKILLS`` and ``FRAMEWORKS``; the last two hold
comma-separated lists.
"""

import logging
import os
from typing import Optional

import pandas as pd

from errors import CatalogError, RoleNotFoundError
from models import RoleRequirement

logger = logging.getLogger(__name__)

ROLE_COLUMN = "JOB ROLES"
SKILLS_COLUMN = "PROGRAMMING SKILLS"
FRAMEWORKS_COLUMN = "FRAMEWORKS"
REQUIRED_COLUMNS = (ROLE_COLUMN, SKILLS_COLUMN, FRAMEWORKS_COLUMN)


def split_items(cell) -> tuple[str, ...]:
    """Split a comma-delimited cell into trimmed, non-empty items."""
    if cell is None or pd.isna(cell):
        return ()
    return tuple(item.strip() for item in str(cell).split(',') if item.strip())


class ReferenceCatalog:
    """Job role requirements keyed by exact (case-sensitive) role name."""

    def __init__(self, requirements: list[RoleRequirement]):
        self._requirements: dict[str, RoleRequirement] = {}
        for requirement in requirements:
            # First row wins when a role is listed twice
            self._requirements.setdefault(requirement.job_role, requirement)

    @classmethod
    def from_file(cls, path: str) -> 'ReferenceCatalog':
        """Load the catalog from an .xlsx (first sheet) or .csv file."""
        if not os.path.exists(path):
            raise CatalogError(f"Reference dataset not found: {path}")

        try:
            if path.lower().endswith('.csv'):
                frame = pd.read_csv(path, dtype=str, keep_default_na=False)
            else:
                frame = pd.read_excel(path, sheet_name=0, dtype=str, keep_default_na=False)
        except Exception as e:
            raise CatalogError(f"Could not read reference dataset {path}: {e}") from e

        return cls.from_frame(frame, source=path)

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, source: str = "<frame>") -> 'ReferenceCatalog':
        frame = frame.rename(columns=lambda column: str(column).strip())

        missing = [column for column in REQUIRED_COLUMNS if column not in frame.columns]
        if missing:
            raise CatalogError(f"Reference dataset {source} is missing columns: {', '.join(missing)}")

        requirements = []
        for row in frame.to_dict(orient='records'):
            job_role = row.get(ROLE_COLUMN)
            if job_role is None or pd.isna(job_role) or not str(job_role):
                continue
            requirements.append(RoleRequirement(
                job_role=str(job_role),
                required_skills=split_items(row.get(SKILLS_COLUMN)),
                required_frameworks=split_items(row.get(FRAMEWORKS_COLUMN)),
            ))

        logger.debug("Loaded %d job roles from %s", len(requirements), source)
        return cls(requirements)

    @property
    def roles(self) -> list[str]:
        return list(self._requirements)

    def lookup(self, job_role: Optional[str]) -> RoleRequirement:
        """Return the requirements for ``job_role`` or raise RoleNotFoundError."""
        try:
            return self._requirements[job_role]
        except KeyError:
            raise RoleNotFoundError(job_role) from None

    def __contains__(self, job_role) -> bool:
        return job_role in self._requirements

    def __len__(self) -> int:
        return len(self._requirements)
