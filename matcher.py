"""
Role Matcher - scores a résumé against the requirements of one job role.

The score is split in two equal halves:
- Skills: share of the role's programming skills mentioned in the résumé
- Frameworks: share of the role's frameworks mentioned in the résumé

Detection is a case-insensitive substring test, so a short skill such as
"Go" also matches inside "Good". That imprecision is accepted.
"""

import logging

from catalog import ReferenceCatalog
from errors import RoleNotFoundError
from models import MatchResult

logger = logging.getLogger(__name__)


class RoleMatcher:
    """Matches résumé text to the skills and frameworks a job role requires."""

    HALF_WEIGHT = 50.0

    ROLE_NOT_FOUND = "Job role not found in the dataset"
    NOTHING_MISSING = "None"

    PERFECT_MATCH_FEEDBACK = "Great job! You are a perfect match for this role!"
    PARTIAL_MATCH_FEEDBACK = (
        "You have some of the required skills and frameworks. "
        "Consider improving the following areas: "
    )
    LOW_MATCH_FEEDBACK = (
        "You need to improve your skills and frameworks significantly. "
        "Consider learning: "
    )

    def match(self, resume_text: str, job_role: str, catalog: ReferenceCatalog) -> MatchResult:
        """Compare ``resume_text`` with the requirements of ``job_role``."""
        try:
            requirement = catalog.lookup(job_role)
        except RoleNotFoundError:
            logger.info("Job role %r not found in the dataset", job_role)
            return self._role_not_found(job_role)

        normalized_text = (resume_text or "").lower()

        found_skills, missing_skills = self._partition(requirement.required_skills, normalized_text)
        found_frameworks, missing_frameworks = self._partition(requirement.required_frameworks, normalized_text)

        probability = (
            self._half_score(found_skills, requirement.required_skills) +
            self._half_score(found_frameworks, requirement.required_frameworks)
        )

        result = MatchResult(
            job_role=job_role,
            probability=probability,
            found_skills=found_skills,
            missing_skills=missing_skills,
            found_frameworks=found_frameworks,
            missing_frameworks=missing_frameworks,
            additional_skills=self._listing(missing_skills),
            additional_frameworks=self._listing(missing_frameworks),
            feedback=self._feedback(probability, missing_skills + missing_frameworks),
        )

        logger.debug(
            "Matched %r: %.1f%% (skills %d/%d, frameworks %d/%d)",
            job_role,
            probability,
            len(found_skills),
            len(requirement.required_skills),
            len(found_frameworks),
            len(requirement.required_frameworks),
        )
        return result

    def _role_not_found(self, job_role: str) -> MatchResult:
        return MatchResult(
            job_role=job_role,
            probability=0.0,
            additional_skills=self.ROLE_NOT_FOUND,
            additional_frameworks=self.ROLE_NOT_FOUND,
            feedback=self.ROLE_NOT_FOUND,
        )

    def _partition(self, required, normalized_text: str) -> tuple[list[str], list[str]]:
        """Split required items into (found, missing), keeping dataset order and casing."""
        found = []
        missing = []
        for item in required:
            if item.lower() in normalized_text:
                found.append(item)
            else:
                missing.append(item)
        return found, missing

    def _half_score(self, found: list[str], required) -> float:
        """Score one half (0-50). A half with no requirements is fully satisfied."""
        if not required:
            return self.HALF_WEIGHT
        return (len(found) / len(required)) * self.HALF_WEIGHT

    def _listing(self, items: list[str]) -> str:
        return ", ".join(items) or self.NOTHING_MISSING

    def _feedback(self, probability: float, missing: list[str]) -> str:
        if probability == 100:
            return self.PERFECT_MATCH_FEEDBACK
        if probability >= 50:
            return self.PARTIAL_MATCH_FEEDBACK + ", ".join(missing)
        return self.LOW_MATCH_FEEDBACK + ", ".join(missing)
