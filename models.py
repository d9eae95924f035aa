"""
Core data models for résumé-to-role matching.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RoleRequirement:
    """Skills and frameworks a job role asks for, in dataset order."""
    job_role: str
    required_skills: tuple[str, ...] = ()
    required_frameworks: tuple[str, ...] = ()


@dataclass
class MatchResult:
    """Outcome of matching one résumé against one job role."""
    job_role: str
    probability: float = 0.0  # 0-100
    found_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    found_frameworks: list[str] = field(default_factory=list)
    missing_frameworks: list[str] = field(default_factory=list)
    additional_skills: str = "None"
    additional_frameworks: str = "None"
    feedback: str = ""

    def to_response(self) -> dict:
        return {
            "jobRole": self.job_role,
            "probability": self.probability,
            "additionalSkills": self.additional_skills,
            "additionalFrameworks": self.additional_frameworks,
            "feedback": self.feedback,
        }


@dataclass(frozen=True)
class SubmissionRecord:
    """One logged résumé submission."""
    first_name: str
    email: str
    phone: str
    signup_date: str
    signup_time: str
    job_role: str
    probability_score: float
    resume_file_name: str

    @classmethod
    def stamped(
        cls,
        form: dict,
        result: MatchResult,
        resume_file_name: str,
        now: Optional[datetime] = None,
    ) -> 'SubmissionRecord':
        """Build a record for a finished match, stamped with the submission time."""
        now = now or datetime.now()
        return cls(
            first_name=form.get("firstName") or "",
            email=form.get("email") or "",
            phone=form.get("phone") or "",
            signup_date=now.strftime("%m/%d/%Y"),
            signup_time=now.strftime("%H:%M:%S"),
            job_role=form.get("jobRole") or "",
            probability_score=result.probability,
            resume_file_name=resume_file_name,
        )
