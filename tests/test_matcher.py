import pytest

from catalog import ReferenceCatalog
from matcher import RoleMatcher
from models import RoleRequirement


@pytest.fixture
def matcher():
    return RoleMatcher()


def test_backend_developer_partial_match(matcher, catalog):
    result = matcher.match("I know Python and Django", "Backend Developer", catalog)

    assert result.found_skills == ["Python"]
    assert result.missing_skills == ["Java"]
    assert result.found_frameworks == ["Django"]
    assert result.missing_frameworks == ["Spring"]
    assert result.probability == 50
    assert result.additional_skills == "Java"
    assert result.additional_frameworks == "Spring"
    assert result.feedback == (
        "You have some of the required skills and frameworks. "
        "Consider improving the following areas: Java, Spring"
    )


def test_perfect_match(matcher, catalog):
    text = "Backend engineer: Python, Java, Django and Spring Boot."
    result = matcher.match(text, "Backend Developer", catalog)

    assert result.probability == 100
    assert result.feedback == "Great job! You are a perfect match for this role!"
    assert result.additional_skills == "None"
    assert result.additional_frameworks == "None"
    assert result.missing_skills == []
    assert result.missing_frameworks == []


def test_low_match_lists_everything_missing(matcher, catalog):
    result = matcher.match("Ten years of COBOL", "Backend Developer", catalog)

    assert result.probability == 0
    assert result.found_skills == []
    assert result.feedback == (
        "You need to improve your skills and frameworks significantly. "
        "Consider learning: Python, Java, Django, Spring"
    )


def test_matching_is_case_insensitive_and_keeps_dataset_casing(matcher, catalog):
    result = matcher.match("PYTHON JAVA django spring", "Backend Developer", catalog)

    assert result.found_skills == ["Python", "Java"]
    assert result.found_frameworks == ["Django", "Spring"]
    assert result.probability == 100


def test_weighted_halves(matcher, catalog):
    # 1 of 3 skills, 2 of 2 frameworks
    result = matcher.match("sql, pandas and tensorflow", "Data Scientist", catalog)

    assert result.found_skills == ["SQL"]
    assert result.missing_skills == ["Python", "Scala"]
    assert result.probability == pytest.approx(50 * (1 / 3) + 50 * (2 / 2))
    assert result.additional_skills == "Python, Scala"
    assert result.additional_frameworks == "None"
    assert result.feedback.endswith("Consider improving the following areas: Python, Scala")


def test_found_and_missing_cover_every_requirement(matcher, catalog):
    for role in catalog.roles:
        requirement = catalog.lookup(role)
        result = matcher.match("Python Django Pandas Bash", role, catalog)

        assert len(result.found_skills) + len(result.missing_skills) == len(requirement.required_skills)
        assert len(result.found_frameworks) + len(result.missing_frameworks) == len(requirement.required_frameworks)
        assert 0 <= result.probability <= 100


def test_unknown_role_is_a_result_not_an_error(matcher, catalog):
    result = matcher.match("Python Django", "Astronaut", catalog)

    assert result.probability == 0
    assert result.found_skills == result.missing_skills == []
    assert result.found_frameworks == result.missing_frameworks == []
    assert result.additional_skills == "Job role not found in the dataset"
    assert result.additional_frameworks == "Job role not found in the dataset"
    assert result.feedback == "Job role not found in the dataset"


def test_role_lookup_is_case_sensitive(matcher, catalog):
    result = matcher.match("Python Django", "backend developer", catalog)

    assert result.feedback == RoleMatcher.ROLE_NOT_FOUND


def test_empty_framework_list_scores_full_half(matcher, catalog):
    result = matcher.match("bash scripting", "Shell Scripter", catalog)

    assert result.found_skills == ["Bash"]
    assert result.found_frameworks == []
    assert result.missing_frameworks == []
    assert result.probability == 100


def test_empty_requirements_only_score_the_other_half(matcher):
    catalog = ReferenceCatalog([RoleRequirement("Analyst", required_skills=(), required_frameworks=("Excel",))])

    result = matcher.match("no spreadsheets here", "Analyst", catalog)

    assert result.probability == 50
    assert result.additional_skills == "None"
    assert result.additional_frameworks == "Excel"


def test_substring_false_positive_is_known_limitation(matcher, catalog):
    # "Go" is found inside "Good", "Gin" inside "Engineering"
    result = matcher.match("Good communicator. Engineering degree.", "Go Developer", catalog)

    assert result.found_skills == ["Go"]
    assert result.found_frameworks == ["Gin"]
    assert result.probability == 100


def test_match_is_idempotent(matcher, catalog):
    first = matcher.match("Python and Spring", "Backend Developer", catalog)
    second = matcher.match("Python and Spring", "Backend Developer", catalog)

    assert first == second
    assert first.to_response() == second.to_response()


def test_empty_resume_text(matcher, catalog):
    result = matcher.match("", "Backend Developer", catalog)

    assert result.probability == 0
    assert result.missing_skills == ["Python", "Java"]


def test_to_response_shape(matcher, catalog):
    response = matcher.match("Python", "Backend Developer", catalog).to_response()

    assert response == {
        "jobRole": "Backend Developer",
        "probability": 25.0,
        "additionalSkills": "Java",
        "additionalFrameworks": "Django, Spring",
        "feedback": (
            "You need to improve your skills and frameworks significantly. "
            "Consider learning: Java, Django, Spring"
        ),
    }
