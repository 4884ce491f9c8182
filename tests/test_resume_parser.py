"""Tests for raw-text and structured resume parsing."""

import pytest

from resume_screener.exceptions import ParsingError
from resume_screener.models.schemas.resume_input import RawResumeInput, StructuredResumeInput
from resume_screener.services.resume_parser import parse_resume


STRUCTURED_RESUME = {
    "fullName": "Ada Lovelace",
    "email": "ada@example.com",
    "phoneNumber": "555-0100",
    "workExperience": [
        {
            "jobTitle": "Software Engineer",
            "employer": "Analytical Engines Ltd",
            "startDate": "2018",
            "endDate": "2020",
            "summary": "Wrote the first program",
            "tech": "Python, SQL",
        },
    ],
    "education": [
        {
            "degree": "Bachelor of Science",
            "school": "University of London",
            "graduationYear": 2015,
            "major": "Mathematics",
            "gpa": "3.8",
        },
    ],
    "skills": [
        "Python",
        {"skill": "Leadership", "category": "soft", "proficiency": "expert", "years": 4},
    ],
    "certifications": [
        {"certification": "PMP", "issuer": "PMI", "credentialId": "ABC-1"},
    ],
}


class TestRawParsing:
    def test_contact_fields(self, sample_resume_text):
        profile = parse_resume(RawResumeInput(text=sample_resume_text))
        assert profile.full_name == "John Smith"
        assert profile.email == "john.smith@email.com"
        assert profile.phone == "5551234567"
        assert profile.raw_text == sample_resume_text

    def test_sections(self, sample_resume_text):
        profile = parse_resume(sample_resume_text)
        assert [w.title for w in profile.work_experience] == ["Backend Developer"]
        assert profile.work_experience[0].company == "Acme Software Inc"
        assert profile.work_experience[0].duration == 36
        assert profile.education[0].degree == "Bachelor of Science in Computer Science"
        assert profile.education[0].institution == "State University"
        assert profile.education[0].graduation_year == 2020
        assert [s.name for s in profile.skills] == ["JavaScript", "React", "Node.js", "SQL"]
        assert profile.certifications == []

    @pytest.mark.parametrize(
        "title", ["SENIOR SOFTWARE ENGINEER", "software engineer", "Software Engineer"]
    )
    def test_title_case_does_not_matter(self, title):
        text = f"Jane Doe\nExperience\n{title} at Acme Inc\n2018 - 2023"
        work = parse_resume(text).work_experience
        assert [w.title for w in work] == [title]
        assert work[0].company == "Acme Inc"
        assert work[0].duration == 60

    def test_empty_text(self):
        profile = parse_resume("")
        assert profile.full_name == "Unknown"
        assert profile.email == ""
        assert profile.phone == ""
        assert profile.education == []
        assert profile.work_experience == []
        assert profile.skills == []
        assert profile.certifications == []


class TestStructuredParsing:
    def test_alternate_names_are_lossless(self):
        profile = parse_resume(StructuredResumeInput(data=STRUCTURED_RESUME))
        assert profile.full_name == "Ada Lovelace"
        assert profile.email == "ada@example.com"
        assert profile.phone == "555-0100"

        job = profile.work_experience[0]
        assert job.title == "Software Engineer"
        assert job.company == "Analytical Engines Ltd"
        assert job.start_date == "2018"
        assert job.end_date == "2020"
        assert job.duration == 24
        assert job.description == "Wrote the first program"
        assert job.technologies == ["Python", "SQL"]

        edu = profile.education[0]
        assert edu.institution == "University of London"
        assert edu.graduation_year == 2015
        assert edu.field == "Mathematics"
        assert edu.gpa == 3.8

        cert = profile.certifications[0]
        assert cert.name == "PMP"
        assert cert.issuing_organization == "PMI"
        assert cert.credential_id == "ABC-1"

    def test_skills_strings_and_objects(self):
        profile = parse_resume(STRUCTURED_RESUME)
        python, leadership = profile.skills
        assert (python.name, python.category, python.proficiency) == ("Python", "technical", "intermediate")
        assert (leadership.name, leadership.category, leadership.proficiency) == ("Leadership", "soft", "expert")
        assert leadership.years_of_experience == 4.0

    def test_first_present_key_wins(self):
        profile = parse_resume({"name": "First", "fullName": "Second"})
        assert profile.full_name == "First"

    def test_empty_values_fall_through(self):
        profile = parse_resume({"name": "", "fullName": "Second"})
        assert profile.full_name == "Second"

    def test_explicit_duration_kept(self):
        profile = parse_resume({"experience": [{"title": "Developer", "duration": 18}]})
        assert profile.work_experience[0].duration == 18

    def test_missing_fields_take_defaults(self):
        profile = parse_resume({})
        assert profile.full_name == "Unknown"
        assert profile.skills == []

        job = parse_resume({"experience": [{}]}).work_experience[0]
        assert job.title == "Unknown"
        assert job.company == "Unknown"
        assert job.duration == 0

    def test_unknown_category_falls_back(self):
        profile = parse_resume({"skills": [{"name": "Juggling", "category": "circus"}]})
        assert profile.skills[0].category == "technical"


@pytest.mark.parametrize("bad_input", [42, None, ["text"]])
def test_invalid_input_raises(bad_input):
    with pytest.raises(ParsingError, match="Invalid input format"):
        parse_resume(bad_input)
