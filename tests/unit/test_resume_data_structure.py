"""Unit tests for résumé normalization."""

import copy

import pytest

from vitae.contexts.intake import InvalidResumeStructureError, Resume


@pytest.mark.unit
def test_minimal_resume_has_empty_sections():
    resume = Resume.from_dict({"basics": {"name": "Ada Lovelace"}})

    assert resume.basics.name == "Ada Lovelace"
    assert resume.basics.label is None
    assert resume.basics.profiles == []
    assert resume.work == []
    assert resume.references == []


@pytest.mark.unit
def test_missing_basics_is_rejected():
    with pytest.raises(InvalidResumeStructureError) as exc_info:
        Resume.from_dict({"work": []})

    assert exc_info.value.path == "basics"


@pytest.mark.unit
def test_unknown_keys_are_ignored():
    resume = Resume.from_dict({"basics": {"name": "Ada", "phone": "555"}, "meta": {"theme": "x"}})
    assert resume.basics.name == "Ada"


@pytest.mark.unit
def test_website_used_when_url_missing():
    resume = Resume.from_dict({"basics": {"name": "Ada", "website": "https://ada.dev"}})
    assert resume.basics.url == "https://ada.dev"


@pytest.mark.unit
def test_url_preferred_over_website():
    resume = Resume.from_dict(
        {"basics": {"name": "Ada", "url": "https://a.dev", "website": "https://b.dev"}}
    )
    assert resume.basics.url == "https://a.dev"


class TestWorkCompanyPrecedence:
    """Company comes from 'name', then 'company', then ''."""

    @pytest.mark.unit
    def test_name_field(self):
        resume = Resume.from_dict({"basics": {}, "work": [{"name": "Acme", "company": "Other"}]})
        assert resume.work[0].company == "Acme"

    @pytest.mark.unit
    def test_company_field_fallback(self):
        resume = Resume.from_dict({"basics": {}, "work": [{"company": "Globex"}]})
        assert resume.work[0].company == "Globex"

    @pytest.mark.unit
    def test_empty_name_falls_through(self):
        resume = Resume.from_dict({"basics": {}, "work": [{"name": "", "company": "Initech"}]})
        assert resume.work[0].company == "Initech"

    @pytest.mark.unit
    def test_neither_field(self):
        resume = Resume.from_dict({"basics": {}, "work": [{"position": "Engineer"}]})
        assert resume.work[0].company == ""


@pytest.mark.unit
def test_work_fields_are_mapped():
    resume = Resume.from_dict(
        {
            "basics": {},
            "work": [
                {
                    "name": "Acme",
                    "position": "Engineer",
                    "startDate": "2020-01",
                    "endDate": "2022-06",
                    "summary": "Built things.",
                    "highlights": ["One", "Two"],
                }
            ],
        }
    )
    item = resume.work[0]

    assert item.position == "Engineer"
    assert item.start_date == "2020-01"
    assert item.end_date == "2022-06"
    assert item.summary == "Built things."
    assert item.highlights == ["One", "Two"]


@pytest.mark.unit
def test_numbers_are_stringified():
    resume = Resume.from_dict(
        {
            "basics": {},
            "work": [{"startDate": 2020}],
            "education": [{"institution": "MIT", "score": 3.9}],
        }
    )
    assert resume.work[0].start_date == "2020"
    assert resume.education[0].score == "3.9"


@pytest.mark.unit
def test_references_accept_strings_and_objects():
    resume = Resume.from_dict(
        {"basics": {}, "references": ["Plain reference", {"name": "Bob", "reference": "Great."}]}
    )
    assert resume.references[0].reference == "Plain reference"
    assert resume.references[1].reference == "Great."
    assert resume.references[1].name == "Bob"


@pytest.mark.unit
def test_null_lists_are_empty():
    resume = Resume.from_dict({"basics": {"profiles": None}, "skills": None})
    assert resume.basics.profiles == []
    assert resume.skills == []


class TestSchemaShapeErrors:
    """Wrong types fail fast with the offending location."""

    @pytest.mark.unit
    def test_string_where_list_expected(self):
        with pytest.raises(InvalidResumeStructureError) as exc_info:
            Resume.from_dict({"basics": {}, "work": [{"highlights": "not a list"}]})

        assert exc_info.value.path == "work[0].highlights"
        assert exc_info.value.expected == "list"

    @pytest.mark.unit
    def test_section_that_is_not_a_list(self):
        with pytest.raises(InvalidResumeStructureError) as exc_info:
            Resume.from_dict({"basics": {}, "skills": {"name": "Python"}})

        assert exc_info.value.path == "skills"

    @pytest.mark.unit
    def test_record_that_is_not_an_object(self):
        with pytest.raises(InvalidResumeStructureError) as exc_info:
            Resume.from_dict({"basics": {}, "education": ["MIT"]})

        assert exc_info.value.path == "education[0]"

    @pytest.mark.unit
    def test_object_where_text_expected(self):
        with pytest.raises(InvalidResumeStructureError) as exc_info:
            Resume.from_dict({"basics": {"name": {"first": "Ada"}}})

        assert exc_info.value.path == "basics.name"

    @pytest.mark.unit
    def test_nested_profile_path(self):
        with pytest.raises(InvalidResumeStructureError) as exc_info:
            Resume.from_dict({"basics": {"profiles": [{"network": "GitHub"}, 42]}})

        assert exc_info.value.path == "basics.profiles[1]"

    @pytest.mark.unit
    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="Expected a list"):
            Resume.from_dict({"basics": {}, "interests": [{"keywords": "chess"}]})


@pytest.mark.unit
def test_input_is_not_mutated():
    raw = {
        "basics": {"name": "Ada", "website": "https://ada.dev"},
        "work": [{"company": "Acme", "highlights": ["x"]}],
    }
    snapshot = copy.deepcopy(raw)

    Resume.from_dict(raw)

    assert raw == snapshot
