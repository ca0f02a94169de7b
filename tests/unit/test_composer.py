"""Unit tests for Markdown composition of CV data."""

import copy

import pytest

from cvpress.contexts.templating.composer import compose, section_headings, to_markdown
from cvpress.contexts.templating.exceptions import MalformedInputError

SECTION_ORDER = [
    "Contact",
    "Languages",
    "Experience",
    "Education",
    "Certifications",
    "Skills",
    "Projects",
]


@pytest.fixture
def full_cv():
    """CV data with every section populated."""
    return {
        "sidebar": {
            "name": "Ada Lovelace",
            "tagline": "Analyst",
            "email": "ada@example.com",
            "phone": "+44 20 7946 0000",
            "website": "https://ada.example.com",
            "linkedin": "https://linkedin.com/in/ada",
            "github": "https://github.com/ada",
            "languages": {"info": [{"idiom": "English", "level": "Native"}]},
        },
        "experiences": {
            "info": [
                {
                    "role": "Collaborator",
                    "company": "Analytical Engine",
                    "time": "1842 - 1843",
                    "details": "\n  Wrote Note G.\n\n",
                },
                {"role": "Translator", "company": "Taylor's Scientific Memoirs"},
            ]
        },
        "education": {"info": [{"degree": "PhD", "university": "MIT", "time": "2020"}]},
        "certifications": {
            "list": [
                {
                    "name": "Fellow",
                    "organization": "Royal Society",
                    "start": "2020",
                    "end": "2021",
                    "details": "  Elected.  ",
                }
            ]
        },
        "skills": {"toolset": [{"name": "Python"}, {"name": "LaTeX"}]},
        "projects": {
            "intro": "Selected work.",
            "assignments": [
                {"title": "App", "tagline": "A tool", "link": "https://x"},
                {"title": "Draft", "link": "#"},
            ],
        },
    }


@pytest.mark.unit
class TestHeaderAndContact:
    """Header block and the always-present Contact section."""

    def test_empty_document_has_header_and_bare_contact(self):
        assert compose({}) == ["# Name", "", "---", "", "## Contact", "", ""]

    def test_empty_document_has_only_contact_heading(self):
        assert section_headings(compose({})) == ["Contact"]

    def test_empty_name_falls_back_to_default(self):
        lines = compose({"sidebar": {"name": ""}})
        assert lines[0] == "# Name"

    def test_tagline_follows_name(self):
        lines = compose({"sidebar": {"name": "Ada", "tagline": "Analyst"}})
        assert lines[:5] == ["# Ada", "**Analyst**", "", "---", ""]

    def test_contact_fields_in_fixed_order(self, full_cv):
        lines = compose(full_cv)
        start = lines.index("## Contact")
        assert lines[start : start + 8] == [
            "## Contact",
            "",
            "- Email: ada@example.com",
            "- Phone: +44 20 7946 0000",
            "- Website: https://ada.example.com",
            "- LinkedIn: https://linkedin.com/in/ada",
            "- GitHub: https://github.com/ada",
            "",
        ]

    def test_empty_contact_fields_are_skipped(self):
        lines = compose({"sidebar": {"email": "a@b.c", "phone": "", "github": None}})
        assert "- Email: a@b.c" in lines
        assert not any(line.startswith("- Phone") for line in lines)
        assert not any(line.startswith("- GitHub") for line in lines)


@pytest.mark.unit
class TestSectionRules:
    """Ordering and conditional inclusion of sections."""

    def test_full_document_heading_order(self, full_cv):
        assert section_headings(compose(full_cv)) == SECTION_ORDER

    def test_empty_lists_omit_sections(self):
        data = {
            "experiences": {"info": []},
            "education": {"info": []},
            "certifications": {"list": []},
            "skills": {"toolset": []},
            "projects": {"intro": "Only intro", "assignments": []},
        }
        lines = compose(data)
        assert section_headings(lines) == ["Contact"]
        assert "Only intro" not in lines

    def test_sections_without_list_key_are_omitted(self):
        data = {"experiences": {}, "skills": {"other": []}, "projects": None}
        assert section_headings(compose(data)) == ["Contact"]

    def test_partial_document_keeps_order(self):
        data = {
            "skills": {"toolset": [{"name": "Python"}]},
            "education": {"info": [{"degree": "BSc", "university": "UCL"}]},
        }
        assert section_headings(compose(data)) == ["Contact", "Education", "Skills"]

    def test_each_optional_section_opens_with_divider(self, full_cv):
        lines = compose(full_cv)
        for title in SECTION_ORDER[1:]:
            index = lines.index(f"## {title}")
            assert lines[index - 2 : index + 2] == ["---", "", f"## {title}", ""]

    def test_compose_is_idempotent(self, full_cv):
        assert to_markdown(compose(full_cv)) == to_markdown(compose(full_cv))

    def test_compose_does_not_mutate_input(self, full_cv):
        snapshot = copy.deepcopy(full_cv)
        compose(full_cv)
        assert full_cv == snapshot


@pytest.mark.unit
class TestLanguages:
    """Languages may live in the sidebar or at the root."""

    def test_sidebar_languages_take_precedence(self):
        data = {
            "sidebar": {"languages": {"info": [{"idiom": "English", "level": "Fluent"}]}},
            "languages": {"info": [{"idiom": "French", "level": "Basic"}]},
        }
        lines = compose(data)
        assert "- English (Fluent)" in lines
        assert "- French (Basic)" not in lines

    def test_root_languages_used_when_sidebar_empty(self):
        data = {
            "sidebar": {"languages": {"info": []}},
            "languages": {"info": [{"idiom": "French", "level": "Basic"}]},
        }
        lines = compose(data)
        index = lines.index("## Languages")
        assert lines[index:] == ["## Languages", "", "- French (Basic)", ""]

    def test_languages_keep_input_order(self):
        data = {
            "languages": {
                "info": [
                    {"idiom": "Spanish", "level": "B2"},
                    {"idiom": "Dutch", "level": "A1"},
                ]
            }
        }
        lines = compose(data)
        assert lines.index("- Spanish (B2)") < lines.index("- Dutch (A1)")


@pytest.mark.unit
class TestExperience:
    def test_entry_layout(self, full_cv):
        lines = compose(full_cv)
        index = lines.index("### Collaborator | Analytical Engine")
        assert lines[index : index + 5] == [
            "### Collaborator | Analytical Engine",
            "*1842 - 1843*",
            "",
            "Wrote Note G.",
            "",
        ]

    def test_entry_without_time_or_details(self, full_cv):
        lines = compose(full_cv)
        index = lines.index("### Translator | Taylor's Scientific Memoirs")
        assert lines[index : index + 3] == [
            "### Translator | Taylor's Scientific Memoirs",
            "",
            "",
        ]

    def test_missing_fields_default_to_empty(self):
        lines = compose({"experiences": {"info": [{}]}})
        assert "###  | " in lines

    def test_multiline_details_stay_in_one_line_entry(self):
        details = "First line.\nSecond line.\n"
        lines = compose({"experiences": {"info": [{"role": "R", "details": details}]}})
        assert "First line.\nSecond line." in lines


@pytest.mark.unit
class TestEducation:
    def test_with_time(self):
        data = {"education": {"info": [{"degree": "PhD", "university": "MIT", "time": "2020"}]}}
        assert "- **PhD** - MIT (2020)" in compose(data)

    def test_without_time(self):
        data = {"education": {"info": [{"degree": "PhD", "university": "MIT"}]}}
        assert "- **PhD** - MIT" in compose(data)

    def test_numeric_time_is_rendered_as_text(self):
        data = {"education": {"info": [{"degree": "PhD", "university": "MIT", "time": 2020}]}}
        assert "- **PhD** - MIT (2020)" in compose(data)


@pytest.mark.unit
class TestCertifications:
    @pytest.mark.parametrize(
        "cert, expected",
        [
            ({"name": "X", "organization": "Y", "start": "2020", "end": "2021"}, "*Y (2020-2021)*"),
            ({"name": "X", "organization": "Y"}, "*Y*"),
            ({"name": "X", "organization": "Y", "start": "2020"}, "*Y*"),
            ({"name": "X", "organization": "Y", "start": 2020, "end": 2021}, "*Y (2020-2021)*"),
        ],
    )
    def test_organization_line(self, cert, expected):
        lines = compose({"certifications": {"list": [cert]}})
        index = lines.index("### X")
        assert lines[index + 1] == expected

    def test_no_organization_means_no_line(self):
        lines = compose({"certifications": {"list": [{"name": "X", "start": "2020", "end": "2021"}]}})
        index = lines.index("### X")
        assert lines[index:] == ["### X", "", ""]

    def test_details_are_trimmed(self, full_cv):
        lines = compose(full_cv)
        index = lines.index("### Fellow")
        assert lines[index : index + 5] == [
            "### Fellow",
            "*Royal Society (2020-2021)*",
            "",
            "Elected.",
            "",
        ]


@pytest.mark.unit
class TestSkillsAndProjects:
    def test_skills_are_raw_lines(self, full_cv):
        lines = compose(full_cv)
        index = lines.index("## Skills")
        assert lines[index : index + 5] == ["## Skills", "", "Python", "LaTeX", ""]

    def test_skills_without_name_are_skipped(self):
        lines = compose({"skills": {"toolset": [{"name": "Go"}, {}, {"name": ""}]}})
        index = lines.index("## Skills")
        assert lines[index:] == ["## Skills", "", "Go", ""]

    def test_project_with_link(self):
        data = {"projects": {"assignments": [{"title": "App", "link": "https://x"}]}}
        assert "### [App](https://x)" in compose(data)

    def test_project_placeholder_link_is_suppressed(self):
        data = {"projects": {"assignments": [{"title": "App", "link": "#"}]}}
        lines = compose(data)
        assert "### App" in lines
        assert not any("](#)" in line for line in lines)

    def test_projects_layout(self, full_cv):
        lines = compose(full_cv)
        index = lines.index("## Projects")
        assert lines[index:] == [
            "## Projects",
            "",
            "Selected work.",
            "",
            "### [App](https://x)",
            "A tool",
            "",
            "### Draft",
            "",
        ]

    def test_projects_without_intro(self):
        data = {"projects": {"assignments": [{"title": "App"}]}}
        lines = compose(data)
        index = lines.index("## Projects")
        assert lines[index:] == ["## Projects", "", "", "### App", ""]


@pytest.mark.unit
class TestMalformedInput:
    """Wrong shapes fail fast instead of producing partial output."""

    def test_list_field_given_as_string(self):
        with pytest.raises(MalformedInputError) as exc_info:
            compose({"experiences": {"info": "Senior engineer at Acme"}})
        assert exc_info.value.key_path == "experiences.info"
        assert exc_info.value.actual == "str"

    def test_list_entry_not_a_mapping(self):
        with pytest.raises(MalformedInputError) as exc_info:
            compose({"skills": {"toolset": ["Python"]}})
        assert exc_info.value.key_path == "skills.toolset[0]"

    def test_section_not_a_mapping(self):
        with pytest.raises(MalformedInputError) as exc_info:
            compose({"education": ["PhD"]})
        assert exc_info.value.key_path == "education"

    def test_malformed_sidebar_languages(self):
        with pytest.raises(MalformedInputError):
            compose({"sidebar": {"languages": {"info": 3}}})

    def test_root_not_a_mapping(self):
        with pytest.raises(MalformedInputError):
            compose(["not", "a", "mapping"])

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            compose({"certifications": {"list": "AWS"}})


@pytest.mark.unit
def test_to_markdown_joins_with_newlines():
    assert to_markdown(["# Name", "", "---"]) == "# Name\n\n---"
