"""
Markdown Composition

Maps a loaded CV data tree onto an ordered list of Markdown lines.

Sections are always emitted in this order, each only when its list has
entries (Contact is the exception and is always emitted):

    Contact, Languages, Experience, Education, Certifications, Skills, Projects

A single line may carry embedded newlines (multi-line details text); use
to_markdown() to join the lines into a document.
"""

from typing import Any, List, Mapping

from cvpress.contexts.templating.exceptions import MalformedInputError

DEFAULT_NAME = "Name"
DIVIDER = "---"
PLACEHOLDER_LINK = "#"

# (field, label) pairs in output order
CONTACT_FIELDS = [
    ("email", "Email"),
    ("phone", "Phone"),
    ("website", "Website"),
    ("linkedin", "LinkedIn"),
    ("github", "GitHub"),
]


def _section(parent: Mapping, key: str, key_path: str) -> Mapping:
    """Return the mapping stored under key, or an empty mapping when absent."""
    value = parent.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise MalformedInputError(
            f"Section '{key_path}' must be a mapping",
            key_path=key_path,
            expected="a mapping",
            actual=type(value).__name__,
        )
    return value


def _entries(section: Mapping, key: str, key_path: str) -> List[Mapping]:
    """Return the list of mappings stored under key, or an empty list when absent."""
    value = section.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise MalformedInputError(
            f"Field '{key_path}' must be a list of mappings",
            key_path=key_path,
            expected="a list",
            actual=type(value).__name__,
        )
    for index, entry in enumerate(value):
        if not isinstance(entry, Mapping):
            raise MalformedInputError(
                f"Entry {index} of '{key_path}' must be a mapping",
                key_path=f"{key_path}[{index}]",
                expected="a mapping",
                actual=type(entry).__name__,
            )
    return list(value)


def _text(entry: Mapping, key: str) -> str:
    """Scalar field as text; missing or null fields become an empty string."""
    value = entry.get(key)
    if value is None:
        return ""
    return str(value)


def _open_section(md: List[str], title: str) -> None:
    md.extend([DIVIDER, "", f"## {title}", ""])


def _compose_header(md: List[str], sidebar: Mapping) -> None:
    name = _text(sidebar, "name") or DEFAULT_NAME
    tagline = _text(sidebar, "tagline")

    md.append(f"# {name}")
    if tagline:
        md.append(f"**{tagline}**")
    md.extend(["", DIVIDER, ""])


def _compose_contact(md: List[str], sidebar: Mapping) -> None:
    # Contact heading is emitted even when every field is empty
    md.extend(["## Contact", ""])
    for field, label in CONTACT_FIELDS:
        value = _text(sidebar, field)
        if value:
            md.append(f"- {label}: {value}")
    md.append("")


def _resolve_languages(data: Mapping, sidebar: Mapping) -> List[Mapping]:
    """Sidebar languages win when non-empty, otherwise fall back to the root."""
    sidebar_languages = _section(sidebar, "languages", "sidebar.languages")
    info = _entries(sidebar_languages, "info", "sidebar.languages.info")
    if info:
        return info

    root_languages = _section(data, "languages", "languages")
    return _entries(root_languages, "info", "languages.info")


def _compose_languages(md: List[str], languages: List[Mapping]) -> None:
    if not languages:
        return

    _open_section(md, "Languages")
    for lang in languages:
        md.append(f"- {_text(lang, 'idiom')} ({_text(lang, 'level')})")
    md.append("")


def _compose_experience(md: List[str], data: Mapping) -> None:
    experiences = _entries(_section(data, "experiences", "experiences"), "info", "experiences.info")
    if not experiences:
        return

    _open_section(md, "Experience")
    for exp in experiences:
        time = _text(exp, "time")
        details = _text(exp, "details").strip()

        md.append(f"### {_text(exp, 'role')} | {_text(exp, 'company')}")
        if time:
            md.append(f"*{time}*")
        md.append("")
        if details:
            md.append(details)
        md.append("")


def _compose_education(md: List[str], data: Mapping) -> None:
    education = _entries(_section(data, "education", "education"), "info", "education.info")
    if not education:
        return

    _open_section(md, "Education")
    for edu in education:
        line = f"- **{_text(edu, 'degree')}** - {_text(edu, 'university')}"
        time = _text(edu, "time")
        if time:
            line += f" ({time})"
        md.append(line)
    md.append("")


def _certification_line(cert: Mapping) -> str:
    """Italic organization line, with the date range only when both ends are known."""
    org = _text(cert, "organization")
    start = _text(cert, "start")
    end = _text(cert, "end")

    if not org:
        return ""
    if start and end:
        return f"*{org} ({start}-{end})*"
    return f"*{org}*"


def _compose_certifications(md: List[str], data: Mapping) -> None:
    certifications = _entries(
        _section(data, "certifications", "certifications"), "list", "certifications.list"
    )
    if not certifications:
        return

    _open_section(md, "Certifications")
    for cert in certifications:
        details = _text(cert, "details").strip()

        md.append(f"### {_text(cert, 'name')}")
        org_line = _certification_line(cert)
        if org_line:
            md.append(org_line)
        md.append("")
        if details:
            md.append(details)
        md.append("")


def _compose_skills(md: List[str], data: Mapping) -> None:
    toolset = _entries(_section(data, "skills", "skills"), "toolset", "skills.toolset")
    if not toolset:
        return

    _open_section(md, "Skills")
    for skill in toolset:
        name = _text(skill, "name")
        if name:
            md.append(name)
    md.append("")


def _compose_projects(md: List[str], data: Mapping) -> None:
    projects = _section(data, "projects", "projects")
    assignments = _entries(projects, "assignments", "projects.assignments")
    if not assignments:
        return

    _open_section(md, "Projects")
    intro = _text(projects, "intro")
    if intro:
        md.append(intro)
    md.append("")

    for project in assignments:
        title = _text(project, "title")
        tagline = _text(project, "tagline")
        link = _text(project, "link")

        if link and link != PLACEHOLDER_LINK:
            md.append(f"### [{title}]({link})")
        else:
            md.append(f"### {title}")
        if tagline:
            md.append(tagline)
        md.append("")


def compose(data: Mapping[str, Any]) -> List[str]:
    """
    Compose the Markdown lines of a CV from its data tree.

    Pure function: reads the tree without modifying it and performs no I/O, so
    the same input always yields the same lines.

    Args:
        data: Root mapping of the CV document (every top-level key optional)

    Returns:
        Ordered list of Markdown lines

    Raises:
        MalformedInputError: If a section is not a mapping or a list-valued
            field is not a list of mappings
    """
    if not isinstance(data, Mapping):
        raise MalformedInputError(
            "CV data must be a mapping",
            key_path="<root>",
            expected="a mapping",
            actual=type(data).__name__,
        )

    sidebar = _section(data, "sidebar", "sidebar")
    md: List[str] = []

    _compose_header(md, sidebar)
    _compose_contact(md, sidebar)
    _compose_languages(md, _resolve_languages(data, sidebar))
    _compose_experience(md, data)
    _compose_education(md, data)
    _compose_certifications(md, data)
    _compose_skills(md, data)
    _compose_projects(md, data)

    return md


def to_markdown(lines: List[str]) -> str:
    """Join composed lines into a Markdown document."""
    return "\n".join(lines)


def section_headings(lines: List[str]) -> List[str]:
    """Titles of the level-2 section headings, in document order."""
    return [line[3:] for line in lines if line.startswith("## ")]
