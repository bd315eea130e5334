"""Abstract base class for pluggable resume templates."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from pylatex import Document, NoEscape, Package

if TYPE_CHECKING:
    from zcv.services.resume_data import (
        ResumeAchievementEntry,
        ResumeContactInfo,
        ResumeData,
        ResumeEducationEntry,
        ResumeProjectEntry,
        ResumeSkills,
        ResumeWorkEntry,
    )

__all__ = ["ResumeTemplate"]

_LATEX_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
_LATEX_SPECIAL = re.compile("|".join(re.escape(ch) for ch in _LATEX_ESCAPES))

_MONTH_ABBR = [
    "",
    "Jan.",
    "Feb.",
    "Mar.",
    "Apr.",
    "May",
    "Jun.",
    "Jul.",
    "Aug.",
    "Sep.",
    "Oct.",
    "Nov.",
    "Dec.",
]

# Section name -> builder method, in the default rendering order.
DEFAULT_SECTION_ORDER = ("education", "experience", "projects", "skills", "achievements")


class ResumeTemplate(ABC):
    """Interface that every resume template must implement.

    Subclasses provide the document preamble and one ``_add_<section>``
    method per section; :meth:`build` calls them in ``section_order`` and
    skips sections without data.
    """

    section_order: ClassVar[tuple[str, ...]] = DEFAULT_SECTION_ORDER

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable template name shown in the UI."""

    @abstractmethod
    def _create_document(self) -> Document: ...

    @abstractmethod
    def _add_heading(self, doc: Document, data: ResumeData) -> None: ...

    @abstractmethod
    def _add_education(self, doc: Document, entries: list[ResumeEducationEntry]) -> None: ...

    @abstractmethod
    def _add_experience(self, doc: Document, entries: list[ResumeWorkEntry]) -> None: ...

    @abstractmethod
    def _add_projects(self, doc: Document, entries: list[ResumeProjectEntry]) -> None: ...

    @abstractmethod
    def _add_skills(self, doc: Document, skills: ResumeSkills) -> None: ...

    @abstractmethod
    def _add_achievements(self, doc: Document, entries: list[ResumeAchievementEntry]) -> None: ...

    def build(self, data: ResumeData) -> Document:
        """Construct a PyLaTeX ``Document`` from *data*."""
        doc = self._create_document()
        self._add_heading(doc, data)

        sections = {
            "education": (self._add_education, data.get("education", [])),
            "experience": (self._add_experience, data.get("work_experience", [])),
            "projects": (self._add_projects, data.get("projects", [])),
            "skills": (self._add_skills, data.get("skills", {})),
            "achievements": (self._add_achievements, data.get("achievements", [])),
        }
        for section in self.section_order:
            add, content = sections[section]
            if section == "skills":
                if any(content.get(group) for group in ("languages", "frameworks", "tools")):
                    add(doc, content)
            elif content:
                add(doc, content)
        return doc

    def render(self, data: ResumeData) -> str:
        """Return the LaTeX source for *data*."""
        return self.build(data).dumps()

    # ------------------------------------------------------------------
    # Shared helpers available to all templates
    # ------------------------------------------------------------------

    @staticmethod
    def new_document(
        options: list[str],
        packages: list[Package],
        *preamble: str,
    ) -> Document:
        """Return a bare article with *packages* and raw *preamble* blocks."""
        doc = Document(
            documentclass="article",
            document_options=options,
            page_numbers=True,
            indent=True,
            lmodern=False,
            textcomp=False,
            microtype=False,
            fontenc=None,
            inputenc=None,
        )
        # page_numbers pulls in lastpage; the preambles set their own page style
        doc.packages = [p for p in doc.packages if "lastpage" not in p.dumps()]
        for pkg in packages:
            doc.packages.append(pkg)
        for block in preamble:
            doc.preamble.append(NoEscape(block))
        return doc

    @staticmethod
    def escape_latex(text: str) -> str:
        r"""Escape LaTeX special characters in *text*.

        Handles: ``& % $ # _ { } ~ ^ \``
        """
        return _LATEX_SPECIAL.sub(lambda m: _LATEX_ESCAPES[m.group(0)], text)

    @staticmethod
    def format_date(value: str | None) -> str:
        """Format ``YYYY-MM[-DD]`` as ``Mon. YYYY``; other text is returned as-is."""
        if not value:
            return ""
        parts = value.split("-")
        if len(parts) >= 2 and parts[0].isdigit() and parts[1].isdigit():
            month = int(parts[1])
            if 1 <= month <= 12:
                return f"{_MONTH_ABBR[month]} {parts[0]}"
        return value

    @classmethod
    def format_date_range(
        cls,
        start: str | None,
        end: str | None,
        is_current: bool = False,
    ) -> str:
        """Return a formatted date range like ``Aug. 2018 -- May 2021``."""
        start_str = cls.format_date(start)
        end_str = "Present" if is_current else cls.format_date(end)

        if start_str and end_str:
            return f"{start_str} -- {end_str}"
        return start_str or end_str or ""

    @staticmethod
    def _strip_protocol(url: str) -> str:
        """Remove ``https://`` or ``http://`` prefix and trailing slash."""
        for prefix in ("https://", "http://"):
            if url.startswith(prefix):
                url = url[len(prefix) :]
                break
        return url.rstrip("/")

    def _contact_parts(self, contact: ResumeContactInfo, *, underline: bool = False) -> list[str]:
        """Escaped header fragments: phone, email link, then profile links."""
        esc = self.escape_latex

        def link(target: str, text: str) -> str:
            shown = rf"\underline{{{text}}}" if underline else text
            return rf"\href{{{target}}}{{{shown}}}"

        parts: list[str] = []
        if contact.get("phone"):
            parts.append(esc(contact["phone"]))
        if contact.get("email"):
            parts.append(link(f"mailto:{contact['email']}", esc(contact["email"])))
        for key in ("linkedin_url", "github_url", "website_url"):
            url = contact.get(key)
            if url:
                parts.append(link(url, esc(self._strip_protocol(url))))
        return parts

    def _skill_groups(self, skills: ResumeSkills) -> list[tuple[str, str]]:
        """(label, escaped comma list) pairs for the non-empty skill groups."""
        labels = (("Languages", "languages"), ("Frameworks", "frameworks"), ("Tools", "tools"))
        return [
            (label, self.escape_latex(", ".join(skills[key])))
            for label, key in labels
            if skills.get(key)
        ]
