"""Executive resume template.

The tech layout reordered for senior candidates: a summary paragraph
under the header, impact and recognition ahead of the project list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape

from zcv.templates.tech import TechResumeTemplate

if TYPE_CHECKING:
    from zcv.services.resume_data import ResumeData

__all__ = ["ExecutiveResumeTemplate"]


class ExecutiveResumeTemplate(TechResumeTemplate):
    """Leadership-oriented variant of the tech layout."""

    section_order = ("experience", "achievements", "projects", "skills", "education")

    @property
    def name(self) -> str:
        return "Executive"

    def _add_heading(self, doc: Document, data: ResumeData) -> None:
        super()._add_heading(doc, data)
        headline = data.get("headline")
        if headline:
            doc.append(
                NoEscape(rf"\section{{Summary}}" "\n" rf"\small{{{self.escape_latex(headline)}}}")
            )
