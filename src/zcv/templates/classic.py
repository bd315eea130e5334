"""Classic Academic resume template.

Based on ``github.com/subidit/rover-resume``: uppercase bold section
headers with horizontal rules, native LaTeX sectioning, 1-inch margins on
A4, and a ``description`` list for skills.  Education leads and honours
follow it, which suits research positions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylatex import Document, NoEscape, Package

from zcv.templates.base import ResumeTemplate

if TYPE_CHECKING:
    from zcv.services.resume_data import (
        ResumeAchievementEntry,
        ResumeData,
        ResumeEducationEntry,
        ResumeProjectEntry,
        ResumeSkills,
        ResumeWorkEntry,
    )

__all__ = ["ClassicResumeTemplate"]

_PACKAGES: list[Package] = [
    Package("geometry", options=NoEscape("a4paper,margin=1in")),
    Package("titlesec"),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
\setlength{\parindent}{0pt}
\setcounter{secnumdepth}{0}
\titleformat{\section}{\large\bfseries\uppercase}{}{}{}[\titlerule]
\titleformat{\subsection}{\bfseries}{}{0em}{}
\titleformat*{\subsubsection}{\itshape}
\titlespacing{\section}{0pt}{6pt}{4pt}
\titlespacing{\subsection}{0pt}{4pt}{0pt}
\titlespacing{\subsubsection}{0pt}{2pt}{0pt}
\setlist[itemize]{noitemsep, topsep=2pt, left=0pt .. 1.5em}
\setlist[description]{itemsep=0pt}
\pagestyle{empty}
\pdfgentounicode=1
"""


class ClassicResumeTemplate(ResumeTemplate):
    """Serif, rule-separated layout with education first."""

    section_order = ("education", "experience", "projects", "achievements", "skills")

    @property
    def name(self) -> str:
        return "Classic Academic"

    def _create_document(self) -> Document:
        return self.new_document(["a4paper", "11pt"], _PACKAGES, _PREAMBLE_SETUP)

    def _itemize(self, items: list[str]) -> list[str]:
        if not items:
            return []
        bullets = [rf"\item {self.escape_latex(i)}" for i in items]
        return [r"\begin{itemize}", *bullets, r"\end{itemize}"]

    def _add_heading(self, doc: Document, data: ResumeData) -> None:
        contact = data.get("contact", {})
        name = self.escape_latex(contact.get("name", ""))
        parts = self._contact_parts(contact)

        # name on the left, contact lines stacked on the right
        heading = [
            r"\begin{center}",
            r"\begin{minipage}[t]{0.5\textwidth}",
            rf"{{\Huge\bfseries {name}}}",
            r"\end{minipage}%",
            r"\hfill",
            r"\begin{minipage}[t]{0.4\textwidth}",
            r"\raggedleft",
        ]
        if parts:
            heading.append(r" \\ ".join(parts))
        heading += [r"\end{minipage}", r"\end{center}"]
        doc.append(NoEscape("\n".join(heading)))

    def _add_education(self, doc: Document, entries: list[ResumeEducationEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}"]

        for entry in entries:
            degree = esc(entry.get("degree", ""))
            if entry.get("field_of_study"):
                degree = f"{degree} in {esc(entry['field_of_study'])}"
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))
            lines.append(
                rf"\subsection*{{{esc(entry.get('institution', ''))}"
                rf" $|$ {{\normalfont\itshape {degree}}} \hfill {date_range}}}"
            )
            details = list(entry.get("achievements", []))
            if entry.get("gpa"):
                details.insert(0, f"GPA: {entry['gpa']}")
            lines.extend(self._itemize(details))

        doc.append(NoEscape("\n".join(lines)))

    def _add_experience(self, doc: Document, entries: list[ResumeWorkEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}"]

        for entry in entries:
            date_range = self.format_date_range(
                entry.get("start_date"),
                entry.get("end_date"),
                entry.get("is_current", False),
            )
            company = esc(entry.get("company", ""))
            location = esc(entry.get("location", ""))
            lines.append(rf"\subsection*{{{company} \hfill {location}}}")
            lines.append(rf"\subsubsection*{{{esc(entry.get('title', ''))} \hfill {date_range}}}")
            lines.extend(self._itemize(entry.get("bullets", [])))

        doc.append(NoEscape("\n".join(lines)))

    def _add_projects(self, doc: Document, entries: list[ResumeProjectEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}"]

        for entry in entries:
            techs = entry.get("technologies", [])
            tech_str = rf" $|$ {{\normalfont\itshape {esc(', '.join(techs))}}}" if techs else ""
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))
            lines.append(
                rf"\subsection*{{{esc(entry.get('name', ''))}{tech_str} \hfill {date_range}}}"
            )
            lines.extend(self._itemize(entry.get("bullets", [])))

        doc.append(NoEscape("\n".join(lines)))

    def _add_skills(self, doc: Document, skills: ResumeSkills) -> None:
        lines = [r"\section{Skills}", r"\begin{description}"]
        lines += [rf"\item[{label}] {joined}" for label, joined in self._skill_groups(skills)]
        lines.append(r"\end{description}")
        doc.append(NoEscape("\n".join(lines)))

    def _add_achievements(self, doc: Document, entries: list[ResumeAchievementEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Honors \& Publications}"]
        for entry in entries:
            org = entry.get("organization")
            title = esc(entry.get("title", ""))
            if org:
                title += rf" $|$ {{\normalfont\itshape {esc(org)}}}"
            lines.append(rf"\subsection*{{{title} \hfill {self.format_date(entry.get('date'))}}}")
            if entry.get("description"):
                lines.append(esc(entry["description"]))
        doc.append(NoEscape("\n".join(lines)))
