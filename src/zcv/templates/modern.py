"""Modern Professional resume template.

Helvetica sans-serif with a colour accent on the name and section titles,
an optional headline under the name, and experience before education.
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

__all__ = ["ModernResumeTemplate"]

_SEPARATOR = r" \textbar\ "

_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("enumitem"),
    Package("xcolor"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("fontenc", options=NoEscape("T1")),
    Package("helvet"),
    Package("tabularx"),
]

_PREAMBLE_SETUP = r"""
\definecolor{accent}{RGB}{37,99,235}
\renewcommand{\familydefault}{\sfdefault}
\pagestyle{fancy}
\fancyhf{}
\fancyfoot{}
\renewcommand{\headrulewidth}{0pt}
\renewcommand{\footrulewidth}{0pt}
\addtolength{\oddsidemargin}{-0.5in}
\addtolength{\evensidemargin}{-0.5in}
\addtolength{\textwidth}{1in}
\addtolength{\topmargin}{-.5in}
\addtolength{\textheight}{1.0in}
\urlstyle{same}
\raggedbottom
\raggedright
\setlength{\tabcolsep}{0in}
\setlength{\parindent}{0pt}
\titleformat{\section}{\large\bfseries\color{accent}}{}{0em}{}
\titlespacing{\section}{0pt}{8pt}{4pt}
\pdfgentounicode=1
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\modernSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\modernItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}
\newcommand{\modernProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\modernListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\modernListEnd}{\end{itemize}}
\newcommand{\modernItemListStart}{\begin{itemize}[leftmargin=0.15in]}
\newcommand{\modernItemListEnd}{\end{itemize}\vspace{-5pt}}
"""


class ModernResumeTemplate(ResumeTemplate):
    """Modern sans-serif resume with a colour accent."""

    section_order = ("experience", "projects", "skills", "education", "achievements")

    @property
    def name(self) -> str:
        return "Modern Professional"

    def _create_document(self) -> Document:
        return self.new_document(
            ["letterpaper", "10pt"], _PACKAGES, _PREAMBLE_SETUP, _CUSTOM_COMMANDS
        )

    def _wrap_list(self, items: list[str]) -> list[str]:
        if not items:
            return []
        esc = self.escape_latex
        return [
            r"\modernItemListStart",
            *(rf"\modernItem{{{esc(i)}}}" for i in items),
            r"\modernItemListEnd",
        ]

    def _add_heading(self, doc: Document, data: ResumeData) -> None:
        esc = self.escape_latex
        contact = data.get("contact", {})
        parts = self._contact_parts(contact)
        if contact.get("location"):
            parts.insert(0, esc(contact["location"]))

        heading = r"\begin{center}"
        heading += rf"{{\Large\bfseries\color{{accent}} {esc(contact.get('name', ''))}}}"
        if data.get("headline"):
            heading += rf" \\ {{\small\itshape {esc(data['headline'])}}}"
        heading += r" \\ \vspace{1pt}"
        if parts:
            heading += rf"\small {_SEPARATOR.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    def _add_education(self, doc: Document, entries: list[ResumeEducationEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}", r"\modernListStart"]

        for entry in entries:
            degree = esc(entry.get("degree", ""))
            if entry.get("field_of_study"):
                degree = f"{degree} in {esc(entry['field_of_study'])}"
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))
            lines.append(
                rf"\modernSubheading{{{esc(entry.get('institution', ''))}}}"
                rf"{{{esc(entry.get('location', ''))}}}{{{degree}}}{{{date_range}}}"
            )
            details = list(entry.get("achievements", []))
            if entry.get("gpa"):
                details.insert(0, f"GPA: {entry['gpa']}")
            lines.extend(self._wrap_list(details))

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_experience(self, doc: Document, entries: list[ResumeWorkEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}", r"\modernListStart"]

        for entry in entries:
            date_range = self.format_date_range(
                entry.get("start_date"),
                entry.get("end_date"),
                entry.get("is_current", False),
            )
            lines.append(
                rf"\modernSubheading{{{esc(entry.get('title', ''))}}}{{{date_range}}}"
                rf"{{{esc(entry.get('company', ''))}}}{{{esc(entry.get('location', ''))}}}"
            )
            lines.extend(self._wrap_list(entry.get("bullets", [])))

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_projects(self, doc: Document, entries: list[ResumeProjectEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}", r"\modernListStart"]

        for entry in entries:
            heading_text = rf"\textbf{{{esc(entry.get('name', ''))}}}"
            techs = entry.get("technologies", [])
            if techs:
                heading_text += r" $|$ \emph{" + esc(", ".join(techs)) + "}"
            url = entry.get("url")
            if url:
                heading_text += rf" $|$ \href{{{url}}}{{{esc(self._strip_protocol(url))}}}"
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))

            lines.append(rf"\modernProjectHeading{{{heading_text}}}{{{date_range}}}")
            lines.extend(self._wrap_list(entry.get("bullets", [])))

        lines.append(r"\modernListEnd")
        doc.append(NoEscape("\n".join(lines)))

    def _add_skills(self, doc: Document, skills: ResumeSkills) -> None:
        groups = [
            rf"\textbf{{{label}}}{{: {joined}}}" for label, joined in self._skill_groups(skills)
        ]
        lines = [
            r"\section{Skills}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            r"\small{\item{",
            " \\\\\n".join(groups),
            r"}}",
            r"\end{itemize}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    def _add_achievements(self, doc: Document, entries: list[ResumeAchievementEntry]) -> None:
        esc = self.escape_latex
        items = []
        for entry in entries:
            text = rf"\textbf{{{esc(entry.get('title', ''))}}}"
            if entry.get("organization"):
                text += f", {esc(entry['organization'])}"
            if entry.get("date"):
                text += f" ({self.format_date(entry['date'])})"
            items.append(rf"\modernItem{{{text}}}")
        lines = [r"\section{Awards \& Certifications}", r"\modernItemListStart", *items]
        lines.append(r"\modernItemListEnd")
        doc.append(NoEscape("\n".join(lines)))
