"""Tech Focused resume template.

Reproduces the popular ATS-friendly single-page layout from
``github.com/jakegut/resume``: small-caps name, underlined contact links,
tabular sub-headings and a compact "Technical Skills" block.
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

__all__ = ["TechResumeTemplate"]

# ---------------------------------------------------------------------------
# LaTeX preamble fragments
# ---------------------------------------------------------------------------

_PACKAGES: list[Package] = [
    Package("latexsym"),
    Package("fullpage", options=NoEscape("empty")),
    Package("titlesec"),
    Package("marvosym"),
    Package("color", options=NoEscape("usenames,dvipsnames")),
    Package("verbatim"),
    Package("enumitem"),
    Package("hyperref", options=NoEscape("hidelinks")),
    Package("fancyhdr"),
    Package("babel", options=NoEscape("english")),
    Package("tabularx"),
    Package("fontenc", options=NoEscape("T1")),
]

_PREAMBLE_SETUP = r"""
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
\titleformat{\section}{
  \vspace{-4pt}\scshape\raggedright\large
}{}{0em}{}[\color{black}\titlerule \vspace{-5pt}]
\pdfgentounicode=1
"""

_CUSTOM_COMMANDS = r"""
\newcommand{\resumeItem}[1]{
  \item\small{
    {#1 \vspace{-2pt}}
  }
}
\newcommand{\resumeSubheading}[4]{
  \vspace{-2pt}\item
    \begin{tabular*}{0.97\textwidth}[t]{l@{\extracolsep{\fill}}r}
      \textbf{#1} & #2 \\
      \textit{\small#3} & \textit{\small #4} \\
    \end{tabular*}\vspace{-7pt}
}
\newcommand{\resumeProjectHeading}[2]{
    \item
    \begin{tabular*}{0.97\textwidth}{l@{\extracolsep{\fill}}r}
      \small#1 & #2 \\
    \end{tabular*}\vspace{-7pt}
}
\renewcommand\labelitemii{$\vcenter{\hbox{\tiny$\bullet$}}$}
\newcommand{\resumeSubHeadingListStart}{\begin{itemize}[leftmargin=0.15in, label={}]}
\newcommand{\resumeSubHeadingListEnd}{\end{itemize}}
\newcommand{\resumeItemListStart}{\begin{itemize}}
\newcommand{\resumeItemListEnd}{\end{itemize}\vspace{-5pt}}
"""


class TechResumeTemplate(ResumeTemplate):
    """Single-column, ATS-friendly layout for engineering roles."""

    @property
    def name(self) -> str:
        return "Tech Focused"

    def _create_document(self) -> Document:
        return self.new_document(
            ["letterpaper", "11pt"], _PACKAGES, _PREAMBLE_SETUP, _CUSTOM_COMMANDS
        )

    def _item_list(self, bullets: list[str]) -> list[str]:
        if not bullets:
            return []
        esc = self.escape_latex
        return [
            r"\resumeItemListStart",
            *(rf"\resumeItem{{{esc(b)}}}" for b in bullets),
            r"\resumeItemListEnd",
        ]

    # -- heading -----------------------------------------------------------

    def _add_heading(self, doc: Document, data: ResumeData) -> None:
        contact = data.get("contact", {})
        name = self.escape_latex(contact.get("name", ""))
        parts = self._contact_parts(contact, underline=True)

        heading = r"\begin{center}" rf"\textbf{{\Huge \scshape {name}}} \\ \vspace{{1pt}}"
        if parts:
            heading += rf"\small {' $|$ '.join(parts)}"
        heading += r"\end{center}"
        doc.append(NoEscape(heading))

    # -- education ---------------------------------------------------------

    def _add_education(self, doc: Document, entries: list[ResumeEducationEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Education}", r"\resumeSubHeadingListStart"]

        for entry in entries:
            degree = esc(entry.get("degree", ""))
            if entry.get("field_of_study"):
                degree = f"{degree} in {esc(entry['field_of_study'])}"
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))
            lines.append(
                rf"\resumeSubheading{{{esc(entry.get('institution', ''))}}}"
                rf"{{{esc(entry.get('location', ''))}}}{{{degree}}}{{{date_range}}}"
            )
            details = list(entry.get("achievements", []))
            if entry.get("gpa"):
                details.insert(0, f"GPA: {entry['gpa']}")
            lines.extend(self._item_list(details))

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- experience --------------------------------------------------------

    def _add_experience(self, doc: Document, entries: list[ResumeWorkEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Experience}", r"\resumeSubHeadingListStart"]

        for entry in entries:
            date_range = self.format_date_range(
                entry.get("start_date"),
                entry.get("end_date"),
                entry.get("is_current", False),
            )
            lines.append(
                rf"\resumeSubheading{{{esc(entry.get('title', ''))}}}{{{date_range}}}"
                rf"{{{esc(entry.get('company', ''))}}}{{{esc(entry.get('location', ''))}}}"
            )
            lines.extend(self._item_list(entry.get("bullets", [])))

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- projects ----------------------------------------------------------

    def _add_projects(self, doc: Document, entries: list[ResumeProjectEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Projects}", r"\resumeSubHeadingListStart"]

        for entry in entries:
            heading_text = rf"\textbf{{{esc(entry.get('name', ''))}}}"
            techs = entry.get("technologies", [])
            if techs:
                heading_text += r" $|$ \emph{" + esc(", ".join(techs)) + "}"
            url = entry.get("url")
            if url:
                display_url = esc(self._strip_protocol(url))
                heading_text += rf" $|$ \href{{{url}}}{{\underline{{{display_url}}}}}"
            date_range = self.format_date_range(entry.get("start_date"), entry.get("end_date"))

            lines.append(rf"\resumeProjectHeading{{{heading_text}}}{{{date_range}}}")
            lines.extend(self._item_list(entry.get("bullets", [])))

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))

    # -- skills ------------------------------------------------------------

    def _add_skills(self, doc: Document, skills: ResumeSkills) -> None:
        groups = [
            rf"\textbf{{{label}}}{{: {joined}}}" for label, joined in self._skill_groups(skills)
        ]
        lines = [
            r"\section{Technical Skills}",
            r"\begin{itemize}[leftmargin=0.15in, label={}]",
            r"\small{\item{",
            " \\\\\n".join(groups),
            r"}}",
            r"\end{itemize}",
        ]
        doc.append(NoEscape("\n".join(lines)))

    # -- achievements ------------------------------------------------------

    def _add_achievements(self, doc: Document, entries: list[ResumeAchievementEntry]) -> None:
        esc = self.escape_latex
        lines = [r"\section{Achievements}", r"\resumeSubHeadingListStart"]

        for entry in entries:
            title = rf"\textbf{{{esc(entry.get('title', ''))}}}"
            if entry.get("organization"):
                title += rf" $|$ \emph{{{esc(entry['organization'])}}}"
            lines.append(
                rf"\resumeProjectHeading{{{title}}}{{{self.format_date(entry.get('date'))}}}"
            )
            if entry.get("description"):
                lines.extend(self._item_list([entry["description"]]))

        lines.append(r"\resumeSubHeadingListEnd")
        doc.append(NoEscape("\n".join(lines)))
