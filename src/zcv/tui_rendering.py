from __future__ import annotations

from zcv.models import ChatMessage, GeneratedResume, MessageRole, Portfolio
from zcv.services.dashboard import DashboardSummary
from zcv.services.resume_generator import ContentSelection, GeneratorStep
from zcv.templates import TemplateInfo


def render_dashboard(summary: DashboardSummary) -> str:
    parts: list[str] = ["# Dashboard\n"]

    parts.append("## Overview")
    parts.extend(f"- **{stat.label}:** {stat.value}" for stat in summary.stats)

    step = summary.next_step
    parts.append(f"\n## Next Step: {step.title}")
    parts.append(step.description)

    if summary.insights:
        parts.append("\n## Insights")
        for insight in summary.insights:
            parts.append(f"- [{insight.priority}] **{insight.title}**: {insight.description}")

    parts.append("\n## Recent Resumes")
    if summary.recent_resumes:
        parts.extend(
            f"- {r.name} ({r.template}, {r.created_at:%Y-%m-%d})" for r in summary.recent_resumes
        )
    else:
        parts.append("- None yet")

    return "\n".join(parts)


def _bullets(items: list[str]) -> list[str]:
    return [f"  - {item}" for item in items if item]


def render_portfolio(portfolio: Portfolio) -> str:
    info = portfolio.personal_info
    summary = portfolio.professional_summary
    parts: list[str] = [f"# {info.name or 'Your Portfolio'}\n"]

    contact = [v for v in (info.email, info.phone, info.location) if v]
    if contact:
        parts.append(" | ".join(contact))
    links = [v for v in (info.linkedin, info.github, info.website, info.portfolio) if v]
    if links:
        parts.append(" | ".join(links))
    parts.append(f"\n**Completeness:** {portfolio.completeness}%")

    if summary.headline or summary.elevator_pitch:
        parts.append("\n## Summary")
        if summary.headline:
            parts.append(f"**{summary.headline}**")
        if summary.elevator_pitch:
            parts.append(summary.elevator_pitch)

    parts.append(f"\n## Experience ({len(portfolio.experiences)})")
    for exp in portfolio.experiences:
        end = "Present" if exp.is_current_role else (exp.end_date or "")
        parts.append(f"- **{exp.title}** at {exp.company} ({exp.start_date} - {end})")
        parts.extend(_bullets(exp.achievements))

    parts.append(f"\n## Projects ({len(portfolio.projects)})")
    for project in portfolio.projects:
        parts.append(f"- **{project.name}** ({project.kind})")
        if project.technologies:
            parts.append(f"  - Tech: {', '.join(project.technologies)}")
        parts.extend(_bullets(project.outcomes))

    parts.append(f"\n## Education ({len(portfolio.education)})")
    for edu in portfolio.education:
        gpa = f", GPA {edu.gpa}" if edu.gpa else ""
        parts.append(f"- **{edu.degree} in {edu.major}**, {edu.school}{gpa}")

    parts.append(f"\n## Skills ({len(portfolio.skills)})")
    if portfolio.skills:
        parts.extend(
            f"- {s.name} ({s.category}, {s.proficiency}, {s.years_of_experience:g} yrs)"
            for s in portfolio.skills
        )

    parts.append(f"\n## Achievements ({len(portfolio.achievements)})")
    for ach in portfolio.achievements:
        org = f" - {ach.organization}" if ach.organization else ""
        parts.append(f"- **{ach.title}** ({ach.kind}){org}")

    return "\n".join(parts)


def render_chat(messages: list[ChatMessage], phase_message: str, progress: float) -> str:
    parts: list[str] = ["# AI Discovery\n", f"*{phase_message}* ({progress:.0f}%)\n"]
    for message in messages:
        speaker = "You" if message.role is MessageRole.USER else "ZCV"
        parts.append(f"**{speaker}:** {message.content}\n")
    return "\n".join(parts)


def render_resume_generator(
    step: GeneratorStep,
    portfolio: Portfolio,
    role: str | None,
    template: str | None,
    selection: ContentSelection,
    templates: list[TemplateInfo],
) -> str:
    parts: list[str] = ["# Resume Generator\n", f"**Step:** {step}"]
    parts.append(f"- Role: {role or '(choose one)'}")
    parts.append(f"- Template: {template or '(choose one)'}")

    if step is GeneratorStep.TEMPLATE:
        parts.append("\n## Templates")
        for info in templates:
            parts.append(f"- `{info.id}` **{info.name}**: {info.description}")

    parts.append("\n## Selected Content")
    chosen = set(selection.experiences)
    parts.extend(
        f"- [{'x' if e.id in chosen else ' '}] {e.title} at {e.company}"
        for e in portfolio.experiences
    )
    chosen = set(selection.projects)
    parts.extend(
        f"- [{'x' if p.id in chosen else ' '}] {p.name}" for p in portfolio.projects
    )
    if selection.skills:
        parts.append(f"- Skills: {', '.join(selection.skills)}")
    return "\n".join(parts)


def render_resume_manager(resumes: list[GeneratedResume], selected: GeneratedResume | None) -> str:
    parts: list[str] = [f"# Resumes ({len(resumes)})\n"]
    if not resumes:
        parts.append("No resumes yet. Generate one from your portfolio.")
    for resume in resumes:
        target = resume.target_role or ""
        if resume.target_company:
            target = f"{target} @ {resume.target_company}"
        parts.append(
            f"- **{resume.name}** [{resume.kind}] {target} "
            f"({resume.template}, {resume.download_count} downloads)"
        )

    if selected is not None:
        parts.append(f"\n## {selected.name}")
        parts.append("```latex")
        parts.append(selected.latex)
        parts.append("```")
    return "\n".join(parts)
