"""Canned job-description analysis returned by the tailoring flow."""

from __future__ import annotations

JD_KEYWORDS: tuple[str, ...] = (
    "React",
    "Node.js",
    "TypeScript",
    "AWS",
    "Microservices",
    "Agile",
)

JD_REQUIREMENTS: tuple[str, ...] = (
    "5+ years of full-stack development experience",
    "Strong proficiency in React and Node.js",
    "Experience with cloud platforms (AWS/Azure)",
    "Knowledge of microservices architecture",
    "Excellent problem-solving skills",
)

JD_SUGGESTIONS: tuple[str, ...] = (
    "Emphasize your React and Node.js project experience",
    "Highlight cloud platform usage experience",
    "Showcase microservices architecture projects",
    "Quantify your technical achievements and impact",
)

DEFAULT_COMPANY = "Target Company"
DEFAULT_POSITION = "Target Position"
