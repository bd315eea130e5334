"""Target roles offered by the resume generator.

Each role carries the title shown to the user, a one-line description, and
the key skills the role is usually screened for.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RoleConfig:
    """Metadata associated with a target role."""

    id: str
    title: str
    description: str
    key_skills: tuple[str, ...]


ROLE_CATALOG: dict[str, RoleConfig] = {
    "software-engineer": RoleConfig(
        id="software-engineer",
        title="Software Engineer",
        description="Full-stack development, system design, and technical leadership",
        key_skills=("JavaScript", "React", "Python", "System Design"),
    ),
    "machine-learning-engineer": RoleConfig(
        id="machine-learning-engineer",
        title="Machine Learning Engineer",
        description="ML model development, deployment, and MLOps infrastructure",
        key_skills=("Python", "TensorFlow", "PyTorch", "MLOps"),
    ),
    "data-scientist": RoleConfig(
        id="data-scientist",
        title="Data Scientist",
        description="Data analysis, statistical modeling, and business insights",
        key_skills=("Python", "SQL", "Statistics", "Visualization"),
    ),
    "applied-scientist": RoleConfig(
        id="applied-scientist",
        title="Applied Scientist",
        description="Research-focused role combining science and engineering",
        key_skills=("Research", "ML", "Publications", "Prototyping"),
    ),
    "product-manager": RoleConfig(
        id="product-manager",
        title="Product Manager",
        description="Product strategy, roadmap planning, and cross-functional leadership",
        key_skills=("Strategy", "Analytics", "Leadership", "Communication"),
    ),
    "devops-engineer": RoleConfig(
        id="devops-engineer",
        title="DevOps Engineer",
        description="Infrastructure automation, CI/CD, and cloud architecture",
        key_skills=("AWS", "Docker", "Kubernetes", "CI/CD"),
    ),
}


def get_role(role: str) -> RoleConfig | None:
    """Look up a role by id or by its display title (case-insensitive).

    Args:
        role: Role id such as ``"data-scientist"`` or a title such as
            ``"Data Scientist"``.

    Returns:
        The matching RoleConfig, or None if the role is not in the catalog.
    """
    if role in ROLE_CATALOG:
        return ROLE_CATALOG[role]
    wanted = role.strip().lower()
    for config in ROLE_CATALOG.values():
        if config.title.lower() == wanted:
            return config
    return None


def list_roles() -> list[RoleConfig]:
    return list(ROLE_CATALOG.values())
