"""Badge rule table and the engine that evaluates it.

Badges are awarded using fixed threshold rules on aggregate skill statistics:
  - average level (Well-Rounded, Mastermind)
  - number of skills at level 5 / >= 4 / >= 3
  - number of skills tracked

Each rule is evaluated independently, so a collection may earn any subset of
the catalog. Output follows catalog order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Union

from skillboard.integrations.contracts.skills import Badge, Level, Skill, coerce_level

SkillLike = Union[Skill, Mapping[str, Any]]


@dataclass(frozen=True)
class SkillStats:
    total: int
    avg: float
    count5: int
    count4: int
    count3: int


@dataclass(frozen=True)
class BadgeRule:
    id: str
    name: str
    description: str
    # SkillStats attribute compared against threshold with >=
    metric: str
    threshold: float

    def is_met(self, stats: SkillStats) -> bool:
        return getattr(stats, self.metric) >= self.threshold

    def to_badge(self) -> Badge:
        return Badge(id=self.id, name=self.name, description=self.description)


BADGE_RULES: List[BadgeRule] = [
    BadgeRule("b1", "Well-Rounded", "Average ≥ 3.5", "avg", 3.5),
    BadgeRule("b2", "Mastermind", "Average ≥ 4.5", "avg", 4.5),
    BadgeRule("b3", "Expert Trio", "3+ skills at level 5", "count5", 3),
    BadgeRule("b4", "Perfectionist", "5+ skills at level 5", "count5", 5),
    BadgeRule("b5", "Climber", "5+ skills at level ≥ 4", "count4", 5),
    BadgeRule("b6", "High Achiever", "8+ skills at level ≥ 4", "count4", 8),
    BadgeRule("b7", "Persistent", "8+ skills tracked", "total", 8),
    BadgeRule("b8", "Generalist", "10+ skills tracked", "total", 10),
    BadgeRule("b9", "Marathon", "15+ skills tracked", "total", 15),
    BadgeRule("b10", "Steady Growth", "6+ skills at level ≥ 3", "count3", 6),
]


def _level_of(skill: SkillLike) -> Level:
    if isinstance(skill, Skill):
        return skill.level
    return coerce_level(skill.get("level"))


def compute_skill_stats(skills: Iterable[SkillLike]) -> SkillStats:
    levels = [_level_of(skill) for skill in skills]
    total = len(levels)
    return SkillStats(
        total=total,
        avg=sum(levels) / total if total else 0.0,
        count5=sum(1 for n in levels if n >= 5),
        count4=sum(1 for n in levels if n >= 4),
        count3=sum(1 for n in levels if n >= 3),
    )


def compute_badges(skills: Iterable[SkillLike]) -> List[Badge]:
    """
    Derive the earned badges for a skill collection.

    Args:
        skills: Skill models or plain mappings with a "level" key. Not mutated.

    Returns:
        List[Badge]: earned badges in catalog order.
    """
    stats = compute_skill_stats(skills)
    return [rule.to_badge() for rule in BADGE_RULES if rule.is_met(stats)]
