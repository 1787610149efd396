"""Badge catalog and derivation engine."""

from .engine import BADGE_RULES, BadgeRule, SkillStats, compute_badges, compute_skill_stats

__all__ = [
    "BADGE_RULES",
    "BadgeRule",
    "SkillStats",
    "compute_badges",
    "compute_skill_stats",
]
