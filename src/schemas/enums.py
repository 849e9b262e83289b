"""Closed enumerations shared by the ORM models and the API schemas."""

from enum import Enum


class Language(str, Enum):
    """Backend language a course or code example targets."""

    NODEJS = "nodejs"
    PYTHON = "python"
    CSHARP = "csharp"


class DifficultyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class AchievementCategory(str, Enum):
    COMPLETION = "completion"
    STREAK = "streak"
    CHALLENGE = "challenge"
    MILESTONE = "milestone"


class LandingPageSection(str, Enum):
    """Landing page region a content row belongs to."""

    HERO = "hero"
    DEMO = "demo"
    COURSES = "courses"
    FEATURES = "features"
    CTA = "cta"
