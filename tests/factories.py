"""Builders for valid request payloads used across tests."""

from typing import Any, Dict


def category_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "Backend Development",
        "slug": "backend-development",
        "description": "Server-side programming",
        "icon": "server",
        "color": "#fabd2f",
    }
    payload.update(overrides)
    return payload


def course_payload(category_id: int, **overrides: Any) -> Dict[str, Any]:
    payload = {
        "category_id": category_id,
        "title": "Python FastAPI Masterclass",
        "slug": "python-fastapi-masterclass",
        "description": "Master modern Python web development with FastAPI.",
        "short_description": "High-performance APIs with Python",
        "language": "python",
        "difficulty_level": "intermediate",
        "estimated_duration": 600,
        "is_featured": True,
        "is_published": True,
        "thumbnail_url": None,
    }
    payload.update(overrides)
    return payload


def code_example_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "course_id": None,
        "title": "Hello World",
        "description": "A first program",
        "language": "nodejs",
        "code_content": "console.log('Hello, World!');",
        "expected_output": "Hello, World!",
        "is_demo": True,
        "difficulty_level": "beginner",
    }
    payload.update(overrides)
    return payload


def achievement_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "name": "First Steps",
        "description": "Complete your first lesson",
        "icon": "footprints",
        "badge_color": "#b8bb26",
        "points_required": 10,
        "category": "completion",
        "is_active": True,
    }
    payload.update(overrides)
    return payload


def landing_content_payload(**overrides: Any) -> Dict[str, Any]:
    payload = {
        "section": "hero",
        "title": "Learn Backend Development",
        "subtitle": "Node.js, Python and C#",
        "content": "Interactive courses for backend engineers.",
        "cta_text": "Start Learning",
        "cta_link": "/courses",
        "display_order": 1,
        "is_active": True,
    }
    payload.update(overrides)
    return payload
