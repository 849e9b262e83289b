from datetime import datetime, timedelta

import pytest

from core.exceptions import DuplicateSlugError, ReferencedRecordNotFoundError
from models.course import CourseModel
from schemas.category import CreateCategoryRequest
from schemas.course import Course, CreateCourseRequest
from schemas.enums import DifficultyLevel, Language
from tests.factories import category_payload, course_payload
from utils.category_manager import CategoryManager
from utils.course_manager import CourseManager


@pytest.fixture()
def category(db_session):
    return CategoryManager(db_session).create_category(
        CreateCategoryRequest(**category_payload())
    )


def test_create_course(db_session, category):
    model = CourseManager(db_session).create_course(
        CreateCourseRequest(**course_payload(category.id))
    )

    assert model.id is not None
    assert model.category_id == category.id
    assert model.language == Language.PYTHON
    assert model.difficulty_level == DifficultyLevel.INTERMEDIATE
    assert model.estimated_duration == 600
    assert model.is_featured is True
    assert model.is_published is True


def test_create_course_defaults_to_unpublished(db_session, category):
    payload = course_payload(category.id)
    del payload["is_featured"]
    del payload["is_published"]

    model = CourseManager(db_session).create_course(CreateCourseRequest(**payload))

    assert model.is_featured is False
    assert model.is_published is False


def test_create_course_missing_category(db_session):
    manager = CourseManager(db_session)

    with pytest.raises(ReferencedRecordNotFoundError) as excinfo:
        manager.create_course(CreateCourseRequest(**course_payload(999)))

    assert excinfo.value.kind == "Category"
    assert excinfo.value.record_id == 999
    assert "999" in str(excinfo.value)
    assert db_session.query(CourseModel).count() == 0


def test_create_course_duplicate_slug(db_session, category):
    manager = CourseManager(db_session)
    manager.create_course(CreateCourseRequest(**course_payload(category.id)))

    with pytest.raises(DuplicateSlugError):
        manager.create_course(
            CreateCourseRequest(**course_payload(category.id, title="Other"))
        )

    assert db_session.query(CourseModel).count() == 1


def test_featured_courses_filter_and_order(db_session, category):
    manager = CourseManager(db_session)
    base = datetime(2024, 1, 1)
    flags = {
        "older": (True, True, base),
        "newer": (True, True, base + timedelta(days=2)),
        "draft": (True, False, base + timedelta(days=3)),
        "plain": (False, True, base + timedelta(days=4)),
    }
    for slug, (featured, published, updated_at) in flags.items():
        model = manager.create_course(
            CreateCourseRequest(
                **course_payload(
                    category.id,
                    slug=slug,
                    title=slug,
                    is_featured=featured,
                    is_published=published,
                )
            )
        )
        model.updated_at = updated_at
    db_session.commit()

    slugs = [c.slug for c in manager.list_featured_courses()]

    assert slugs == ["newer", "older"]


def test_featured_course_round_trip(db_session, category):
    payload = course_payload(category.id)
    manager = CourseManager(db_session)
    manager.create_course(CreateCourseRequest(**payload))

    (listed,) = manager.list_featured_courses()
    dumped = Course.model_validate(listed).model_dump(mode="json")

    for key, value in payload.items():
        assert dumped[key] == value


def test_course_unique_constraint_backs_up_slug_lookup(db_session, category, monkeypatch):
    manager = CourseManager(db_session)
    manager.create_course(CreateCourseRequest(**course_payload(category.id)))
    monkeypatch.setattr(CourseManager, "_slug_taken", lambda self, slug: False)

    with pytest.raises(DuplicateSlugError) as excinfo:
        manager.create_course(
            CreateCourseRequest(**course_payload(category.id, title="Other"))
        )

    assert excinfo.value.kind == "Course"
    assert db_session.query(CourseModel).count() == 1


def test_new_course_timestamps_are_equal(db_session, category):
    model = CourseManager(db_session).create_course(
        CreateCourseRequest(**course_payload(category.id))
    )

    assert model.created_at == model.updated_at
