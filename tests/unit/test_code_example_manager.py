from datetime import datetime, timedelta

import pytest

from core.exceptions import ReferencedRecordNotFoundError
from models.code_example import CodeExampleModel
from schemas.category import CreateCategoryRequest
from schemas.code_example import CreateCodeExampleRequest
from schemas.course import CreateCourseRequest
from tests.factories import category_payload, code_example_payload, course_payload
from utils.category_manager import CategoryManager
from utils.code_example_manager import CodeExampleManager
from utils.course_manager import CourseManager


def test_create_standalone_code_example(db_session):
    model = CodeExampleManager(db_session).create_code_example(
        CreateCodeExampleRequest(**code_example_payload())
    )

    assert model.id is not None
    assert model.course_id is None
    assert model.is_demo is True


def test_create_code_example_for_existing_course(db_session):
    category = CategoryManager(db_session).create_category(
        CreateCategoryRequest(**category_payload())
    )
    course = CourseManager(db_session).create_course(
        CreateCourseRequest(**course_payload(category.id))
    )

    model = CodeExampleManager(db_session).create_code_example(
        CreateCodeExampleRequest(**code_example_payload(course_id=course.id))
    )

    assert model.course_id == course.id


def test_create_code_example_missing_course(db_session):
    manager = CodeExampleManager(db_session)

    with pytest.raises(ReferencedRecordNotFoundError) as excinfo:
        manager.create_code_example(
            CreateCodeExampleRequest(**code_example_payload(course_id=42))
        )

    assert excinfo.value.kind == "Course"
    assert excinfo.value.record_id == 42
    assert db_session.query(CodeExampleModel).count() == 0


def test_demo_examples_newest_first_and_exclude_non_demo(db_session):
    manager = CodeExampleManager(db_session)
    base = datetime(2024, 3, 1)
    first = manager.create_code_example(
        CreateCodeExampleRequest(**code_example_payload(title="first"))
    )
    second = manager.create_code_example(
        CreateCodeExampleRequest(**code_example_payload(title="second"))
    )
    hidden = manager.create_code_example(
        CreateCodeExampleRequest(**code_example_payload(title="second", is_demo=False))
    )
    first.created_at = base
    second.created_at = base + timedelta(hours=1)
    hidden.created_at = base + timedelta(hours=2)
    db_session.commit()

    listed = manager.list_demo_code_examples()

    assert [e.id for e in listed] == [second.id, first.id]
    assert hidden.id not in [e.id for e in listed]
