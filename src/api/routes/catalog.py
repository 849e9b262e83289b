"""Course catalog procedures: categories, courses and code examples."""

from typing import List

from fastapi import APIRouter, HTTPException, status

from core.dependencies import CategoryManagerDep, CodeExampleManagerDep, CourseManagerDep
from core.exceptions import DuplicateSlugError, ReferencedRecordNotFoundError
from schemas.category import Category, CreateCategoryRequest
from schemas.code_example import CodeExample, CreateCodeExampleRequest
from schemas.course import Course, CreateCourseRequest

router = APIRouter(prefix="/rpc", tags=["Catalog"])


@router.get("/getCategories", response_model=List[Category], summary="List categories")
def get_categories(manager: CategoryManagerDep) -> List[Category]:
    return [Category.model_validate(m) for m in manager.list_categories()]


@router.get(
    "/getFeaturedCourses",
    response_model=List[Course],
    summary="List featured published courses",
)
def get_featured_courses(manager: CourseManagerDep) -> List[Course]:
    return [Course.model_validate(m) for m in manager.list_featured_courses()]


@router.get(
    "/getDemoCodeExamples",
    response_model=List[CodeExample],
    summary="List demo code examples",
)
def get_demo_code_examples(manager: CodeExampleManagerDep) -> List[CodeExample]:
    return [CodeExample.model_validate(m) for m in manager.list_demo_code_examples()]


@router.post("/createCategory", response_model=Category, summary="Create a category")
def create_category(req: CreateCategoryRequest, manager: CategoryManagerDep) -> Category:
    try:
        model = manager.create_category(req)
    except DuplicateSlugError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        )
    return Category.model_validate(model)


@router.post("/createCourse", response_model=Course, summary="Create a course")
def create_course(req: CreateCourseRequest, manager: CourseManagerDep) -> Course:
    try:
        model = manager.create_course(req)
    except ReferencedRecordNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
    except DuplicateSlugError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exc),
        )
    return Course.model_validate(model)


@router.post(
    "/createCodeExample",
    response_model=CodeExample,
    summary="Create a code example",
)
def create_code_example(
    req: CreateCodeExampleRequest, manager: CodeExampleManagerDep
) -> CodeExample:
    try:
        model = manager.create_code_example(req)
    except ReferencedRecordNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        )
    return CodeExample.model_validate(model)
