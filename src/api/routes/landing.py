"""Landing page procedures."""

from fastapi import APIRouter, HTTPException, status

from core.dependencies import LandingPageManagerDep
from core.exceptions import RecordNotFoundError
from schemas.landing_page import (
    CreateLandingPageContentRequest,
    LandingPageContent,
    LandingPageData,
    UpdateLandingPageContentRequest,
)

router = APIRouter(prefix="/rpc", tags=["Landing Page"])


@router.get(
    "/getLandingPageData",
    response_model=LandingPageData,
    summary="Landing page document",
)
def get_landing_page_data(manager: LandingPageManagerDep) -> LandingPageData:
    """Main endpoint for the front end: all sections in one call."""
    return manager.get_landing_page_data()


@router.post(
    "/createLandingPageContent",
    response_model=LandingPageContent,
    summary="Create a landing page content block",
)
def create_landing_page_content(
    req: CreateLandingPageContentRequest,
    manager: LandingPageManagerDep,
) -> LandingPageContent:
    model = manager.create_content(req)
    return LandingPageContent.model_validate(model)


@router.post(
    "/updateLandingPageContent",
    response_model=LandingPageContent,
    summary="Partially update a landing page content block",
)
def update_landing_page_content(
    req: UpdateLandingPageContentRequest,
    manager: LandingPageManagerDep,
) -> LandingPageContent:
    """Update only the fields present in the request body.

    Args:
        req: Row id plus any subset of the editable fields.
        manager: Injected LandingPageManager instance.

    Returns:
        The full updated row.

    Raises:
        HTTPException: 404 if the row does not exist.
    """
    try:
        model = manager.update_content(req.id, req.to_patch())
    except RecordNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
    return LandingPageContent.model_validate(model)
