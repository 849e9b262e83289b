"""Landing page schema definitions.

This module defines the landing page content row, the request bodies that
create and update it, the three-state patch applied by updates, and the
aggregated document served to the front page.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from schemas.achievement import Achievement
from schemas.category import Category
from schemas.code_example import CodeExample
from schemas.course import Course
from schemas.enums import LandingPageSection
from schemas.limits import MAX_INTEGER, MIN_INTEGER


class LandingPageContent(BaseModel):
    """A content block for one landing page section."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    section: LandingPageSection
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    display_order: int
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateLandingPageContentRequest(BaseModel):
    section: LandingPageSection
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    display_order: int = Field(default=0, ge=MIN_INTEGER, le=MAX_INTEGER)
    is_active: bool = True


class _Unset:
    """Marker for a patch field the caller did not supply."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class LandingPageContentPatch:
    """Partial update for a landing page content row.

    Each field is in one of three states: ``UNSET`` (leave the stored value
    alone), ``None`` (clear a nullable column) or a value (overwrite).
    """

    section: Union[LandingPageSection, _Unset] = UNSET
    title: Union[Optional[str], _Unset] = UNSET
    subtitle: Union[Optional[str], _Unset] = UNSET
    content: Union[Optional[str], _Unset] = UNSET
    cta_text: Union[Optional[str], _Unset] = UNSET
    cta_link: Union[Optional[str], _Unset] = UNSET
    display_order: Union[int, _Unset] = UNSET
    is_active: Union[bool, _Unset] = UNSET

    def changes(self) -> Dict[str, Any]:
        """Return only the supplied fields, keyed by column name."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not UNSET
        }


# Columns that are NOT NULL in the store; a patch may omit them but not null them
NON_NULLABLE_PATCH_FIELDS = ("section", "display_order", "is_active")


class UpdateLandingPageContentRequest(BaseModel):
    """Request body for updateLandingPageContent.

    Omitted fields are left unchanged, explicit nulls clear nullable columns.
    """

    id: int = Field(ge=MIN_INTEGER, le=MAX_INTEGER)
    section: Optional[LandingPageSection] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    content: Optional[str] = None
    cta_text: Optional[str] = None
    cta_link: Optional[str] = None
    display_order: Optional[int] = Field(
        default=None, ge=MIN_INTEGER, le=MAX_INTEGER
    )
    is_active: Optional[bool] = None

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in NON_NULLABLE_PATCH_FIELDS:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def to_patch(self) -> LandingPageContentPatch:
        supplied = {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }
        return LandingPageContentPatch(**supplied)


class LandingPageData(BaseModel):
    """Everything the landing page needs, fetched in one call.

    Single-row sections are None when no active row exists; collections are
    empty lists. Serialized with camelCase keys for the front end.
    """

    model_config = ConfigDict(populate_by_name=True)

    hero: Optional[LandingPageContent] = None
    demo: Optional[LandingPageContent] = None
    featured_courses: List[Course] = Field(default_factory=list, alias="featuredCourses")
    categories: List[Category] = Field(default_factory=list)
    demo_code_examples: List[CodeExample] = Field(
        default_factory=list, alias="demoCodeExamples"
    )
    achievements: List[Achievement] = Field(default_factory=list)
    cta: Optional[LandingPageContent] = None
