"""Custom exception classes for the landing page content service.

This module defines application-specific exceptions following Google Python
Style Guide.
"""

from typing import Any


class LandingServiceError(Exception):
    """Base exception for all landing page content service errors."""

    pass


class RecordNotFoundError(LandingServiceError):
    """Raised when a record targeted by an update cannot be found."""

    def __init__(self, kind: str, record_id: Any):
        """Initialize the exception.

        Args:
            kind: The entity kind, e.g. "Landing page content".
            record_id: The ID that was not found.
        """
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with id {record_id} not found")


class ReferencedRecordNotFoundError(LandingServiceError):
    """Raised when a write references a foreign id that does not exist."""

    def __init__(self, kind: str, record_id: Any):
        """Initialize the exception.

        Args:
            kind: The referenced entity kind, e.g. "Category".
            record_id: The referenced ID that does not exist.
        """
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} with id {record_id} does not exist")


class DuplicateSlugError(LandingServiceError):
    """Raised when a write collides with an existing unique slug."""

    def __init__(self, kind: str, slug: str):
        """Initialize the exception.

        Args:
            kind: The entity kind owning the slug.
            slug: The slug that already exists.
        """
        self.kind = kind
        self.slug = slug
        super().__init__(f"{kind} with slug '{slug}' already exists")


class StoreError(LandingServiceError):
    """Raised when the underlying store fails (connectivity, query errors)."""

    pass
