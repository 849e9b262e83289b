"""Store failures surface as opaque 500s."""

from sqlalchemy.exc import OperationalError

from core.exceptions import StoreError
from utils.landing_page_manager import LandingPageManager


def test_store_failure_returns_opaque_error(client, monkeypatch):
    def fail(self):
        raise StoreError("Landing page data fetch failed") from OperationalError(
            "SELECT", {}, Exception("connection refused")
        )

    monkeypatch.setattr(LandingPageManager, "get_landing_page_data", fail)

    response = client.get("/rpc/getLandingPageData")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}
