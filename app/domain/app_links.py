"""
app/domain/app_links.py

Public links for a published event app.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote, urlencode

from app.config import AppLinkSettings


@dataclass(frozen=True)
class AppLinks:
    app_url: str
    qr_code_url: str


def build_app_links(event_id: str, settings: AppLinkSettings) -> AppLinks:
    """
    Build the attendee-facing app URL and a QR image URL that encodes it.
    """

    app_url = f"{settings.public_base_url.rstrip('/')}/events/{quote(str(event_id), safe='')}"
    query = urlencode(
        {
            "size": f"{settings.qr_code_size}x{settings.qr_code_size}",
            "data": app_url,
        },
        quote_via=quote,
    )
    return AppLinks(app_url=app_url, qr_code_url=f"{settings.qr_code_service_url}?{query}")
