"""
IR CMS Client

Fetches per-company investor-relations content (KPIs, filings, earnings,
leadership bios, governance documents, contact details) from the headless
CMS. Content keys the renderer does not know about are passed through.

Endpoint:
    GET {base_url}/companies/{company_id}/content
"""

import logging
from typing import Dict, Any, Optional

import httpx

from ..config import Settings
from ..errors import CMSFetchError

logger = logging.getLogger(__name__)

USER_AGENT = "IRSiteRenderer/1.0"


class CMSClient:
    """Client for the IR content CMS."""

    def __init__(
        self,
        base_url: str,
        api_token: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if api_token:
            self.headers["Authorization"] = f"Bearer {api_token}"
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings) -> Optional["CMSClient"]:
        """Build a client from settings, or None when no CMS is configured."""
        if not settings.cms_enabled:
            return None
        return cls(
            base_url=settings.cms_base_url,
            api_token=settings.cms_api_token,
            timeout=settings.cms_timeout,
        )

    def content_url(self, company_id: str) -> str:
        return f"{self.base_url}/companies/{company_id}/content"

    async def get_company_content(self, company_id: str) -> Dict[str, Any]:
        """
        Fetch CMS content for a company.

        Raises:
            CMSFetchError: on transport failures, non-2xx responses, or a
                body that is not a JSON object.
        """
        url = self.content_url(company_id)

        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            try:
                resp = await client.get(url, headers=self.headers)
                resp.raise_for_status()
                data = resp.json()
            except httpx.HTTPStatusError as e:
                raise CMSFetchError(
                    f"CMS returned {e.response.status_code} for company {company_id}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise CMSFetchError(f"CMS request failed for company {company_id}: {e}") from e
            except ValueError as e:
                raise CMSFetchError(f"CMS sent invalid JSON for company {company_id}") from e

        if not isinstance(data, dict):
            raise CMSFetchError(f"CMS content for company {company_id} is not an object")

        logger.info(f"Fetched CMS content for company {company_id}: {sorted(data.keys())}")
        return data
