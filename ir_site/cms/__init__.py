"""
IR CMS integration.

    from ir_site.cms import CMSClient

    client = CMSClient("https://cms.example.com/api", api_token="...")
    content = await client.get_company_content("acme")
"""

from .client import CMSClient, USER_AGENT

__all__ = ["CMSClient", "USER_AGENT"]
