"""Shared fixtures-as-functions for the ir_site tests."""

from ir_site.backend.component_data import DataPreparer
from ir_site.models import Company, ComponentData


class StaticPreparer(DataPreparer):
    """Returns canned base data and records every call."""

    def __init__(self, data: ComponentData | None = None):
        self.data = data
        self.calls: list[tuple[Company, bool]] = []

    async def prepare(self, company: Company, include_cms: bool = True) -> ComponentData:
        self.calls.append((company, include_cms))
        if self.data is not None:
            return self.data
        return ComponentData(company_name=company.name, ticker_symbol=company.ticker_symbol)


class FailingPreparer(DataPreparer):
    def __init__(self, exc: Exception):
        self.exc = exc

    async def prepare(self, company: Company, include_cms: bool = True) -> ComponentData:
        raise self.exc


def make_company(**overrides) -> Company:
    fields = {"id": "acme", "name": "Acme Corp"}
    fields.update(overrides)
    return Company(**fields)
