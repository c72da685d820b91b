"""Company profile settings."""

import logging

from bakery_pos.models.company import Company

logger = logging.getLogger(__name__)


class CompanySettings:
    def __init__(self, company: Company) -> None:
        self._company = company

    def get(self) -> Company:
        return self._company

    def update(self, **changes) -> Company:
        data = self._company.model_dump()
        data.update(changes)
        self._company = Company.model_validate(data)
        logger.info("Company settings updated: %s", ", ".join(sorted(changes)) or "no changes")
        return self._company
