from __future__ import annotations

from abc import ABC, abstractmethod

from salon.application.utils.duration_aggregator import catalog_by_id
from salon.domain.entities.service import Service
from salon.domain.entities.session import Session


class ServiceCatalogPort(ABC):
    @abstractmethod
    def list_services(self, session: Session) -> list[Service]:
        """List every service offered by the session's salon."""
        raise NotImplementedError

    def get_catalog(self, session: Session) -> dict[str, Service]:
        """Services keyed by id."""
        return catalog_by_id(self.list_services(session))
