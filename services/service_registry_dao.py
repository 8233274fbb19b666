"""
Storage contract for service registry backends.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Union

from services.registered_service import RegisteredService


class ServiceRegistryDao(ABC):
    """Abstract storage backend consumed by the service registry."""

    @abstractmethod
    def save(self, service: RegisteredService) -> RegisteredService:
        """Persist a service and return the stored record."""
        ...

    @abstractmethod
    def delete(self, service: RegisteredService) -> bool:
        """Remove a service; False when it was not stored."""
        ...

    @abstractmethod
    def find_service_by_id(self, service_id: Union[int, str]) -> Optional[RegisteredService]:
        """Look a service up by numeric id, or by service identifier pattern."""
        ...

    @abstractmethod
    def load(self) -> List[RegisteredService]:
        """Return every stored service."""
        ...

    @abstractmethod
    def size(self) -> int:
        """Return the number of stored services."""
        ...
