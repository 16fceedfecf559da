"""Base service interface and the manager that holds configured services."""

import logging
from typing import Optional

from ..exceptions import ServiceError

logger = logging.getLogger(__name__)


class Service:
    """Base class for named services that tagdown depends on.

    Services are external collaborators (such as the DOM provider) that are
    configured once and looked up by name during conversion.
    """

    name: str = ""

    def get_name(self) -> str:
        """Return the name under which this service is configured."""
        return self.name


class ServiceManager:
    """Manage services keyed by name. A name can only be configured once."""

    def __init__(self):
        """Initialize an empty service manager."""
        self._services: dict[str, Service] = {}

    def set_service(self, name: str, service: Service) -> None:
        """Configure a service under a name.

        Args:
            name: Service name
            service: Service instance

        Raises:
            ServiceError: If a service is already configured with the same name
        """
        if name in self._services:
            raise ServiceError(f"Service is already configured: {name}", name=name)

        self._services[name] = service
        logger.debug(f"Configured {name} service: {service.__class__.__name__}")

    def get_service(self, name: str) -> Service:
        """Return the service configured under a name.

        Raises:
            ServiceError: If no service is configured with the name
        """
        service: Optional[Service] = self._services.get(name)
        if service is None:
            raise ServiceError(f"Service is not configured: {name}", name=name)
        return service

    def has_service(self, name: str) -> bool:
        """Check whether a service is configured under a name."""
        return name in self._services
