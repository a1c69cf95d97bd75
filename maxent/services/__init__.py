"""
Service layer: one MaxentService per HTTP-exposed capability.

A service turns a JSON request body into validated inputs for the
numerical package (validate), runs it (compute) and mounts its own
endpoints on the /api blueprint (register_routes). The registry keeps
the services in registration order so /api/services lists them the
same way every time.

IMPORTANT: No unicode characters allowed (Windows charmap constraint).
"""

from abc import ABC, abstractmethod


class MaxentService(ABC):
    """
    Base class for the default-model and frequency-grid services.

    Class Attributes
    ----------------
    id : str
        Registry key, e.g. "grid".
    name : str
        Display name in the /api/services listing.
    description : str
        One line describing what the endpoints compute.
    route : str
        URL prefix of the endpoints, e.g. "/api/grid".
    """

    id = ""
    name = ""
    description = ""
    route = ""

    @abstractmethod
    def validate(self, config):
        """
        Turn a request body into the inputs of compute().

        Raises
        ------
        ValueError
            ConfigError, DataError or DomainError for a bad body; the
            routes answer these with 400.
        """

    @abstractmethod
    def compute(self, config):
        """Evaluate validated inputs; returns a JSON-serializable dict."""

    @abstractmethod
    def register_routes(self, blueprint):
        """Mount the service endpoints on the /api blueprint."""

    def metadata(self):
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "route": self.route,
        }


class MaxentRegistry:
    """Ordered collection of services, keyed by service id."""

    def __init__(self):
        self._services = {}

    def register(self, service):
        """
        Add ``service``.

        Raises
        ------
        ValueError
            If a service with the same id is already registered.
        """
        if service.id in self._services:
            raise ValueError(
                "Service '{}' is already registered".format(service.id)
            )
        self._services[service.id] = service

    def __iter__(self):
        return iter(self._services.values())

    def __len__(self):
        return len(self._services)

    def list_all(self):
        """Metadata of every service, in registration order."""
        return [s.metadata() for s in self]
