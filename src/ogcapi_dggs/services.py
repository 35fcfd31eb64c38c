from typing import Iterable, List, Union

import attrs


@attrs.frozen
class ServiceInfo:
    id: str
    enabled: bool = True


class ServiceRegistry:
    """
    Registry of the services (e.g. "WMS", "WFS") deployed next to the DGGS API,
    to decide which optional capabilities (like map previews) can be advertised.
    """

    def __init__(self, services: Iterable[Union[str, ServiceInfo]] = ()):
        self._services: List[ServiceInfo] = [ServiceInfo(id=s) if isinstance(s, str) else s for s in services]

    def __repr__(self):
        return f"<{type(self).__name__} {[s.id for s in self._services]}>"

    def is_available(self, service_id: str) -> bool:
        return any(s.id == service_id and s.enabled for s in self._services)
