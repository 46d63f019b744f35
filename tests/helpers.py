from typing import Any
from starlette.testclient import TestClient
from dicebox_lib.services.container import ServiceRegistry


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's service registry for tests.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'dice_store', fake_store)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = ServiceRegistry()
        client.app.state.container = container

    container.register_instance(name, instance)

