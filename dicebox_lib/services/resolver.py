from typing import Any
from fastapi import HTTPException
from starlette.requests import Request

from dicebox_lib.services.container import ServiceNotFoundError


def resolve_service(request: Request, name: str) -> Any:
    """Resolve a named service from the application's service registry.

    Requires that `app.state.container` exists and that `name` and every
    service it depends on are registered, otherwise an HTTP 500 naming the
    missing key is raised. Other errors raised while a factory runs
    propagate unchanged.
    """
    container = getattr(request.app.state, 'container', None)
    if container is None:
        raise HTTPException(status_code=500, detail="Service container not configured")
    try:
        return container.get(name)
    except ServiceNotFoundError as exc:
        raise HTTPException(status_code=500, detail=f"Service '{exc.key}' not configured")
