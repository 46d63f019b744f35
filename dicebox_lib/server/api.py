from fastapi import APIRouter, Request
from dicebox_lib.config.health import get_health

router = APIRouter()


@router.get('/health')
async def api_health(request: Request):
    container = getattr(request.app.state, 'container', None)
    return get_health(container.keys() if container is not None else None)
