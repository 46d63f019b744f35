from typing import List

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel
import logging

from dicebox_lib.services.resolver import resolve_service

router = APIRouter()
logger = logging.getLogger(__name__)


class RollPayload(BaseModel):
    indices: List[int] = []


@router.get('/dice')
async def api_dice_state(request: Request):
    store = resolve_service(request, 'dice_store')
    return store.get_snapshot()


@router.get('/dice/all')
async def api_dice_all(request: Request):
    strategy = resolve_service(request, 'strategy')
    return strategy.get_all_dice()


@router.post('/dice/roll')
async def api_dice_roll(request: Request, payload: RollPayload):
    if not payload.indices:
        raise HTTPException(status_code=400, detail={'error': 'empty_selection', 'message': 'Pick at least one die to roll'})
    strategy = resolve_service(request, 'strategy')
    results = strategy.roll_picked_dice(payload.indices)
    logger.debug("Roll request for %s produced %d result(s)", payload.indices, len(results))
    return {'results': results}
