from fastapi import APIRouter, Request, Depends
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from relaydesk.core.http import require
from relaydesk.db.session import get_db
from relaydesk.modules.admin import controller
from relaydesk.schemas.pricing import PricingOut
from relaydesk.services.pricing import get_pricing

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/pricing")
async def pricing_update(request: Request, db: Session = Depends(get_db)):
    try:
        body = await request.json()
    except ValueError:  # empty or malformed JSON
        body = None
    # The controller does blocking DB work
    return await run_in_threadpool(controller.update_pricing, body, db)


@router.get("/pricing", response_model=PricingOut)
def pricing_current(db: Session = Depends(get_db)):
    pricing = get_pricing(db)
    require(pricing is not None, "Pricing not configured", status_code=404)
    return pricing
