import math

from fastapi import APIRouter, Request, Depends
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool
from starlette.responses import JSONResponse

from relaydesk.db.session import get_db
from relaydesk.schemas.pricing import QuoteOut
from relaydesk.services.pricing import InvalidPricingError, credits_for_amount, get_pricing

router = APIRouter(prefix="/api/payment", tags=["payment"])


def _amount(body) -> float | None:
    value = body.get("amount") if isinstance(body, dict) else None
    if value is None or isinstance(value, bool):
        return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    # amount_in_paise has to stay finite too
    if not math.isfinite(amount * 100) or amount <= 0:
        return None
    return amount


def _quote(body, db: Session):
    amount = _amount(body)
    if amount is None:
        return JSONResponse(status_code=400, content={"error": "Invalid amount"})

    pricing = get_pricing(db)
    if pricing is None:
        return JSONResponse(status_code=500, content={"error": "Pricing not configured"})

    try:
        credits = credits_for_amount(amount, pricing)
    except InvalidPricingError:
        return JSONResponse(status_code=400, content={"error": "Invalid amount"})
    if credits <= 0:
        return JSONResponse(status_code=400, content={"error": "Amount is too low to purchase any credits"})

    return QuoteOut(amount=amount, credits=credits, amount_in_paise=round(amount * 100))


@router.post("/quote", response_model=QuoteOut)
async def quote(request: Request, db: Session = Depends(get_db)):
    """How many credits a top-up of `amount` rupees buys at the active price."""
    try:
        body = await request.json()
    except ValueError:  # empty or malformed JSON
        body = None
    return await run_in_threadpool(_quote, body, db)
