from __future__ import annotations

import logging

from fastapi.encoders import jsonable_encoder
from sqlalchemy.orm import Session
from starlette.responses import JSONResponse

from relaydesk.schemas.pricing import PricingOut
from relaydesk.services.pricing import InvalidPricingError, set_pricing, validate_pricing_values

logger = logging.getLogger("relaydesk.admin")


def update_pricing(body, db: Session) -> JSONResponse:
    """Store a new rupees/credits rate from a raw request body."""
    if not isinstance(body, dict):
        body = {}
    try:
        rupees, credits = validate_pricing_values(body.get("rupees"), body.get("credits"))
    except InvalidPricingError:
        return JSONResponse(status_code=400, content={"error": "Invalid pricing values"})

    try:
        pricing = set_pricing(db, rupees, credits)
    except Exception:
        db.rollback()
        logger.exception("Error setting pricing")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return JSONResponse(jsonable_encoder(PricingOut.model_validate(pricing)))
