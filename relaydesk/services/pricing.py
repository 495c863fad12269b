from __future__ import annotations

import json
import logging
import math
from datetime import datetime

from sqlalchemy.orm import Session

from relaydesk.core.config import settings
from relaydesk.core.redis import get_redis
from relaydesk.db.models.pricing import Pricing

logger = logging.getLogger("relaydesk.pricing")

# Readers cache under the generation they saw before querying; a writer bumps
# the generation, so a row fetched before the bump can never be served after it.
_GEN_KEY = "pricing:gen"


def _cache_key(gen) -> str:
    return f"pricing:active:{gen or 0}"


class PricingError(Exception):
    pass


class InvalidPricingError(PricingError):
    pass


def _positive_number(value) -> float:
    # bool is an int subclass; "true" is not a price
    if not value or isinstance(value, bool):
        raise InvalidPricingError("missing value")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidPricingError(f"not a number: {value!r}") from exc
    if not math.isfinite(number) or number <= 0:
        raise InvalidPricingError(f"must be a positive number: {value!r}")
    return number


def validate_pricing_values(rupees, credits) -> tuple[float, float]:
    """Return (rupees, credits) as floats or raise InvalidPricingError.

    Numeric strings are accepted ("5" -> 5.0); missing, zero, negative,
    boolean, NaN and infinite values are not.
    """
    return _positive_number(rupees), _positive_number(credits)


def _to_cache(p: Pricing) -> str:
    return json.dumps(
        {
            "id": p.id,
            "rupees": p.rupees,
            "credits": p.credits,
            "created_at": p.created_at.isoformat(),
            "updated_at": p.updated_at.isoformat(),
        }
    )


def _from_cache(raw: str) -> Pricing:
    d = json.loads(raw)
    return Pricing(
        id=d["id"],
        rupees=d["rupees"],
        credits=d["credits"],
        created_at=datetime.fromisoformat(d["created_at"]),
        updated_at=datetime.fromisoformat(d["updated_at"]),
    )


def init_pricing_table(db: Session) -> bool:
    """Seed the default price when the table is empty. Returns True if seeded."""
    if db.query(Pricing).count() > 0:
        logger.info("Pricing already initialized")
        return False

    db.add(Pricing(rupees=settings.DEFAULT_PRICING_RUPEES, credits=settings.DEFAULT_PRICING_CREDITS))
    db.commit()
    invalidate_pricing_cache()
    logger.info(
        "Default pricing seeded (%s INR = %s credits)",
        settings.DEFAULT_PRICING_RUPEES,
        settings.DEFAULT_PRICING_CREDITS,
    )
    return True


def get_pricing(db: Session) -> Pricing | None:
    """Latest pricing row (cached with Redis TTL if available).

    A cached hit is a detached Pricing instance, not bound to `db`.
    """
    r = get_redis()
    key = None
    if r is not None:
        try:
            key = _cache_key(r.get(_GEN_KEY))
            raw = r.get(key)
            if raw is not None:
                return _from_cache(raw)
        except Exception as exc:
            logger.warning("Pricing cache read failed: %s", exc)

    p = db.query(Pricing).order_by(Pricing.created_at.desc(), Pricing.id.desc()).first()

    if p is not None and key is not None:
        try:
            r.setex(key, settings.PRICING_CACHE_TTL_SECONDS, _to_cache(p))
        except Exception as exc:
            logger.warning("Pricing cache write failed: %s", exc)
    return p


def set_pricing(db: Session, rupees: float, credits: float) -> Pricing:
    """Insert a new active price. Older rows are kept as history."""
    p = Pricing(rupees=rupees, credits=credits)
    db.add(p)
    db.commit()
    db.refresh(p)
    invalidate_pricing_cache()
    logger.info("Pricing set to %s INR = %s credits", rupees, credits)
    return p


def invalidate_pricing_cache() -> None:
    r = get_redis()
    if r is None:
        return
    try:
        r.incr(_GEN_KEY)
    except Exception as exc:
        logger.warning("Pricing cache invalidation failed: %s", exc)


def credits_for_amount(amount: float, pricing: Pricing) -> int:
    credits = (amount / pricing.rupees) * pricing.credits
    if not math.isfinite(credits):
        raise InvalidPricingError(f"credits for {amount!r} out of range")
    return math.floor(credits)
