# Import all models so SQLAlchemy metadata is fully populated on startup.
from relaydesk.db.models.org import Org
from relaydesk.db.models.pricing import Pricing


__all__ = [
    "Org",
    "Pricing",
]
