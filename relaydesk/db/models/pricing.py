from sqlalchemy import Float, Integer
from sqlalchemy.orm import Mapped, mapped_column
from relaydesk.db.base import Base, TimestampMixin


class Pricing(TimestampMixin, Base):
    """Rupees-to-credits conversion rate.

    Rows are never updated in place: each admin change inserts a new row and
    the newest one is the active price.
    """

    __tablename__ = "pricing"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    rupees: Mapped[float] = mapped_column(Float, nullable=False)
    credits: Mapped[float] = mapped_column(Float, nullable=False)
