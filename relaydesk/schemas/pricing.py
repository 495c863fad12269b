from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PricingOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    rupees: float
    credits: float
    created_at: datetime
    updated_at: datetime


class QuoteOut(BaseModel):
    amount: float
    credits: int
    amount_in_paise: int
