from pydantic import BaseModel, Field


class PaymentIntentCreate(BaseModel):
    price: float = Field(..., ge=0)


class PaymentIntentOut(BaseModel):
    clientSecret: str
