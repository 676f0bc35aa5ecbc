from pydantic import BaseModel, Field


class PaymentIntentRequest(BaseModel):
    cost: float = Field(..., ge=0, allow_inf_nan=False, description="Amount in major currency units")


class PaymentIntentResponse(BaseModel):
    clientSecret: str
