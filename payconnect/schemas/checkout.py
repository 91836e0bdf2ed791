from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class StartCheckoutRequest(BaseModel):
    # Presence of required fields is checked by CheckoutService so that a
    # missing field answers 400 like any other validation failure.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = Field(None, description="Customer email, informational only")
    phone: Optional[str] = Field(None, description="Paying MoMo number")
    recipient: Optional[str] = Field(None, description="Number receiving the data bundle")
    dataPlan: Optional[str] = Field(None, description='Plan label, may carry "(Express)" or "(Normal)"')
    amount: Optional[Union[float, str]] = None
    network: Optional[str] = Field(None, description="Mobile network code, e.g. MTN")


class CheckoutData(BaseModel):
    transaction_id: str
    amount: float
    phone: str
    status: str


class StartCheckoutResponse(BaseModel):
    ok: bool = True
    message: str = "Payment initiated successfully"
    data: CheckoutData
