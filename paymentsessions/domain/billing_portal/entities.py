from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict

from paymentsessions.domain.ids import CustomerId


class CreateBillingPortalParams(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    customer: Optional[CustomerId] = None
    return_url: Optional[str] = None


class BillingPortal(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    url: Optional[str] = None
    id: Optional[str] = None
    object: Optional[str] = None
    customer: Optional[str] = None
    return_url: Optional[str] = None
    created: Optional[int] = None
    livemode: Optional[bool] = None
