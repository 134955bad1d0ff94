from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from typing import List


class _ResponseModel(BaseModel):
    # Upstream may add fields at any time; keep them rather than reject
    model_config = ConfigDict(extra="allow")


class TransmissionResults(_ResponseModel):
    id: StrictStr
    total_accepted_recipients: StrictInt
    total_rejected_recipients: StrictInt


class TransmissionSuccess(_ResponseModel):
    results: TransmissionResults


class ApiErrorEntry(_ResponseModel):
    description: StrictStr
    code: StrictStr
    message: StrictStr


class TransmissionFailure(_ResponseModel):
    errors: List[ApiErrorEntry] = Field(min_length=1)
