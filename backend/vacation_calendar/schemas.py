from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional, Literal, Union


class APIError(BaseModel):
    detail: Any
    code: str = "error"


class HealthProviderStatus(BaseModel):
    name: str
    status: Literal["up", "degraded", "down"]
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: Literal["up", "degraded", "down"]
    providers: List[HealthProviderStatus]


class ProviderResponse(BaseModel):
    """
    Upstream JSON document, relayed to the caller untouched. The client only
    checks that `body` decodes as JSON.
    """
    model_config = ConfigDict(frozen=True)

    body: bytes


class UpstreamFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    reason: Literal["network", "status", "decode"]
    detail: str
    status_code: Optional[int] = None


UpstreamResult = Union[ProviderResponse, UpstreamFailure]
