from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class HttpResponse(BaseModel):
    """A fully read HTTP response.

    ``error`` is true whenever the connection exposed an error stream, which
    happens for every response with a status of 400 or above.
    """

    model_config = ConfigDict(validate_by_name=True, validate_by_alias=True)

    status: int = Field(alias="status")
    headers: Dict[str, str] = Field(default_factory=dict, alias="headers")
    url: str = Field(alias="url")
    data: Any = Field(default=None, alias="data")
    error: bool = Field(default=False, alias="error")


class DownloadResult(BaseModel):
    path: str = Field(alias="path", description="Absolute path of the written file")
