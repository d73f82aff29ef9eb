import json
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .._utils.constants import DEFAULT_FILE_DIRECTORY, DEFAULT_UPLOAD_FIELD_NAME


class ResponseType(str, Enum):
    """How a response body should be interpreted.

    Mirrors the values of ``XMLHttpRequest.responseType``.
    """

    ARRAY_BUFFER = "arraybuffer"
    BLOB = "blob"
    DOCUMENT = "document"
    JSON = "json"
    TEXT = "text"

    @classmethod
    def parse_or_default(cls, value: Any) -> "ResponseType":
        """Parse ``value`` case-insensitively, falling back to ``TEXT``.

        >>> ResponseType.parse_or_default("JSON")
        <ResponseType.JSON: 'json'>
        >>> ResponseType.parse_or_default("unknown")
        <ResponseType.TEXT: 'text'>
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for response_type in cls:
                if response_type.value == value.lower():
                    return response_type
        return cls.TEXT


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class RequestOptions(BaseModel):
    """Options of a generic HTTP call, as handed over by the host bridge."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )

    url: str = Field(alias="url")
    method: str = Field(default="GET", alias="method")
    headers: Dict[str, str] = Field(default_factory=dict, alias="headers")
    params: Dict[str, Union[str, List[str]]] = Field(
        default_factory=dict, alias="params"
    )
    connect_timeout: Optional[int] = Field(
        default=None, alias="connectTimeout", ge=0, description="Milliseconds"
    )
    read_timeout: Optional[int] = Field(
        default=None, alias="readTimeout", ge=0, description="Milliseconds"
    )
    disable_redirects: Optional[bool] = Field(default=None, alias="disableRedirects")
    should_encode_params: bool = Field(default=True, alias="shouldEncodeUrlParams")
    response_type: ResponseType = Field(
        default=ResponseType.TEXT, alias="responseType"
    )
    data: Any = Field(default=None, alias="data")

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> Any:
        if value is None:
            return "GET"
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("headers", mode="before")
    @classmethod
    def _stringify_headers(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {str(k): _stringify(v) for k, v in value.items()}
        return value

    @field_validator("params", mode="before")
    @classmethod
    def _stringify_params(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                str(k): (
                    [_stringify(item) for item in v]
                    if isinstance(v, (list, tuple))
                    else _stringify(v)
                )
                for k, v in value.items()
            }
        return value

    @field_validator("response_type", mode="before")
    @classmethod
    def _parse_response_type(cls, value: Any) -> ResponseType:
        return ResponseType.parse_or_default(value)


class DownloadOptions(RequestOptions):
    """Options of a file download; the response body is written to ``file_path``."""

    file_path: str = Field(alias="filePath")
    file_directory: Optional[str] = Field(
        default=DEFAULT_FILE_DIRECTORY, alias="fileDirectory"
    )


class UploadOptions(RequestOptions):
    """Options of a file upload; the file at ``file_path`` becomes the request body.

    ``name`` and ``data`` are accepted for compatibility with multipart-style
    callers but are not sent.
    """

    method: str = Field(default="POST", alias="method")
    file_path: str = Field(alias="filePath")
    file_directory: Optional[str] = Field(
        default=DEFAULT_FILE_DIRECTORY, alias="fileDirectory"
    )
    name: str = Field(default=DEFAULT_UPLOAD_FIELD_NAME, alias="name")
