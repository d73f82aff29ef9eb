import asyncio
from logging import getLogger
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from .._config import Config
from .._utils._files import resolve_file
from ..models import (
    DownloadOptions,
    DownloadResult,
    HttpResponse,
    RequestOptions,
    UploadOptions,
)
from ..tracing import traced
from .download_service import ProgressCallback, download_file
from .request_service import execute_request
from .upload_service import upload_file

FileResolver = Callable[[str, Optional[str]], Path]


class HttpService:
    """Entry point for hosts handing over call descriptors.

    A call descriptor is a mapping with the keys of a JavaScript ``HttpOptions``
    object (``url``, ``method``, ``headers``, ``params``, ``connectTimeout``,
    ``readTimeout``, ``disableRedirects``, ``shouldEncodeUrlParams``,
    ``responseType``, ``data``, and for files ``filePath``, ``fileDirectory``
    and ``name``).

    Every call is synchronous and owns its connection. The ``*_async``
    variants run the same call on a worker thread.

    Examples:
        >>> http = HttpService()
        >>> response = http.get({"url": "https://example.com", "responseType": "json"})
        >>> response.status
        200
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        file_resolver: Optional[FileResolver] = None,
    ) -> None:
        self._logger = getLogger("httpbridge")
        self._config = config or Config()
        self._file_resolver = file_resolver or self._resolve_file

    @property
    def config(self) -> Config:
        return self._config

    @traced(name="http_request", run_type="httpbridge")
    def request(
        self, call: Mapping[str, Any], method: Optional[str] = None
    ) -> HttpResponse:
        """Perform the request described by ``call``.

        Args:
            call: The call descriptor.
            method: Overrides the descriptor's method when given.
        """
        options = RequestOptions.model_validate(call)
        if method is not None:
            options = options.model_copy(update={"method": method.upper()})
        self._logger.debug(f"Request: {options.method} {options.url}")
        return execute_request(options, settings=self._config)

    def get(self, call: Mapping[str, Any]) -> HttpResponse:
        return self.request(call, "GET")

    def post(self, call: Mapping[str, Any]) -> HttpResponse:
        return self.request(call, "POST")

    def put(self, call: Mapping[str, Any]) -> HttpResponse:
        return self.request(call, "PUT")

    def patch(self, call: Mapping[str, Any]) -> HttpResponse:
        return self.request(call, "PATCH")

    def delete(self, call: Mapping[str, Any]) -> HttpResponse:
        return self.request(call, "DELETE")

    @traced(name="http_download_file", run_type="httpbridge")
    def download_file(
        self,
        call: Mapping[str, Any],
        on_progress: Optional[ProgressCallback] = None,
    ) -> DownloadResult:
        """Download the response body of ``call`` to ``filePath``.

        Args:
            call: The call descriptor, with ``filePath`` and optionally
                ``fileDirectory``.
            on_progress: Called with ``(bytes_so_far, total_or_zero)`` after
                every chunk.
        """
        options = DownloadOptions.model_validate(call)
        destination = self._file_resolver(options.file_path, options.file_directory)
        return download_file(options, destination, on_progress, settings=self._config)

    @traced(name="http_upload_file", run_type="httpbridge")
    def upload_file(self, call: Mapping[str, Any]) -> HttpResponse:
        """Upload the file at ``filePath`` as the raw request body of ``call``."""
        options = UploadOptions.model_validate(call)
        source = self._file_resolver(options.file_path, options.file_directory)
        return upload_file(options, source, settings=self._config)

    async def request_async(
        self, call: Mapping[str, Any], method: Optional[str] = None
    ) -> HttpResponse:
        """Async version of request()."""
        return await asyncio.to_thread(self.request, call, method)

    async def download_file_async(
        self,
        call: Mapping[str, Any],
        on_progress: Optional[ProgressCallback] = None,
    ) -> DownloadResult:
        """Async version of download_file(). ``on_progress`` runs on the worker thread."""
        return await asyncio.to_thread(self.download_file, call, on_progress)

    async def upload_file_async(self, call: Mapping[str, Any]) -> HttpResponse:
        """Async version of upload_file()."""
        return await asyncio.to_thread(self.upload_file, call)

    def _resolve_file(self, path: str, directory: Optional[str]) -> Path:
        return resolve_file(path, directory, settings=self._config)
