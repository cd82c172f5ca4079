"""Single request/response exchange against the REST API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ...core.enums import ApiMethod
from ..codec import decode_as
from .errors import ErrorDecoder
from .http_client import HTTPClient
from .signer import RequestSigner, timestamp_ms

logger = logging.getLogger(__name__)


class RequestInvoker:
    """Builds, signs and executes one REST call.

    Every non-success outcome is raised; there are no retries here.
    """

    def __init__(
        self,
        http: HTTPClient,
        api_secret: str,
        *,
        clock: Callable[[], int] | None = None,
        error_decoder: ErrorDecoder | None = None,
    ) -> None:
        self._http = http
        self._signer = RequestSigner(api_secret)
        self._clock = clock or timestamp_ms
        self._errors = error_decoder or ErrorDecoder()

    def build_url(self, endpoint: str, *, signed: bool = False, parameters: str | None = None) -> str:
        """Return ``endpoint`` with its (optionally signed) query string."""
        if signed:
            query = self._signer.append_signature(parameters, self._clock())
            return f"{endpoint}?{query}"
        if parameters and parameters.strip():
            return f"{endpoint}?{parameters}"
        return endpoint

    async def call(
        self,
        method: ApiMethod | str,
        endpoint: str,
        *,
        signed: bool = False,
        parameters: str | None = None,
        result_type: Any = Any,
    ) -> Any:
        """Execute the call and decode a success body into ``result_type``.

        Raises:
            TransportTimeout: Gateway answered 504
            RemoteApiError: Any other non-success status
            DecodeError: Success body does not match ``result_type``
        """
        verb = ApiMethod.from_str(method)
        url = self.build_url(endpoint, signed=signed, parameters=parameters)
        logger.debug(f"{verb.value} {endpoint} (signed={signed})")

        response = await self._http.request(verb.value, url)
        if response.ok:
            return decode_as(response.body, result_type)

        error = self._errors.decode(response.status, response.body)
        logger.debug(f"{verb.value} {endpoint} failed with status {response.status}: {error}")
        raise error
