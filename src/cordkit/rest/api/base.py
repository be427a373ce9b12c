"""Shared plumbing for the REST API groups."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..http import RestHttpClient


class RestAPI:
    """Base class for one group of REST endpoints.

    Every method is a coroutine returning ``Result[T, RestError]``; optional
    parameters default to UNSET and are omitted from the request.
    """

    __slots__ = ("_http",)

    def __init__(self, http: RestHttpClient) -> None:
        self._http = http

    @property
    def http(self) -> RestHttpClient:
        return self._http
