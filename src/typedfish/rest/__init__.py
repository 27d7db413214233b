# -*- coding: utf-8 -*-
"""
REST transport implementation
"""

from .v1 import (
    AuthMethod,
    TransportError,
    ServerDownOrUnreachableError,
    InvalidCredentialsError,
    DecompressResponseError,
    RequestFailedError,
    JsonDecodingError,
    JsonObject,
    RestRequest,
    RestResponse,
    StaticRestResponse,
    RestClientBase,
    HttpClient,
    redfish_client,
)
