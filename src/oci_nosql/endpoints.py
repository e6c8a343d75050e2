#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from typing import Final, Protocol
from urllib.parse import urlparse

from .exceptions import EndpointResolutionError
from .regions import Region

logger: Final = logging.getLogger(__name__)


class RegionalEndpointConfig(Protocol):
    """Endpoint config for the NoSQL Database Cloud Service."""

    endpoint: str | None
    """A static endpoint to use for requests."""

    region: Region | None
    """The region to address requests to."""


def resolve_static_endpoint(endpoint: str) -> str:
    """Normalize a user supplied endpoint.

    An endpoint given as a bare host, optionally with a port, is assumed to use
    ``https``.

    :param endpoint: The endpoint string.
    :raises EndpointResolutionError: If no hostname can be parsed from the endpoint.
    """
    if "://" not in endpoint:
        endpoint = f"https://{endpoint}"

    parsed = urlparse(endpoint)
    if not parsed.hostname:
        raise EndpointResolutionError(
            f"Unable to parse hostname from provided endpoint: {endpoint}"
        )

    return endpoint


class RegionalEndpointResolver:
    """Resolves the service endpoint from a static endpoint or a region."""

    def resolve_endpoint(self, config: RegionalEndpointConfig) -> str:
        if config.endpoint is not None:
            endpoint = resolve_static_endpoint(config.endpoint)
            logger.debug("Using static endpoint %s.", endpoint)
            return endpoint

        if config.region is not None:
            endpoint = config.region.endpoint
            logger.debug("Resolved endpoint %s from region %s.", endpoint, config.region)
            return endpoint

        raise EndpointResolutionError(
            "Unable to resolve endpoint - either endpoint or region is required."
        )
