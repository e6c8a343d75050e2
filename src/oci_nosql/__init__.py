#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
import importlib.metadata

from .config import ClientConfig
from .exceptions import (
    EndpointResolutionError,
    InvalidArgumentError,
    NoSQLError,
    RegionNotFoundError,
)
from .interfaces import Options
from .options import AdminOptions
from .regions import Realm, Region
from .utils import check_poll_parameters

__version__: str = importlib.metadata.version("oci-nosql-core")
__all__ = (
    "AdminOptions",
    "ClientConfig",
    "EndpointResolutionError",
    "InvalidArgumentError",
    "NoSQLError",
    "Options",
    "Realm",
    "Region",
    "RegionNotFoundError",
    "check_poll_parameters",
)
