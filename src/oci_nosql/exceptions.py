#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0


class NoSQLError(Exception):
    """Base exception type for all exceptions raised by oci-nosql-core."""


class InvalidArgumentError(NoSQLError):
    """Exception type raised when a required argument is missing or an argument, or
    combination of arguments, has an invalid value."""

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument
        """The name of the offending argument or option field(s), if known."""


class RegionNotFoundError(NoSQLError):
    """Exception type raised when no known region matches a region id or code."""

    def __init__(self, message: str, region: str):
        super().__init__(message)
        self.region = region
        """The region id or code that could not be found."""


class EndpointResolutionError(NoSQLError):
    """Exception type for all exceptions raised by endpoint resolution."""
