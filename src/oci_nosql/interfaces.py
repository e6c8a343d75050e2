#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
from typing import Protocol, runtime_checkable


@runtime_checkable
class Options(Protocol):
    """A protocol for per-operation options passed to the operation executor."""

    @property
    def compartment(self) -> str | None:
        """The compartment the operation applies to, if any."""
        ...

    def validate(self) -> None:
        """Check the option values before the operation is dispatched.

        :raises InvalidArgumentError: If any value or combination of values is
            invalid.
        """
        ...
