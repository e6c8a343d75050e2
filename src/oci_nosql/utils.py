#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
from datetime import timedelta
from typing import Any

from .exceptions import InvalidArgumentError

_ZERO = timedelta(0)


def expect_positive_duration(value: Any, name: str) -> timedelta | None:
    """Asserts a value is either None or a strictly positive ``timedelta``.

    :param value: The value of an optional duration field.
    :param name: The name of the field, used in the error message.
    :returns: The given value.
    :raises InvalidArgumentError: If the value is set and is not a positive
        ``timedelta``.
    """
    if value is None:
        return None

    if not isinstance(value, timedelta):
        raise InvalidArgumentError(
            f"{name} must be a timedelta, got {type(value).__name__}", name
        )

    if value <= _ZERO:
        raise InvalidArgumentError(
            f"{name} must be a positive value, got {value}", name
        )

    return value


def check_poll_parameters(
    timeout: timedelta | None,
    poll_delay: timedelta | None,
    timeout_name: str,
    poll_delay_name: str,
) -> None:
    """Validates a timeout and the delay between polls made within that timeout.

    Both values are optional. When set, each must be positive, and the poll delay
    must not be greater than the timeout.

    :param timeout: The operation timeout.
    :param poll_delay: The delay between polls for operation completion.
    :param timeout_name: The field name of the timeout, used in error messages.
    :param poll_delay_name: The field name of the poll delay, used in error messages.
    :raises InvalidArgumentError: If either value or their combination is invalid.
    """
    expect_positive_duration(timeout, timeout_name)
    expect_positive_duration(poll_delay, poll_delay_name)

    if timeout is not None and poll_delay is not None and poll_delay > timeout:
        raise InvalidArgumentError(
            f"{poll_delay_name} ({poll_delay}) cannot be greater than "
            f"{timeout_name} ({timeout})",
            f"{timeout_name}, {poll_delay_name}",
        )
