#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from datetime import timedelta

from .interfaces import Options
from .utils import check_poll_parameters


@dataclass(kw_only=True)
class AdminOptions(Options):
    """On-premise only. Options for admin DDL operations.

    Fields that are not set take their defaults from the client configuration, see
    :py:meth:`oci_nosql.config.ClientConfig.admin_options_with_defaults`. Values are
    not checked on assignment; call :py:meth:`validate` before the options are used.
    """

    timeout: timedelta | None = None
    """The timeout for the operation.

    If set, must be positive. When waiting for completion it defaults to the sum of
    the configured admin timeout and admin poll timeout, or to no timeout if the
    latter isn't set.
    """

    poll_delay: timedelta | None = None
    """The delay between polls when waiting for operation completion.

    If set, must be positive and not greater than the timeout.
    """

    @property
    def compartment(self) -> str | None:
        # Admin operations are not scoped to a compartment.
        return None

    def validate(self) -> None:
        check_poll_parameters(self.timeout, self.poll_delay, "timeout", "poll_delay")
