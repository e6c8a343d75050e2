#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
import configparser
import logging
import os
from collections.abc import Callable, Mapping
from datetime import timedelta
from pathlib import Path
from typing import Any, ClassVar, Final, Literal, TypeAlias

from .endpoints import RegionalEndpointResolver, resolve_static_endpoint
from .exceptions import InvalidArgumentError
from .options import AdminOptions
from .regions import Region
from .utils import check_poll_parameters, expect_positive_duration

logger: Final = logging.getLogger(__name__)

SOURCE_CONSTRUCTOR = "constructor"
SOURCE_ENVIRONMENT = "environment"
SOURCE_CONFIG_FILE = "config_file"
SOURCE_DEFAULT = "default"
SOURCE_IN_CODE_UPDATE = "in_code_update"

SourceType = Literal[
    "constructor",
    "environment",
    "config_file",
    "default",
    "in_code_update",
]

DEFAULT_PROFILE = "DEFAULT"

_EXPLICIT_SOURCES = (SOURCE_CONSTRUCTOR, SOURCE_IN_CODE_UPDATE)

ValuesLoader: TypeAlias = Callable[[], Mapping[str, Any]]


class ConfigValue:
    """Configuration value with metadata about its source"""

    def __init__(self, value: Any, source: SourceType):
        self.value = value
        self.source = source


class ClientConfig:
    """
    NoSQL client configuration with precedence-based resolution.

    Values are resolved, highest precedence first, from the constructor, the
    environment, the OCI config file and finally the defaults. The constructor uses
    the sentinel value (...) so that "not provided" can be told apart from
    "explicitly set to None".

    A region given to the constructor or assigned in code is looked up by region id.
    A region read from the environment or the OCI config file may also be a region
    code, such as ``iad``.

    ``region`` and ``endpoint`` can't both be given in code. An endpoint set from
    any source takes precedence over a region from the environment or the OCI config
    file, which is then not looked up, so the endpoint of a region unknown to this
    release can be used with an existing OCI config file.
    """

    CONFIG_FIELDS: ClassVar[dict[str, dict[str, Any]]] = {
        "endpoint": {
            "env_var": "NOSQL_ENDPOINT",
            "default": None,
            "validator": "_validate_endpoint",
        },
        # Resolved after endpoint, which it depends on.
        "region": {
            "env_var": "OCI_REGION",
            "config_key": "region",
            "default": None,
        },
        "compartment": {
            "env_var": "OCI_COMPARTMENT",
            "default": None,
            "type": str | None,
        },
        "admin_timeout": {
            "default": timedelta(seconds=10),
            "validator": "_validate_duration",
        },
        "admin_poll_delay": {
            "default": timedelta(seconds=1),
            "validator": "_validate_duration",
        },
        "admin_poll_timeout": {
            "default": None,
            "validator": "_validate_duration",
        },
    }

    def __init__(
        self,
        *,
        region: Region | str | None = ...,  # type: ignore[assignment]
        endpoint: str | None = ...,  # type: ignore[assignment]
        compartment: str | None = ...,  # type: ignore[assignment]
        admin_timeout: timedelta | None = ...,  # type: ignore[assignment]
        admin_poll_delay: timedelta | None = ...,  # type: ignore[assignment]
        admin_poll_timeout: timedelta | None = ...,  # type: ignore[assignment]
    ):
        self._constructor_values = {
            k: v for k, v in locals().items() if k != "self" and v is not ...
        }
        self._resolved = False

    def resolve(
        self,
        *,
        environment_loader: ValuesLoader | None = None,
        config_file_loader: ValuesLoader | None = None,
    ) -> None:
        """Resolve configuration from all sources

        Args:
            environment_loader: Custom environment loader function
            config_file_loader: Custom OCI config file loader function
        """

        if self._resolved:
            raise RuntimeError(
                "Config has already been resolved. Multiple calls to resolve() are not allowed."
            )

        env_values = (environment_loader or self._load_environment_values)()
        if config_file_loader is not None:
            config_file_values = config_file_loader()
        else:
            config_file_values = self._load_config_file_values(env_values)

        for field_name, field_info in self.CONFIG_FIELDS.items():
            resolved_value = self._resolve_field(
                field_name,
                self._constructor_values,
                env_values,
                config_file_values,
                field_info["default"],
                field_info.get("validator"),
            )
            setattr(self, f"_{field_name}", resolved_value)

        # A region given in code takes the place of an endpoint from the environment.
        if (
            self._region.source == SOURCE_CONSTRUCTOR
            and self._region.value is not None
        ):
            self._clear_implicit("endpoint")

        self._resolved = True
        try:
            self.validate()
        except InvalidArgumentError:
            self._resolved = False
            raise

        logger.debug(
            "Resolved client config with region %s (%s) and endpoint %s (%s).",
            self.region,
            self._region.source,
            self.endpoint,
            self._endpoint.source,
        )

    def validate(self) -> None:
        """Check the resolved values.

        A region and an endpoint can't both be given in code. When only one of them
        is, the other one is ignored if it came from the environment or the OCI
        config file.

        :raises InvalidArgumentError: If both region and endpoint are set, or if an
            admin timing value or combination of values is invalid.
        """
        if self.region is not None and self.endpoint is not None:
            raise InvalidArgumentError(
                "Cannot specify both region and endpoint", "region, endpoint"
            )
        expect_positive_duration(self.admin_timeout, "admin_timeout")
        check_poll_parameters(
            self.admin_poll_timeout,
            self.admin_poll_delay,
            "admin_poll_timeout",
            "admin_poll_delay",
        )

    def _clear_implicit(self, field_name: str) -> None:
        current: ConfigValue | None = getattr(self, f"_{field_name}", None)
        if (
            current is None
            or current.value is None
            or current.source in _EXPLICIT_SOURCES
        ):
            return
        logger.debug(
            "Ignoring %s %s from %s, it is overridden in code.",
            field_name,
            current.value,
            current.source,
        )
        setattr(self, f"_{field_name}", ConfigValue(None, SOURCE_DEFAULT))

    def _load_environment_values(self) -> Mapping[str, str]:
        return os.environ

    def _load_config_file_values(self, env_values: Mapping[str, Any]) -> dict[str, Any]:
        config_path = Path(
            env_values.get("OCI_CONFIG_FILE", Path.home() / ".oci" / "config")
        ).expanduser()
        if not config_path.exists():
            return {}

        parser = configparser.ConfigParser(interpolation=None)
        try:
            parser.read(config_path)
        except configparser.Error as e:
            raise InvalidArgumentError(
                f"Unable to parse OCI config file {config_path}: {e}",
                "OCI_CONFIG_FILE",
            ) from e

        profile = env_values.get("OCI_CONFIG_PROFILE", DEFAULT_PROFILE)
        if profile not in parser:
            logger.debug("Profile %s not found in %s.", profile, config_path)
            return {}

        return dict(parser[profile])

    def _resolve_field(
        self,
        field_name: str,
        constructor_values: dict[str, Any],
        env_values: Mapping[str, Any],
        config_file_values: Mapping[str, Any],
        default_value: Any,
        validator: str | None,
    ) -> ConfigValue:
        custom_resolver = getattr(self, f"_resolve_{field_name}", None)
        if custom_resolver:
            return custom_resolver(
                constructor_values,
                env_values,
                config_file_values,
                default_value,
                validator,
            )

        field_config = self.CONFIG_FIELDS.get(field_name, {})
        env_var = field_config.get("env_var")
        config_key = field_config.get("config_key")

        if field_name in constructor_values:
            value = constructor_values[field_name]
            source = SOURCE_CONSTRUCTOR
        elif env_var and env_var in env_values:
            value = env_values[env_var]
            source = SOURCE_ENVIRONMENT
        elif config_key and config_key in config_file_values:
            value = config_file_values[config_key]
            source = SOURCE_CONFIG_FILE
        else:
            value = default_value
            source = SOURCE_DEFAULT

        if validator:
            getattr(self, validator)(value, field_name)
        else:
            expected_type = field_config["type"]
            if not isinstance(value, expected_type):
                actual_name = type(value).__name__
                expected_name = getattr(expected_type, "__name__", str(expected_type))
                raise TypeError(
                    f"{field_name} must be {expected_name}, got {actual_name}"
                )

        return ConfigValue(value, source)

    def _validate_endpoint(self, value: Any, field_name: str) -> None:
        if value is None:
            return
        if not isinstance(value, str):
            raise TypeError(f"{field_name} must be a string")
        resolve_static_endpoint(value)

    def _validate_duration(self, value: Any, field_name: str) -> None:
        expect_positive_duration(value, field_name)

    def _resolve_region(
        self,
        constructor_values: dict[str, Any],
        env_values: Mapping[str, Any],
        config_file_values: Mapping[str, Any],
        default_value: Any,
        validator: str | None,
    ) -> ConfigValue:
        if "region" in constructor_values:
            return ConfigValue(
                _region_from_id(constructor_values["region"]), SOURCE_CONSTRUCTOR
            )
        # An endpoint may address a region this release doesn't know, so a region
        # from a lower precedence source is not looked up at all.
        if self._endpoint.value is not None:
            logger.debug(
                "Endpoint %s is set, ignoring region from the environment and "
                "OCI config file.",
                self._endpoint.value,
            )
            return ConfigValue(default_value, SOURCE_DEFAULT)
        if "OCI_REGION" in env_values:
            return ConfigValue(
                Region.from_code_or_id(env_values["OCI_REGION"]), SOURCE_ENVIRONMENT
            )
        if "region" in config_file_values:
            return ConfigValue(
                Region.from_code_or_id(config_file_values["region"]),
                SOURCE_CONFIG_FILE,
            )
        return ConfigValue(default_value, SOURCE_DEFAULT)

    def get_config_value_object(self, field_name: str) -> ConfigValue:
        """Get the raw ConfigValue object for a field"""
        if not self._resolved:
            raise RuntimeError("Config must be resolved before accessing values")
        return getattr(self, f"_{field_name}")

    def resolve_endpoint(self) -> str:
        """Get the service endpoint from the static endpoint or the region."""
        return RegionalEndpointResolver().resolve_endpoint(self)

    def admin_options_with_defaults(
        self, options: AdminOptions | None = None, *, wait_for_completion: bool = False
    ) -> AdminOptions:
        """Get a copy of the given admin options with unset values taken from this
        config.

        The timeout defaults to ``admin_timeout``. When waiting for completion it
        instead defaults to ``admin_timeout + admin_poll_timeout``, or to no timeout
        if ``admin_poll_timeout`` isn't set, and the poll delay defaults to
        ``admin_poll_delay``, capped at the timeout. Without waiting for completion the
        poll delay is dropped.

        :param options: The options given for the operation, if any.
        :param wait_for_completion: Whether the operation waits for the admin DDL to
            complete.
        :raises InvalidArgumentError: If the given options are invalid.
        """
        options = options if options is not None else AdminOptions()
        options.validate()

        timeout = options.timeout
        poll_delay = options.poll_delay

        if timeout is None:
            if not wait_for_completion:
                timeout = self.admin_timeout
            elif (
                self.admin_poll_timeout is not None and self.admin_timeout is not None
            ):
                timeout = self.admin_timeout + self.admin_poll_timeout

        if not wait_for_completion:
            # Only used when polling for completion.
            poll_delay = None
        elif poll_delay is None:
            poll_delay = self.admin_poll_delay
            if poll_delay is not None and timeout is not None:
                poll_delay = min(poll_delay, timeout)

        result = AdminOptions(timeout=timeout, poll_delay=poll_delay)
        result.validate()
        return result

    @property
    def region(self) -> Region | None:
        return self.get_config_value_object("region").value

    @region.setter
    def region(self, value: Region | str | None) -> None:
        self._region = ConfigValue(_region_from_id(value), SOURCE_IN_CODE_UPDATE)
        if self._region.value is not None:
            self._clear_implicit("endpoint")

    @property
    def endpoint(self) -> str | None:
        return self.get_config_value_object("endpoint").value

    @endpoint.setter
    def endpoint(self, value: str | None) -> None:
        self._validate_endpoint(value, "endpoint")
        self._endpoint = ConfigValue(value, SOURCE_IN_CODE_UPDATE)
        if value is not None:
            self._clear_implicit("region")

    @property
    def compartment(self) -> str | None:
        return self.get_config_value_object("compartment").value

    @compartment.setter
    def compartment(self, value: str | None) -> None:
        self._compartment = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def admin_timeout(self) -> timedelta | None:
        return self.get_config_value_object("admin_timeout").value

    @admin_timeout.setter
    def admin_timeout(self, value: timedelta | None) -> None:
        self._admin_timeout = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def admin_poll_delay(self) -> timedelta | None:
        return self.get_config_value_object("admin_poll_delay").value

    @admin_poll_delay.setter
    def admin_poll_delay(self, value: timedelta | None) -> None:
        self._admin_poll_delay = ConfigValue(value, SOURCE_IN_CODE_UPDATE)

    @property
    def admin_poll_timeout(self) -> timedelta | None:
        return self.get_config_value_object("admin_poll_timeout").value

    @admin_poll_timeout.setter
    def admin_poll_timeout(self, value: timedelta | None) -> None:
        self._admin_poll_timeout = ConfigValue(value, SOURCE_IN_CODE_UPDATE)


def _region_from_id(value: Region | str | None) -> Region | None:
    if value is None or isinstance(value, Region):
        return value
    return Region.from_id(value)
