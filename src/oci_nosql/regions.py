#  Copyright (c) 2025 Oracle and/or its affiliates. All rights reserved.
#  SPDX-License-Identifier: Apache-2.0
"""Regions of the Oracle Cloud Infrastructure known to this release.

The string endpoints of the Oracle NoSQL Database Cloud Service are in the format
``https://nosql.{region_id}.oci.{second_level_domain}``. For example, the endpoint
of :py:attr:`Region.US_ASHBURN_1` is ``https://nosql.us-ashburn-1.oci.oraclecloud.com``.

The service is not available in every region listed here. If it becomes available in
a region that this release doesn't know about, build its endpoint with the rule above
and pass it as the ``endpoint`` of a :py:class:`oci_nosql.config.ClientConfig`.
"""
from enum import Enum
from typing import Any, Final

from .exceptions import InvalidArgumentError, RegionNotFoundError


class Realm(Enum):
    """A partition of regions that share a DNS second level domain."""

    OC1 = ("oc1", "oraclecloud.com")
    OC2 = ("oc2", "oraclegovcloud.com")
    OC3 = ("oc3", "oraclegovcloud.com")
    OC4 = ("oc4", "oraclegovcloud.uk")
    OC8 = ("oc8", "oraclecloud8.com")
    OC9 = ("oc9", "oraclecloud9.com")
    OC10 = ("oc10", "oraclecloud10.com")

    def __init__(self, realm_id: str, second_level_domain: str) -> None:
        self.realm_id = realm_id
        self.second_level_domain = second_level_domain


class Region(Enum):
    """A region in the Oracle Cloud Infrastructure.

    Regions can't be constructed by applications. Use one of the members, such as
    :py:attr:`Region.US_PHOENIX_1`, or look one up with :py:meth:`from_id` or
    :py:meth:`from_code_or_id`. The member name is the region id upper-cased with
    ``-`` replaced by ``_``.
    """

    AF_JOHANNESBURG_1 = ("af-johannesburg-1", "jnb", Realm.OC1)
    """South Africa Central (Johannesburg)"""

    AP_SEOUL_1 = ("ap-seoul-1", "icn", Realm.OC1)
    """South Korea Central (Seoul)"""

    AP_SINGAPORE_1 = ("ap-singapore-1", "sin", Realm.OC1)
    """Singapore (Singapore)"""

    AP_TOKYO_1 = ("ap-tokyo-1", "nrt", Realm.OC1)
    """Japan East (Tokyo)"""

    AP_MUMBAI_1 = ("ap-mumbai-1", "bom", Realm.OC1)
    """India West (Mumbai)"""

    AP_SYDNEY_1 = ("ap-sydney-1", "syd", Realm.OC1)
    """Australia East (Sydney)"""

    AP_MELBOURNE_1 = ("ap-melbourne-1", "mel", Realm.OC1)
    """Australia Southeast (Melbourne)"""

    AP_OSAKA_1 = ("ap-osaka-1", "kix", Realm.OC1)
    """Japan Central (Osaka)"""

    AP_HYDERABAD_1 = ("ap-hyderabad-1", "hyd", Realm.OC1)
    """India South (Hyderabad)"""

    AP_CHUNCHEON_1 = ("ap-chuncheon-1", "yny", Realm.OC1)
    """South Korea North (Chuncheon)"""

    UK_LONDON_1 = ("uk-london-1", "lhr", Realm.OC1)
    """UK South (London)"""

    EU_FRANKFURT_1 = ("eu-frankfurt-1", "fra", Realm.OC1)
    """Germany Central (Frankfurt)"""

    EU_MARSEILLE_1 = ("eu-marseille-1", "mrs", Realm.OC1)
    """France South (Marseille)"""

    EU_STOCKHOLM_1 = ("eu-stockholm-1", "arn", Realm.OC1)
    """Sweden Central (Stockholm)"""

    EU_ZURICH_1 = ("eu-zurich-1", "zrh", Realm.OC1)
    """Switzerland North (Zurich)"""

    EU_AMSTERDAM_1 = ("eu-amsterdam-1", "ams", Realm.OC1)
    """Netherlands Northwest (Amsterdam)"""

    ME_JEDDAH_1 = ("me-jeddah-1", "jed", Realm.OC1)
    """Saudi Arabia West (Jeddah)"""

    ME_ABUDHABI_1 = ("me-abudhabi-1", "auh", Realm.OC1)
    """UAE Central (Abu Dhabi)"""

    ME_DUBAI_1 = ("me-dubai-1", "dxb", Realm.OC1)
    """UAE East (Dubai)"""

    UK_CARDIFF_1 = ("uk-cardiff-1", "cwl", Realm.OC1)
    """UK West (Newport)"""

    US_ASHBURN_1 = ("us-ashburn-1", "iad", Realm.OC1)
    """US East (Ashburn)"""

    US_PHOENIX_1 = ("us-phoenix-1", "phx", Realm.OC1)
    """US West (Phoenix)"""

    US_SANJOSE_1 = ("us-sanjose-1", "sjc", Realm.OC1)
    """US West (San Jose)"""

    CA_TORONTO_1 = ("ca-toronto-1", "yyz", Realm.OC1)
    """Canada Southeast (Toronto)"""

    CA_MONTREAL_1 = ("ca-montreal-1", "yul", Realm.OC1)
    """Canada Southeast (Montreal)"""

    SA_SAOPAULO_1 = ("sa-saopaulo-1", "gru", Realm.OC1)
    """Brazil East (Sao Paulo)"""

    SA_SANTIAGO_1 = ("sa-santiago-1", "scl", Realm.OC1)
    """Chile (Santiago)"""

    US_LANGLEY_1 = ("us-langley-1", "lfi", Realm.OC2)
    """US Gov East (Ashburn)"""

    US_LUKE_1 = ("us-luke-1", "luf", Realm.OC2)
    """US Gov West (Phoenix)"""

    US_GOV_ASHBURN_1 = ("us-gov-ashburn-1", "ric", Realm.OC3)
    """US DoD East (Ashburn)"""

    US_GOV_CHICAGO_1 = ("us-gov-chicago-1", "pia", Realm.OC3)
    """US DoD North (Chicago)"""

    US_GOV_PHOENIX_1 = ("us-gov-phoenix-1", "tus", Realm.OC3)
    """US DoD West (Phoenix)"""

    UK_GOV_LONDON_1 = ("uk-gov-london-1", "ltn", Realm.OC4)
    """UK Gov South (London)"""

    AP_CHIYODA_1 = ("ap-chiyoda-1", "nja", Realm.OC8)
    """Japan East (Chiyoda)"""

    ME_DCC_MUSCAT_1 = ("me-dcc-muscat-1", "mct", Realm.OC9)
    """Oman (Muscat)"""

    AP_DCC_CANBERRA_1 = ("ap-dcc-canberra-1", "wga", Realm.OC10)
    """Australia Central (Canberra)"""

    def __init__(self, region_id: str, region_code: str, realm: Realm) -> None:
        self.region_id = region_id
        """The lower-case, hyphenated region id, for example ``ap-seoul-1``."""

        self.region_code = region_code
        """The lower-case 3-letter region code (also called region key)."""

        self.realm = realm
        """The realm the region belongs to."""

    @property
    def second_level_domain(self) -> str:
        """The DNS second level domain of the region's realm."""
        return self.realm.second_level_domain

    @property
    def endpoint(self) -> str:
        """The NoSQL Database Cloud Service endpoint of the region."""
        return f"https://nosql.{self.region_id}.oci.{self.second_level_domain}"

    def __str__(self) -> str:
        return self.region_id

    @classmethod
    def from_id(cls, region_id: str) -> "Region":
        """Get the region with the given region id.

        The comparison is case-insensitive and ``_`` is treated the same as ``-``.

        :param region_id: The region id, for example ``us-ashburn-1``.
        :raises InvalidArgumentError: If ``region_id`` is None or not a non-empty
            string.
        :raises RegionNotFoundError: If there is no region with that id.
        """
        _expect_region_string(region_id, "region_id")
        key = region_id.lower().replace("_", "-")
        try:
            return _REGIONS_BY_ID[key]
        except KeyError:
            raise RegionNotFoundError(
                f"Could not find region with region id {region_id}", region_id
            ) from None

    @classmethod
    def from_code_or_id(cls, code_or_id: str) -> "Region":
        """Get the region whose region code or region id is equal to the given value,
        case-insensitive.

        Unlike :py:meth:`from_id`, ``_`` is not treated as ``-``.

        :param code_or_id: A region code such as ``iad`` or a region id such as
            ``us-ashburn-1``.
        :raises InvalidArgumentError: If ``code_or_id`` is None or not a non-empty
            string.
        :raises RegionNotFoundError: If no region has that code or id.
        """
        _expect_region_string(code_or_id, "code_or_id")
        value = code_or_id.lower()
        for region in cls:
            if region.region_code == value or region.region_id == value:
                return region
        raise RegionNotFoundError(
            f"Could not find region from region code or region id {code_or_id}",
            code_or_id,
        )

    @classmethod
    def all_regions(cls) -> tuple["Region", ...]:
        """All known regions, in the order they are declared."""
        return tuple(cls)


def _expect_region_string(value: Any, name: str) -> None:
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None", name)
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(
            f"{name} must be a non-empty string, got {value!r}", name
        )


_REGIONS_BY_ID: Final[dict[str, Region]] = {
    region.region_id: region for region in Region
}
