# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Address validity and checksum rendering backed by eth-utils."""

from typing import Any

from eth_utils import (
    is_checksum_address,
    is_checksum_formatted_address,
    is_hex_address,
    to_checksum_address,
)


class AddressChecker:
    """Decide whether a string is an address and render its checksummed form."""

    def is_valid(self, value: Any) -> bool:
        """Return True if ``value`` is a well-formed address string.

        All-lowercase and all-uppercase hex are accepted; a mixed-case string
        is accepted only when its casing is a correct checksum.
        """
        if not isinstance(value, str):
            return False
        if is_checksum_formatted_address(value):
            return is_checksum_address(value)
        return is_hex_address(value)

    def to_checksum(self, value: str) -> str:
        """Return the canonical checksummed rendering of ``value``.

        Raises:
            ValueError: If ``value`` is not a valid address.
        """
        if not self.is_valid(value):
            raise ValueError(f"Invalid address: '{value}'")
        return to_checksum_address(value)

    def is_checksummed(self, value: str) -> bool:
        """Return True if ``value`` is valid and already in checksummed form."""
        return self.is_valid(value) and to_checksum_address(value) == value
