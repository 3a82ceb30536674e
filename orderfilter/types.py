# Copyright 2019-2025 SURF, GÉANT, ESnet.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
from collections.abc import Collection, Mapping
from enum import Enum
from typing import NamedTuple, Optional

import strawberry

__all__ = [
    "OrderClause",
    "OrderSpec",
    "PropertyCatalog",
    "PropertyDefaults",
    "SortOrder",
]


@strawberry.enum(description="Sort order (ASC or DESC)")
class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def from_string(cls, value: str) -> Optional["SortOrder"]:
        """Return the matching member for an ASCII case-insensitive direction, or None.

        >>> SortOrder.from_string("aSc")
        <SortOrder.ASC: 'ASC'>
        >>> SortOrder.from_string("up") is None
        True
        >>> SortOrder.from_string("aſc") is None
        True
        """
        if not value.isascii():
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None


class OrderClause(NamedTuple):
    property: str
    direction: str


# Requested property -> direction, in request order. An empty direction means "use the configured default".
OrderSpec = Mapping[str, str]

# Field names known to exist on a resource.
PropertyCatalog = Collection[str]

# Allow-list of orderable properties with their default direction (or None for no default).
# None as a whole means every catalog property is enabled, without defaults.
PropertyDefaults = Optional[Mapping[str, Optional[str]]]
