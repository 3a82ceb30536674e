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
from orderfilter.db.sorting.description import (
    OrderParameterDescription,
    describe_as_dict,
    describe_order_parameters,
)
from orderfilter.db.sorting.order_filter import OrderFilter
from orderfilter.db.sorting.sorting import (
    fallback_clause,
    generic_order_validate,
    is_property_enabled,
    resolve_direction,
    resolve_order,
)
from orderfilter.types import OrderClause, SortOrder

__all__ = [
    "OrderClause",
    "OrderFilter",
    "OrderParameterDescription",
    "SortOrder",
    "describe_as_dict",
    "describe_order_parameters",
    "fallback_clause",
    "generic_order_validate",
    "is_property_enabled",
    "resolve_direction",
    "resolve_order",
]
