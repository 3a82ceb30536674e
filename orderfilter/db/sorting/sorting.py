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
from collections.abc import Callable, Iterable
from typing import Any, Optional

from more_itertools import partition

from orderfilter.db.errors import CallableErrorHandler, log_sort_error
from orderfilter.settings import app_settings
from orderfilter.types import OrderClause, OrderSpec, PropertyCatalog, PropertyDefaults, SortOrder

OrderItem = tuple[str, Any]


def is_property_enabled(property_name: str, properties: PropertyDefaults) -> bool:
    return properties is None or property_name in properties


def default_direction(property_name: str, properties: PropertyDefaults) -> Optional[str]:
    if properties is None:
        return None
    return properties.get(property_name)


def fallback_clause() -> OrderClause:
    return OrderClause(app_settings.DEFAULT_ORDER_FIELD, SortOrder(app_settings.DEFAULT_ORDER_DIRECTION).value)


def generic_order_validate(
    properties: PropertyDefaults, catalog: PropertyCatalog
) -> Callable[[OrderSpec], tuple[Iterable[OrderItem], Iterable[OrderItem]]]:
    """Create a validate function that splits requested items on whether the property may be ordered on.

    Args:
        properties: The allow-list with default directions, None to allow every catalog property
        catalog: The field names of the resource

    Returns function that takes an order spec and returns the invalid and valid items, each in request order.
    """
    field_names = frozenset(catalog)

    def validate_order_items(order_spec: OrderSpec) -> tuple[Iterable[OrderItem], Iterable[OrderItem]]:
        def _is_valid_item(item: OrderItem) -> bool:
            property_name, _ = item
            return is_property_enabled(property_name, properties) and property_name in field_names

        return partition(_is_valid_item, order_spec.items())

    return validate_order_items


def resolve_direction(property_name: str, direction: Any, properties: PropertyDefaults) -> Optional[SortOrder]:
    """Resolve the requested direction, substituting the configured default for an empty one.

    Returns None when the result is neither ASC nor DESC.
    """
    if direction == "" and (default := default_direction(property_name, properties)) is not None:
        direction = default
    if not isinstance(direction, str):
        return None
    return SortOrder.from_string(direction)


def resolve_order(
    order_spec: Optional[OrderSpec],
    properties: PropertyDefaults,
    catalog: PropertyCatalog,
    handle_sort_error: CallableErrorHandler = log_sort_error,
    fallback_when_all_dropped: Optional[bool] = None,
) -> list[OrderClause]:
    """Translate the requested ordering into clauses, in request order.

    Items are dropped, never rejected: a property that is not enabled or not in the catalog, or a direction
    that isn't ASC or DESC (case insensitive) after default substitution, is reported to `handle_sort_error`
    and skipped. An empty request orders on the fallback clause (`id ASC` by default).

    Args:
        order_spec: Property -> direction as requested by the client
        properties: The allow-list with default directions, None to allow every catalog property
        catalog: The field names of the resource
        handle_sort_error: Called for every dropped item
        fallback_when_all_dropped: Also order on the fallback clause when every requested item was dropped.
            Defaults to the FALLBACK_WHEN_ALL_DROPPED setting.

    Returns list of clauses.
    """
    if not order_spec:
        return [fallback_clause()]

    invalid_items, valid_items = generic_order_validate(properties, catalog)(order_spec)
    if invalid_list := [property_name for property_name, _ in invalid_items]:
        handle_sort_error("Invalid order arguments", invalid_ordering=invalid_list)

    clauses = []
    for property_name, direction in valid_items:
        if (order := resolve_direction(property_name, direction, properties)) is None:
            handle_sort_error("Invalid order direction", field=property_name, order=direction)
            continue
        clauses.append(OrderClause(property_name, order.value))

    if fallback_when_all_dropped is None:
        fallback_when_all_dropped = app_settings.FALLBACK_WHEN_ALL_DROPPED
    if not clauses and fallback_when_all_dropped:
        return [fallback_clause()]
    return clauses
