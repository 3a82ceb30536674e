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
from collections.abc import Mapping
from typing import Any, Optional

import structlog
from sqlalchemy import Select

from orderfilter.api.helpers import QueryParamsLike, extract_order_spec
from orderfilter.db.catalog import CatalogLookup, model_catalog
from orderfilter.db.errors import CallableErrorHandler, log_sort_error
from orderfilter.db.query import apply_order_clauses
from orderfilter.db.sorting.description import OrderParameterDescription, describe_order_parameters
from orderfilter.db.sorting.sorting import is_property_enabled, resolve_order
from orderfilter.settings import app_settings
from orderfilter.types import OrderClause, OrderSpec, PropertyCatalog

logger = structlog.get_logger(__name__)


class OrderFilter:
    """Order a collection by the properties given in the query string.

    The clauses follow the order of the properties in the query. A property that the resource doesn't have,
    that isn't in `properties`, or with a direction other than `asc` or `desc` (case insensitive) is ignored.

    Args:
        order_parameter: Name of the query parameter, e.g. "order" for `?order[name]=desc`
        properties: Property names the filter is enabled for, mapped to their default direction (or None).
            None enables every property of the resource.
        catalog_lookup: Returns the field names of a resource. Defaults to the columns of a SQLAlchemy model.
        handle_sort_error: Called for every ignored property.
    """

    def __init__(
        self,
        order_parameter: Optional[str] = None,
        properties: Optional[Mapping[str, Optional[str]]] = None,
        catalog_lookup: CatalogLookup = model_catalog,
        handle_sort_error: CallableErrorHandler = log_sort_error,
    ) -> None:
        order_parameter = app_settings.ORDER_PARAMETER if order_parameter is None else order_parameter
        if not order_parameter:
            raise ValueError("order_parameter must be a non-empty string")

        self.order_parameter = order_parameter
        self.properties = dict(properties) if properties is not None else None
        self.catalog_lookup = catalog_lookup
        self.handle_sort_error = handle_sort_error

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order_parameter={self.order_parameter!r}, properties={self.properties!r})"

    def is_property_enabled(self, property_name: str) -> bool:
        return is_property_enabled(property_name, self.properties)

    def catalog(self, resource: Any) -> PropertyCatalog:
        return self.catalog_lookup(resource)

    def get_request_properties(self, query_params: QueryParamsLike) -> dict[str, str]:
        return extract_order_spec(query_params, self.order_parameter)

    def resolve(self, resource: Any, order_spec: Optional[OrderSpec]) -> list[OrderClause]:
        return resolve_order(order_spec, self.properties, self.catalog(resource), self.handle_sort_error)

    def apply(
        self,
        resource: Any,
        stmt: Select,
        query_params: QueryParamsLike,
        source: Any = None,
    ) -> Select:
        """Order the statement by the properties requested in the query parameters.

        Args:
            resource: The mapped class the catalog is looked up for
            stmt: The statement to add ORDER BY terms to
            query_params: The request's query parameters
            source: The (aliased) relation the terms refer to, defaults to `resource`

        Returns the ordered statement.
        """
        clauses = self.resolve(resource, self.get_request_properties(query_params))
        logger.debug("Applying order clauses", clauses=clauses)
        return apply_order_clauses(stmt, clauses, resource if source is None else source, self.handle_sort_error)

    def describe(self, resource: Any) -> list[OrderParameterDescription]:
        return describe_order_parameters(self.catalog(resource), self.properties, self.order_parameter)
