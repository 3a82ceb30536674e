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
from collections.abc import Callable
from typing import Any

from starlette.requests import Request

from orderfilter.api.openapi import openapi_parameters
from orderfilter.db.sorting import OrderFilter


def order_spec_dependency(order_filter: OrderFilter) -> Callable[[Request], dict[str, str]]:
    """Create a FastAPI dependency that yields the requested ordering of the current request.

    The parameters are read from the raw query string since their names (`order[<property>]`) aren't known
    up front. Use `order_openapi_extra` to document them on the route.
    """

    def _order_spec(request: Request) -> dict[str, str]:
        return order_filter.get_request_properties(request.query_params)

    return _order_spec


def order_openapi_extra(order_filter: OrderFilter, resource: Any) -> dict:
    """Build the `openapi_extra` for a route so the accepted order parameters show up in the schema."""
    return {"parameters": openapi_parameters(order_filter.describe(resource))}
