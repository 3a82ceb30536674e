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
import re
from collections.abc import Iterable, Mapping
from typing import Union

import structlog
from starlette.datastructures import QueryParams

logger = structlog.get_logger(__name__)

QueryParamsLike = Union[QueryParams, Mapping[str, str], Iterable[tuple[str, str]]]


def _multi_items(query_params: QueryParamsLike) -> Iterable[tuple[str, str]]:
    if isinstance(query_params, QueryParams):
        return query_params.multi_items()
    if isinstance(query_params, Mapping):
        return query_params.items()
    return query_params


def _order_key_pattern(order_parameter: str) -> re.Pattern:
    return re.compile(rf"^{re.escape(order_parameter)}\[([^\[\]]+)\]$")


def extract_order_spec(query_params: QueryParamsLike, order_parameter: str) -> dict[str, str]:
    """Collect the `<order_parameter>[<property>]=<direction>` pairs from a query string, in request order.

    A property that is repeated keeps its first position and takes the last value. Keys without a property
    name or with nested brackets are ignored.

    >>> extract_order_spec(QueryParams("order[name]=asc&page=2&order[age]="), "order")
    {'name': 'asc', 'age': ''}
    """
    pattern = _order_key_pattern(order_parameter)
    order_spec: dict[str, str] = {}
    for key, value in _multi_items(query_params):
        if match := pattern.match(key):
            order_spec[match.group(1)] = value
        elif key.startswith(f"{order_parameter}["):
            logger.debug("Ignoring malformed order parameter", key=key)
    return order_spec
