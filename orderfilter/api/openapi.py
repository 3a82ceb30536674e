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
from collections.abc import Iterable

from orderfilter.db.sorting.description import OrderParameterDescription
from orderfilter.types import SortOrder


def openapi_parameter(description: OrderParameterDescription) -> dict:
    return {
        "name": description.key,
        "in": "query",
        "required": description.required,
        "description": description.description,
        "schema": {"type": description.type, "enum": [order.value for order in SortOrder]},
    }


def openapi_parameters(descriptions: Iterable[OrderParameterDescription]) -> list[dict]:
    """Convert order parameter descriptions into OpenAPI 3 query parameter objects."""
    return [openapi_parameter(description) for description in descriptions]
