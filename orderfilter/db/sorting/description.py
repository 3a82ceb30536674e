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
from pydantic import BaseModel, ConfigDict

from orderfilter.db.sorting.sorting import is_property_enabled
from orderfilter.types import PropertyCatalog, PropertyDefaults, SortOrder

ORDER_REQUIREMENT = "|".join(order.value for order in SortOrder)


class OrderParameterDescription(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    property: str
    type: str = "string"
    required: bool = False
    requirement: str = ORDER_REQUIREMENT
    description: str


def describe_order_parameters(
    catalog: PropertyCatalog, properties: PropertyDefaults, order_parameter: str
) -> list[OrderParameterDescription]:
    """Describe the query parameters accepted for ordering, one per enabled catalog property, in catalog order."""
    return [
        OrderParameterDescription(
            key=f"{order_parameter}[{field_name}]",
            property=field_name,
            description=f"Order by {field_name}",
        )
        for field_name in catalog
        if is_property_enabled(field_name, properties)
    ]


def describe_as_dict(descriptions: list[OrderParameterDescription]) -> dict[str, dict]:
    """Key the descriptions by their query parameter name."""
    return {description.key: description.model_dump(exclude={"key"}) for description in descriptions}
