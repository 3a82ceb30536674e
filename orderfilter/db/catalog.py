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
from functools import cache
from typing import Any

from sqlalchemy.inspection import inspect

from orderfilter.types import PropertyCatalog

CatalogLookup = Callable[[Any], PropertyCatalog]


@cache
def model_catalog(model: type) -> tuple[str, ...]:
    """Return the column attribute names of a mapped class, in mapper order.

    Evaluated once per model; the mapper is fully configured by the time the first request comes in.
    """
    return tuple(key for key, _column in inspect(model).columns.items())
