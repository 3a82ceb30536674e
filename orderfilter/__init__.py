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

"""Translate query-string ordering parameters into SQL ORDER BY clauses."""

__version__ = "1.0.0"

from orderfilter.db.sorting import OrderFilter, SortOrder, describe_order_parameters, resolve_order
from orderfilter.settings import app_settings
from orderfilter.types import OrderClause

__all__ = [
    "OrderClause",
    "OrderFilter",
    "SortOrder",
    "app_settings",
    "describe_order_parameters",
    "resolve_order",
]
