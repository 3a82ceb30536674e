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
from orderfilter.db.catalog import CatalogLookup, model_catalog
from orderfilter.db.query import apply_order_clauses, order_by_expressions, render_order_by, source_alias

__all__ = [
    "CatalogLookup",
    "apply_order_clauses",
    "model_catalog",
    "order_by_expressions",
    "render_order_by",
    "source_alias",
]
