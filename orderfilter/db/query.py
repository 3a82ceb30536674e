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
from typing import Any, Optional

import structlog
from sqlalchemy import Select
from sqlalchemy.orm import aliased
from sqlalchemy.sql import expression
from sqlalchemy.sql.elements import UnaryExpression

from orderfilter.db.errors import CallableErrorHandler
from orderfilter.settings import app_settings
from orderfilter.types import OrderClause, SortOrder

logger = structlog.get_logger(__name__)


def order_by_expressions(source: Any, clauses: Iterable[OrderClause]) -> list[UnaryExpression]:
    """Turn clauses into SQLAlchemy order-by expressions on the given source relation.

    Args:
        source: A mapped class or an aliased entity, e.g. `aliased(PersonTable, name="o")`.
        clauses: Resolved clauses, first clause is the primary sort key.

    Raises ValueError when the source has no attribute for a clause's property.
    """
    expressions = []
    for clause in clauses:
        column = getattr(source, clause.property, None)
        if column is None:
            raise ValueError(f"Unable to sort on unknown field: {clause.property}")
        sa_sort = expression.desc if clause.direction == SortOrder.DESC else expression.asc
        expressions.append(sa_sort(column))
    return expressions


def apply_order_clauses(
    stmt: Select,
    clauses: Iterable[OrderClause],
    source: Any,
    handle_sort_error: Optional[CallableErrorHandler] = None,
) -> Select:
    """Append ORDER BY terms to the statement, one per clause, in sequence.

    Without an error handler a clause that doesn't match the source raises ValueError. With a handler the
    clause is reported and skipped, and the remaining clauses are still applied.
    """
    for clause in clauses:
        try:
            (order_by,) = order_by_expressions(source, [clause])
        except ValueError as exception:
            if handle_sort_error is None:
                raise
            handle_sort_error(str(exception), field=clause.property, order=clause.direction)
            continue
        stmt = stmt.order_by(order_by)
    return stmt


def render_order_by(clauses: Iterable[OrderClause], alias: str = "o") -> str:
    """Render clauses as the body of an ORDER BY clause.

    >>> render_order_by([OrderClause("name", "ASC"), OrderClause("age", "DESC")])
    'o.name ASC, o.age DESC'
    """
    return ", ".join(f"{alias}.{clause.property} {clause.direction}" for clause in clauses)


def source_alias(model: type, name: Optional[str] = None) -> Any:
    """Alias the mapped class as the source relation ORDER BY terms refer to (`o` unless configured otherwise)."""
    return aliased(model, name=name or app_settings.SOURCE_ALIAS)
