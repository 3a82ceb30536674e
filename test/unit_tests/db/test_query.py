from unittest import mock

import pytest
from sqlalchemy import select

from orderfilter.db.query import apply_order_clauses, order_by_expressions, render_order_by, source_alias
from orderfilter.types import OrderClause


def test_source_alias(person_table):
    o = source_alias(person_table)

    assert str(select(o.id)).endswith("FROM people AS o")
    assert str(select(source_alias(person_table, "p").id)).endswith("FROM people AS p")


def test_apply_order_clauses_sql(person_table):
    o = source_alias(person_table)
    clauses = [OrderClause("name", "ASC"), OrderClause("age", "DESC")]

    stmt = apply_order_clauses(select(o.id), clauses, o)

    assert str(stmt).endswith("ORDER BY o.name ASC, o.age DESC")


@pytest.mark.parametrize(
    "clauses,expected",
    [
        ([], [1, 2, 3, 4]),
        ([OrderClause("id", "DESC")], [4, 3, 2, 1]),
        ([OrderClause("name", "ASC"), OrderClause("age", "DESC")], [2, 4, 3, 1]),
        ([OrderClause("name", "ASC"), OrderClause("age", "ASC")], [4, 2, 3, 1]),
        ([OrderClause("age", "ASC"), OrderClause("name", "DESC")], [4, 3, 2, 1]),
        ([OrderClause("created_at", "DESC")], [4, 1, 3, 2]),
    ],
)
def test_apply_order_clauses_ordering(session, person_table, clauses, expected):
    o = source_alias(person_table)
    stmt = select(o.id)
    if not clauses:
        stmt = stmt.order_by(o.id)

    assert list(session.scalars(apply_order_clauses(stmt, clauses, o))) == expected


def test_apply_order_clauses_on_mapped_class(session, person_table):
    stmt = apply_order_clauses(select(person_table.id), [OrderClause("age", "DESC")], person_table)

    assert list(session.scalars(stmt))[0] == 1


def test_apply_order_clauses_unknown_attribute(person_table):
    o = source_alias(person_table)

    with pytest.raises(ValueError, match="Unable to sort on unknown field: bogus"):
        apply_order_clauses(select(o.id), [OrderClause("bogus", "ASC")], o)


def test_apply_order_clauses_unknown_attribute_with_handler(person_table):
    o = source_alias(person_table)
    handle_sort_error = mock.Mock()

    stmt = apply_order_clauses(
        select(o.id), [OrderClause("bogus", "ASC"), OrderClause("name", "DESC")], o, handle_sort_error
    )

    assert str(stmt).endswith("ORDER BY o.name DESC")
    handle_sort_error.assert_called_once_with("Unable to sort on unknown field: bogus", field="bogus", order="ASC")


def test_order_by_expressions(person_table):
    expressions = order_by_expressions(person_table, [OrderClause("name", "DESC")])

    assert [str(expression) for expression in expressions] == ["people.name DESC"]


@pytest.mark.parametrize(
    "clauses,alias,expected",
    [
        ([], "o", ""),
        ([OrderClause("id", "ASC")], "o", "o.id ASC"),
        ([OrderClause("name", "ASC"), OrderClause("age", "DESC")], "o", "o.name ASC, o.age DESC"),
        ([("name", "DESC")], "p", "p.name DESC"),
    ],
)
def test_render_order_by(clauses, alias, expected):
    assert render_order_by([OrderClause(*clause) for clause in clauses], alias) == expected
