import datetime
from collections.abc import Iterator

import pytest
from fastapi import Depends, FastAPI
from sqlalchemy import DateTime, Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from orderfilter.api.dependencies import order_openapi_extra, order_spec_dependency
from orderfilter.db.query import apply_order_clauses, source_alias
from orderfilter.db.sorting import OrderFilter


class BaseModel(DeclarativeBase):
    pass


class PersonTable(BaseModel):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64))
    age: Mapped[int] = mapped_column(Integer)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime)


class TicketTable(BaseModel):
    __tablename__ = "tickets"

    uuid: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(64))


PEOPLE = [
    {"id": 1, "name": "Carol", "age": 41, "created_at": datetime.datetime(2024, 3, 1)},
    {"id": 2, "name": "Alice", "age": 30, "created_at": datetime.datetime(2024, 1, 1)},
    {"id": 3, "name": "Bob", "age": 30, "created_at": datetime.datetime(2024, 2, 1)},
    {"id": 4, "name": "Alice", "age": 25, "created_at": datetime.datetime(2024, 4, 1)},
]


TICKETS = [
    {"uuid": "6f1c", "title": "Broken link"},
    {"uuid": "1a2b", "title": "Add export"},
]


@pytest.fixture(scope="session")
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    BaseModel.metadata.create_all(engine)
    with Session(engine) as session:
        session.add_all(PersonTable(**person) for person in PEOPLE)
        session.add_all(TicketTable(**ticket) for ticket in TICKETS)
        session.commit()
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def order_filter() -> OrderFilter:
    return OrderFilter("order", properties={"id": None, "name": None, "age": "DESC"})


@pytest.fixture
def fastapi_app(engine, order_filter) -> FastAPI:
    app = FastAPI()

    @app.get("/people", openapi_extra=order_openapi_extra(order_filter, PersonTable))
    def list_people(order_spec: dict[str, str] = Depends(order_spec_dependency(order_filter))) -> list[int]:
        o = source_alias(PersonTable)
        stmt = apply_order_clauses(select(o.id), order_filter.resolve(PersonTable, order_spec), o)
        with Session(engine) as session:
            return list(session.scalars(stmt))

    return app


@pytest.fixture
def test_client(fastapi_app) -> Iterator[TestClient]:
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def person_table() -> type[PersonTable]:
    return PersonTable


@pytest.fixture
def ticket_table() -> type[TicketTable]:
    return TicketTable
