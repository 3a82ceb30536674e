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
import json
from typing import Optional

import typer
from nwastdlib.logging import initialise_logging
from starlette.datastructures import QueryParams

from orderfilter.api.helpers import extract_order_spec
from orderfilter.db.query import render_order_by
from orderfilter.db.sorting import describe_as_dict, describe_order_parameters, resolve_order
from orderfilter.log_config import LOGGER_OVERRIDES
from orderfilter.settings import app_settings
from orderfilter.types import PropertyDefaults

app: typer.Typer = typer.Typer()

CatalogOption = typer.Option(..., "--catalog", "-c", help="Comma separated field names of the resource")
PropertyOption = typer.Option(
    None,
    "--property",
    "-p",
    help="Enable ordering on a property, optionally with a default direction: 'name' or 'age=DESC'. "
    "Without any, every catalog property is enabled.",
)
ParameterOption = typer.Option(None, "--parameter", help="Name of the order query parameter")


def parse_catalog(catalog: str) -> list[str]:
    return [field.strip() for field in catalog.split(",") if field.strip()]


def parse_properties(properties: Optional[list[str]]) -> PropertyDefaults:
    """Parse `name` / `name=DIRECTION` options into the allow-list mapping.

    >>> parse_properties(["name", "age=DESC"])
    {'name': None, 'age': 'DESC'}
    """
    if not properties:
        return None
    enabled: dict[str, Optional[str]] = {}
    for item in properties:
        name, _, direction = item.partition("=")
        enabled[name.strip()] = direction.strip() or None
    return enabled


@app.callback()
def main() -> None:
    """Inspect how query strings translate to ORDER BY clauses."""
    initialise_logging(LOGGER_OVERRIDES)


@app.command()
def resolve(
    query_string: str = typer.Argument(..., help="Query string, e.g. 'order[name]=asc&order[age]='"),
    catalog: str = CatalogOption,
    properties: Optional[list[str]] = PropertyOption,
    parameter: Optional[str] = ParameterOption,
    alias: str = typer.Option(app_settings.SOURCE_ALIAS, "--alias", help="Alias of the source relation"),
) -> None:
    """Show the ORDER BY clause a query string translates to."""
    order_spec = extract_order_spec(QueryParams(query_string), parameter or app_settings.ORDER_PARAMETER)
    clauses = resolve_order(order_spec, parse_properties(properties), parse_catalog(catalog))
    if not clauses:
        typer.echo("No ordering")
        return
    typer.echo(f"ORDER BY {render_order_by(clauses, alias)}")


@app.command()
def describe(
    catalog: str = CatalogOption,
    properties: Optional[list[str]] = PropertyOption,
    parameter: Optional[str] = ParameterOption,
) -> None:
    """Show the accepted order parameters as JSON."""
    descriptions = describe_order_parameters(
        parse_catalog(catalog), parse_properties(properties), parameter or app_settings.ORDER_PARAMETER
    )
    typer.echo(json.dumps(describe_as_dict(descriptions), indent=4))


if __name__ == "__main__":
    app()
