import json

from typer.testing import CliRunner

from orderfilter.cli.main import app, parse_properties


def test_resolve():
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["resolve", "order[name]=asc&order[bogus]=desc&order[age]=", "-c", "name,age,id", "-p", "name"]
        + ["-p", "age=DESC"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "ORDER BY o.name ASC, o.age DESC"


def test_resolve_without_ordering():
    runner = CliRunner()

    result = runner.invoke(app, ["resolve", "page=2", "--catalog", "id,name", "--alias", "p"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "ORDER BY p.id ASC"

    result = runner.invoke(app, ["resolve", "order[name]=sideways", "--catalog", "id,name"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "No ordering"


def test_resolve_parameter_name():
    runner = CliRunner()
    result = runner.invoke(app, ["resolve", "sort[name]=desc&order[id]=asc", "-c", "id,name", "--parameter", "sort"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "ORDER BY o.name DESC"


def test_describe():
    runner = CliRunner()
    result = runner.invoke(app, ["describe", "-c", "id, name,age", "-p", "name", "-p", "age=DESC"])

    assert result.exit_code == 0
    assert json.loads(result.stdout) == {
        "order[name]": {
            "property": "name",
            "type": "string",
            "required": False,
            "requirement": "ASC|DESC",
            "description": "Order by name",
        },
        "order[age]": {
            "property": "age",
            "type": "string",
            "required": False,
            "requirement": "ASC|DESC",
            "description": "Order by age",
        },
    }


def test_parse_properties():
    assert parse_properties(None) is None
    assert parse_properties([]) is None
    assert parse_properties(["name", "age=desc", " id = "]) == {"name": None, "age": "desc", "id": None}
