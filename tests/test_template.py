"""Tests for the sql template composer."""

import dataclasses

import pytest

from sql_strings import (
    InvalidArgument,
    RenderContext,
    escape_literal,
    ident,
    lines,
    param,
    parameterize,
    raw,
    sql,
    to_sql,
)
from sql_strings.fragments.compose import dedent


def inline_bindings(result):
    """Substitute escaped bindings for each placeholder, in order."""
    pieces = result.sql.split("?")
    assert len(pieces) == len(result.bindings) + 1
    text = pieces[0]
    for binding, piece in zip(result.bindings, pieces[1:]):
        text += escape_literal(binding) + piece
    return text


def test_sql_combines_values():
    result = sql(
        ["SELECT * FROM ", " WHERE a = ", " AND b = ", ""],
        ident("nsp.tbl"),
        "users",
        2,
    ).to_sql()
    assert result.sql == 'SELECT * FROM "nsp"."tbl" WHERE a = ? AND b = ?'
    assert result.bindings == ["users", 2]


def test_unmarked_values_are_parameters():
    query = sql(["WHERE name = ", ""], "testuser")
    result = query.to_sql()
    assert result.sql == "WHERE name = ?"
    assert result.bindings == ["testuser"]
    assert query.to_string() == "WHERE name = 'testuser'"
    assert str(query) == "WHERE name = 'testuser'"


def test_falsy_values_are_parameters():
    result = sql(["LIMIT ", " OFFSET ", ""], 0, False).to_sql()
    assert result.sql == "LIMIT ? OFFSET ?"
    assert result.bindings == [0, False]
    assert sql(["LIMIT ", ""], 0).to_string() == "LIMIT 0"


def test_none_renders_null():
    result = sql(["WHERE deleted_at IS ", ""], None).to_sql()
    assert result.sql == "WHERE deleted_at IS NULL"
    assert result.bindings == []


def test_normalizes_indentation():
    query = sql(
        [
            '\n      SELECT * FROM "accounts"\n      WHERE id = ',
            "\n      AND name = ",
            "\n    ",
        ],
        1,
        "test",
    )
    result = query.to_sql()
    assert result.sql == 'SELECT * FROM "accounts"\nWHERE id = ?\nAND name = ?'
    assert result.bindings == [1, "test"]


def test_nested_templates():
    sub_select = sql(["SELECT user_id FROM accounts WHERE id = ", ""], 1)
    main_select = sql(
        [
            "\n    SELECT users.* FROM users\n    WHERE id IN (\n      ",
            "\n    )\n    AND email = ",
            "\n  ",
        ],
        sub_select,
        "test@example.com",
    )
    result = main_select.to_sql()
    assert result.sql == (
        "SELECT users.* FROM users\n"
        "WHERE id IN (\n"
        "  SELECT user_id FROM accounts WHERE id = ?\n"
        ")\n"
        "AND email = ?"
    )
    assert result.bindings == [1, "test@example.com"]


def test_binding_order_follows_text_order(silent):
    query = sql(
        ["A ", " B ", " C ", " D ", ""],
        1,
        sql(["x ", " y ", ""], 2, parameterize([3, 4])),
        lines([sql(["", ""], 5), raw(""), silent(6), param(7)]),
        8,
    )
    assert query.to_sql().bindings == [1, 2, 3, 4, 5, 6, 7, 8]


def test_parameterized_and_inlined_renders_agree():
    query = sql(
        ["SELECT * FROM ", " WHERE a = ", " AND b IN (", ") AND c = ", " AND d IS ", ""],
        ident("t"),
        "it's",
        parameterize([1, 2.5, True]),
        sql(["lower(", ")"], "X"),
        None,
    )
    assert inline_bindings(query.to_sql()) == query.to_string()


def test_rendering_is_repeatable():
    query = sql(["SELECT * FROM t WHERE id = ", ""], 1)
    assert to_sql(query) == to_sql(query)
    assert to_sql(query, {"with_parameters": False}) == to_sql(
        query, {"with_parameters": False}
    )


def test_result_method_and_hooks():
    result = sql(["SELECT 1"]).to_sql()
    assert result.method == "unknown"
    assert result.hooks == {}
    assert sql(["SELECT 1"]).to_sql({"method": "select"}).method == "select"


def test_to_sql_is_memoized():
    query = sql(["SELECT ", ""], 1)
    first = query.to_sql()
    assert query.to_sql() is first
    assert query.to_sql({}) is first


def test_memoized_result_matches_fresh_render():
    query = sql(["SELECT ", " FROM t"], parameterize([1, 2]))
    options = {"with_parameters": True, "timezone": "+01:00"}
    cached = query.to_sql(options)
    assert query.to_sql(options) is cached
    assert cached == to_sql(query, options)


def test_memo_uses_shallow_equality():
    query = sql(["SELECT ", ""], 1)
    first = query.to_sql({"with_parameters": False, "escape": escape_literal})
    second = query.to_sql({"with_parameters": False, "escape": escape_literal})
    assert second is first
    assert second.sql == "SELECT 1"


def test_memo_invalidated_by_changed_options():
    query = sql(["SELECT ", ""], 1)
    assert query.to_sql({"with_parameters": False}).sql == "SELECT 1"
    assert query.to_sql().sql == "SELECT ?"
    assert query.to_sql({"with_parameters": False}).sql == "SELECT 1"


def test_memo_not_stale_after_options_mutation():
    query = sql(["SELECT ", ""], 1)
    options = {"with_parameters": True}
    assert query.to_sql(options).sql == "SELECT ?"
    options["with_parameters"] = False
    assert query.to_sql(options).sql == "SELECT 1"


def test_memo_with_render_context():
    query = sql(["SELECT ", ""], 1)
    context = RenderContext(with_parameters=False)
    first = query.to_sql(context)
    assert query.to_sql(RenderContext(with_parameters=False)) is first
    assert query.to_sql(context.replace(timezone="local")) is not first


def test_template_is_immutable():
    query = sql(["SELECT ", ""], 1)
    first = query.to_sql()
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.strings = ("SELECT 2",)
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.values = ()
    assert query.to_sql() is first
    assert query.to_sql().sql == "SELECT ?"


def test_sql_rejects_plain_string():
    with pytest.raises(InvalidArgument):
        sql("SELECT 1")


def test_sql_rejects_mismatched_parts():
    with pytest.raises(InvalidArgument):
        sql(["SELECT ", ""])
    with pytest.raises(InvalidArgument):
        sql(["SELECT ", ""], 1, 2)


def test_dedent_strips_leading_blank_lines():
    assert dedent(["  \n\n    SELECT 1\n    FROM t"]) == ["  \n\nSELECT 1\nFROM t"]
    assert sql(["  \n\n    SELECT 1\n    FROM t"]).to_sql().sql == "SELECT 1\nFROM t"


def test_dedent_tabs():
    assert sql(["\n\tSELECT 1\n\tFROM t\n"]).to_sql().sql == "SELECT 1\nFROM t"


def test_dedent_applies_to_every_part():
    assert dedent(["\n  SELECT ", "\n  FROM t\n"]) == ["\nSELECT ", "\nFROM t\n"]


def test_dedent_without_indentation():
    assert dedent(["\n\nSELECT ", "\n  FROM t"]) == ["SELECT ", "\n  FROM t"]


def test_dedent_keeps_deeper_indentation():
    query = sql(["\n  SELECT\n    a,\n    b\n  FROM t\n"])
    assert query.to_sql().sql == "SELECT\n  a,\n  b\nFROM t"
