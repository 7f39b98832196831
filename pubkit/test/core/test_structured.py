from __future__ import annotations

from pubkit.core.structured import as_str_dict, get_str, get_str_list, get_table


def test_as_str_dict() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_get_str_strips_and_rejects_blank() -> None:
    table: dict[str, object] = {"name": "  pkg ", "blank": "   ", "num": 3}

    assert get_str(table, "name") == "pkg"
    assert get_str(table, "blank") is None
    assert get_str(table, "num") is None
    assert get_str(table, "missing") is None


def test_get_table() -> None:
    table: dict[str, object] = {"release": {"preid": "beta"}, "flat": "x"}

    assert get_table(table, "release") == {"preid": "beta"}
    assert get_table(table, "flat") is None


def test_get_str_list() -> None:
    table: dict[str, object] = {
        "ok": ["pnpm", "run"],
        "empty": [],
        "mixed": ["pnpm", 1],
        "blank": ["pnpm", " "],
        "scalar": "pnpm",
    }

    assert get_str_list(table, "ok") == ["pnpm", "run"]
    assert get_str_list(table, "empty") == []
    assert get_str_list(table, "mixed") is None
    assert get_str_list(table, "blank") is None
    assert get_str_list(table, "scalar") is None
