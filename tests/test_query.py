"""Tests for fileroute.http.query — immutable QueryParams."""

from collections.abc import Mapping

import pytest

from fileroute.http.query import QueryParams


class TestQueryParams:
    def test_getitem(self) -> None:
        q = QueryParams("q=hello&page=2")
        assert q["q"] == "hello"
        assert q["page"] == "2"

    def test_missing_key_raises(self) -> None:
        q = QueryParams("q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_contains(self) -> None:
        q = QueryParams("q=hello")
        assert "q" in q
        assert "missing" not in q

    def test_len_and_iter(self) -> None:
        q = QueryParams("a=1&b=2&c=3")
        assert len(q) == 3
        assert list(q) == ["a", "b", "c"]

    def test_get_with_default(self) -> None:
        q = QueryParams("q=hello")
        assert q.get("q") == "hello"
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_repeated_key_last_wins(self) -> None:
        q = QueryParams("tag=python&tag=rust")
        assert q["tag"] == "rust"
        assert q.get("tag") == "rust"

    def test_get_list(self) -> None:
        q = QueryParams("tag=python&tag=rust&q=hello")
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_list("q") == ["hello"]
        assert q.get_list("missing") == []

    def test_percent_and_plus_decoding(self) -> None:
        q = QueryParams("name=Ada+Lovelace&city=S%C3%A3o%20Paulo&k%20ey=v")
        assert q["name"] == "Ada Lovelace"
        assert q["city"] == "São Paulo"
        assert q["k ey"] == "v"

    def test_blank_values_kept(self) -> None:
        q = QueryParams("flag&empty=")
        assert q["flag"] == ""
        assert q["empty"] == ""

    def test_empty(self) -> None:
        q = QueryParams()
        assert len(q) == 0
        assert q.raw == ""

    def test_malformed_does_not_raise(self) -> None:
        q = QueryParams("&&%zz=%&=")
        assert q.get("%zz") == "%"

    def test_equals_dict(self) -> None:
        assert QueryParams("active=true") == {"active": "true"}

    def test_is_mapping(self) -> None:
        assert isinstance(QueryParams(), Mapping)

    def test_immutable(self) -> None:
        q = QueryParams("a=1")
        with pytest.raises(AttributeError):
            q._data = {}  # type: ignore[misc]

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"
