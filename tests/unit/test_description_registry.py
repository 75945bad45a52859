"""Tests for DescriptionRegistry interning and reference counting."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from pricemovers.selection.registry import DescriptionRegistry


class TestIntern:
    def test_first_intern_assigns_code_zero(self) -> None:
        registry = DescriptionRegistry()
        assert registry.intern("ASPIRIN 81 MG") == 0
        assert registry.use_count(0) == 1
        assert registry.next_code == 1

    def test_repeat_intern_reuses_code_and_counts(self) -> None:
        registry = DescriptionRegistry()
        code = registry.intern("a")
        assert registry.intern("a") == code
        assert registry.use_count(code) == 2
        assert len(registry) == 1

    def test_distinct_descriptions_get_distinct_codes(self) -> None:
        registry = DescriptionRegistry()
        assert registry.intern("a") != registry.intern("b")
        assert len(registry) == 2

    @given(st.text(min_size=1))
    def test_lookup_round_trip(self, description: str) -> None:
        registry = DescriptionRegistry()
        assert registry.lookup(registry.intern(description)) == description


class TestRelease:
    def test_release_decrements(self) -> None:
        registry = DescriptionRegistry()
        code = registry.intern("a")
        registry.intern("a")
        registry.release(code)
        assert registry.use_count(code) == 1
        assert registry.lookup(code) == "a"

    def test_release_to_zero_forgets_description(self) -> None:
        registry = DescriptionRegistry()
        code = registry.intern("a")
        registry.release(code)
        assert registry.lookup(code) is None
        assert registry.code_for("a") is None
        assert "a" not in registry
        assert registry.use_count(code) == 0
        assert len(registry) == 0

    def test_codes_are_never_reused(self) -> None:
        registry = DescriptionRegistry()
        first = registry.intern("a")
        registry.release(first)
        second = registry.intern("a")
        assert second != first
        assert registry.lookup(first) is None
        assert registry.lookup(second) == "a"

    def test_release_of_unknown_code_is_noop(self) -> None:
        registry = DescriptionRegistry()
        code = registry.intern("a")
        registry.release(999)
        registry.release(code)
        registry.release(code)
        assert len(registry) == 0
        assert registry.total_references() == 0

    def test_total_references(self) -> None:
        registry = DescriptionRegistry()
        registry.intern("a")
        registry.intern("a")
        registry.intern("b")
        assert registry.total_references() == 3
