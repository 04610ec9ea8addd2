"""Unit tests for the serving count resolver."""

import pytest

from src.converter.errors import InvalidServingsError
from src.converter.servings import ServingsResolver, ServingsSelection, parse_servings, resolve
from src.models.models import Severity


class TestParseServings:
    @pytest.mark.parametrize("draft, expected", [("10", 10), (" 3 ", 3), (7, 7), ("1", 1)])
    def test_valid(self, draft, expected):
        assert parse_servings(draft) == expected

    @pytest.mark.parametrize("draft", ["0", "-2", "", "abc", "2.5", "1e3", 0, -1, True])
    def test_invalid(self, draft):
        with pytest.raises(InvalidServingsError):
            parse_servings(draft)


class TestResolve:
    def test_preset_returned_directly(self):
        assert resolve(ServingsSelection.PRESET, 6, "garbage") == 6

    def test_custom_parses_draft(self):
        assert resolve("custom", 6, "15") == 15

    def test_custom_invalid_draft(self):
        with pytest.raises(InvalidServingsError):
            resolve(ServingsSelection.CUSTOM, 6, "-5")


class TestServingsResolver:
    def test_starts_with_configured_default(self, notifier):
        resolver = ServingsResolver(notifier)
        assert resolver.value == 1
        assert resolver.selection is ServingsSelection.PRESET

    def test_custom_initial_value_kept(self, notifier):
        assert ServingsResolver(notifier, initial=5).value == 5

    @pytest.mark.parametrize("initial", [0, -3, True, 2.5])
    def test_rejects_invalid_initial_value(self, notifier, initial):
        with pytest.raises(ValueError, match="positive integer"):
            ServingsResolver(notifier, initial=initial)

    def test_select_preset(self, notifier):
        resolver = ServingsResolver(notifier)
        resolver.select_preset(8)
        assert resolver.value == 8

    def test_select_non_preset_raises(self, notifier):
        resolver = ServingsResolver(notifier)
        with pytest.raises(ValueError):
            resolver.select_preset(5)

    def test_draft_is_not_live(self, notifier):
        resolver = ServingsResolver(notifier, initial=4)
        resolver.select_custom()
        resolver.set_draft("10")

        assert resolver.value == 4
        assert resolver.selection is ServingsSelection.CUSTOM

    def test_apply_commits_and_returns_to_preset(self, notifier):
        resolver = ServingsResolver(notifier, initial=2)
        resolver.select_custom()
        resolver.set_draft("10")

        assert resolver.apply() == 10
        assert resolver.value == 10
        assert resolver.selection is ServingsSelection.PRESET
        assert notifier.last.title == "Servings Applied"
        assert notifier.last.description == "Recipe will be generated for 10 people"
        assert notifier.last.severity is Severity.DEFAULT

    @pytest.mark.parametrize("draft", ["0", "-3", "many", ""])
    def test_invalid_apply_keeps_committed_value(self, notifier, draft):
        resolver = ServingsResolver(notifier, initial=6)
        resolver.select_custom()
        resolver.set_draft(draft)

        assert resolver.apply() is None
        assert resolver.value == 6
        assert resolver.selection is ServingsSelection.CUSTOM
        assert notifier.last.title == "Invalid Number"
        assert notifier.last.severity is Severity.DESTRUCTIVE
