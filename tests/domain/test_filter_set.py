import pytest

from filePreview.domain.services.filter_set import EmptyFilterPolicy, FilterSet, SizeFilter
from filePreview.errors import UnknownFilterError

ALL = ["gt100KB", "lt100KBgt10KB", "lt10KB"]


def test_all_declared_filters_start_active():
    filters = FilterSet()

    assert filters.active_ids() == ALL
    assert [f.label for f in filters.filters] == [">= 100 KB", "< 100 KB and > 10 KB", "<= 10 KB"]


def test_toggle_returns_active_ids_in_declaration_order():
    filters = FilterSet()

    assert filters.toggle("lt100KBgt10KB") == ["gt100KB", "lt10KB"]
    assert filters.toggle("gt100KB") == ["lt10KB"]
    # re-enabling the first filter puts it back first, not last
    assert filters.toggle("gt100KB") == ["gt100KB", "lt10KB"]


def test_toggling_twice_restores_the_original_list():
    filters = FilterSet()
    before = filters.active_ids()

    filters.toggle("lt10KB")
    after = filters.toggle("lt10KB")

    assert after == before


def test_unknown_filter_raises():
    with pytest.raises(UnknownFilterError):
        FilterSet().toggle("huge")


def test_custom_filters_are_respected():
    filters = FilterSet([SizeFilter("a", "A", checked=False), SizeFilter("b", "B")])

    assert filters.active_ids() == ["b"]
    assert filters.toggle("a") == ["a", "b"]


class TestEmptyPolicy:
    def _all_off(self, policy):
        filters = FilterSet(empty_policy=policy)
        for filter_id in ALL:
            filters.toggle(filter_id)
        assert filters.is_empty
        return filters

    def test_pass_through_sends_an_empty_condition_list(self):
        assert self._all_off(EmptyFilterPolicy.PASS_THROUGH).conditions() == []

    def test_show_all_substitutes_every_filter(self):
        assert self._all_off(EmptyFilterPolicy.SHOW_ALL).conditions() == ALL

    def test_show_none_means_no_fetch(self):
        assert self._all_off(EmptyFilterPolicy.SHOW_NONE).conditions() is None

    def test_policy_accepts_its_string_value(self):
        assert FilterSet(empty_policy="show_all").empty_policy is EmptyFilterPolicy.SHOW_ALL

    def test_conditions_are_active_ids_when_not_empty(self):
        filters = FilterSet(empty_policy=EmptyFilterPolicy.SHOW_NONE)
        filters.toggle("gt100KB")

        assert filters.conditions() == ["lt100KBgt10KB", "lt10KB"]
