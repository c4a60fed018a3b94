import pytest

from filePreview.domain.models.core import SortDirection, SortField
from filePreview.domain.services.sort_spec import SortSpec
from filePreview.errors import UnknownSortFieldError


def test_defaults_to_newest_first():
    spec = SortSpec()

    assert spec.as_tuple() == (SortField.CREATED_DATE, SortDirection.DESC)
    assert spec.icon == "utility:arrowdown"


def test_reselecting_the_same_field_flips_direction_each_time():
    spec = SortSpec(SortField.TITLE, SortDirection.ASC)

    assert spec.select(SortField.TITLE) == (SortField.TITLE, SortDirection.DESC)
    assert spec.select(SortField.TITLE) == (SortField.TITLE, SortDirection.ASC)
    assert spec.icon == "utility:arrowup"


def test_switching_field_keeps_direction():
    spec = SortSpec(SortField.CREATED_DATE, SortDirection.ASC)

    assert spec.select(SortField.SIZE) == (SortField.SIZE, SortDirection.ASC)
    assert spec.select(SortField.TITLE) == (SortField.TITLE, SortDirection.ASC)


@pytest.mark.parametrize("name", ["size", "ContentDocument.ContentSize"])
def test_select_accepts_alias_and_wire_name(name):
    spec = SortSpec()

    assert spec.select(name) == (SortField.SIZE, SortDirection.DESC)
    assert spec.is_sorted_by("size")
    assert not spec.is_sorted_by(SortField.TITLE)


def test_unknown_field_raises_without_changing_state():
    spec = SortSpec()

    with pytest.raises(UnknownSortFieldError):
        spec.select("owner")
    assert spec.as_tuple() == (SortField.CREATED_DATE, SortDirection.DESC)
