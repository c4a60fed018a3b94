"""Tests for the display-attribute derivation functions."""

import math

import pytest

from filePreview.domain.models.core import AttachmentRecord
from filePreview.domain.services.attribute_deriver import (
    AttributeDeriver,
    derive,
    format_bytes,
    icon_for_file_type,
    thumbnail_url,
    unit_index,
)

from conftest import BASE_URL, make_record


class TestFormatBytes:
    def test_zero_is_special_cased(self):
        assert format_bytes(0) == "0 Bytes"

    def test_missing_and_negative_sizes(self):
        assert format_bytes(None) == "0 Bytes"
        assert format_bytes(-5) == "0 Bytes"

    @pytest.mark.parametrize(
        "size, expected",
        [
            (1, "1 Bytes"),
            (1000, "1000 Bytes"),
            (1023, "1023 Bytes"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (10 * 1024, "10 KB"),
            (1048576, "1 MB"),
            (1073741824, "1 GB"),
            (1024 ** 8, "1 YB"),
        ],
    )
    def test_known_values(self, size, expected):
        assert format_bytes(size) == expected

    def test_precision_is_configurable(self):
        assert format_bytes(1234567, 3) == "1.177 MB"
        assert format_bytes(1234567, 1) == "1.2 MB"
        assert format_bytes(1234567, 0) == "1 MB"
        assert format_bytes(1000, 0) == "1000 Bytes"

    def test_sizes_beyond_the_last_unit_stay_in_yottabytes(self):
        assert format_bytes(1024 ** 9).endswith(" YB")

    @pytest.mark.parametrize("size", [1, 7, 1023, 1024, 1025, 99999, 1024 ** 3 - 1, 1024 ** 3, 5 * 1024 ** 5])
    def test_unit_index_is_floor_of_log1024(self, size):
        expected = 0
        while 1024 ** (expected + 1) <= size:
            expected += 1
        assert unit_index(size) == expected
        assert unit_index(size) == math.floor(math.log(size, 1024) + 1e-12)


class TestIcons:
    @pytest.mark.parametrize("file_type", ["png", "JPG", "Gif"])
    def test_image_extensions_share_the_image_glyph(self, file_type):
        assert icon_for_file_type(file_type) == "doctype:image"

    @pytest.mark.parametrize("file_type, expected", [("PDF", "doctype:pdf"), ("zip", "doctype:zip"), ("WORD", "doctype:word")])
    def test_supported_extensions_use_their_own_glyph(self, file_type, expected):
        assert icon_for_file_type(file_type) == expected

    @pytest.mark.parametrize("file_type", [None, "", "EXCEL_X", "heic", 5, ["pdf"]])
    def test_unknown_or_missing_type_falls_back(self, file_type):
        assert icon_for_file_type(file_type) == "doctype:attachment"


def test_thumbnail_url_embeds_version_and_rendition():
    url = thumbnail_url("https://host.example/", "068XYZ")

    assert url == (
        "https://host.example/sfc/servlet.shepherd/version/renditionDownload"
        "?rendition=THUMB120BY90&versionId=068XYZ"
    )


def test_derive_keeps_record_and_adds_attributes():
    record = make_record(1, size=2048, file_type="PNG")

    item = derive(record, BASE_URL)

    assert item.record is record
    assert item.id == record.id
    assert item.icon == "doctype:image"
    assert item.formatted_size == "2 KB"
    assert item.thumbnail_url.startswith(BASE_URL)
    assert item.thumbnail_url.endswith("versionId=068001")


def test_derive_is_idempotent():
    record = make_record(3, size=123456, file_type="csv")

    assert derive(record, BASE_URL) == derive(record, BASE_URL)


def test_malformed_record_degrades_gracefully():
    record = AttachmentRecord(id="069BAD")

    item = AttributeDeriver(BASE_URL).derive(record)

    assert item.icon == "doctype:attachment"
    assert item.formatted_size == "0 Bytes"


def test_deriver_binds_base_url_and_precision():
    deriver = AttributeDeriver("https://a.example", decimals=1)

    items = deriver.derive_all([make_record(0, size=1234567), make_record(1, size=1)])

    assert [i.formatted_size for i in items] == ["1.2 MB", "1 Bytes"]
    assert all(i.thumbnail_url.startswith("https://a.example/sfc/") for i in items)
