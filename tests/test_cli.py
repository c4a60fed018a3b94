import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from filePreview.cli import app

runner = CliRunner()

ROWS = [
    {"id": "069A01", "title": "Contract", "created_date": "2024-03-02T09:15:00Z", "content_size": 482113, "file_type": "PDF", "latest_version_id": "068A01"},
    {"id": "069A02", "title": "Photo", "created_date": "2024-03-04T16:40:00Z", "content_size": 1835008, "file_type": "JPG", "latest_version_id": "068A02"},
    {"id": "069A03", "title": "Notes", "created_date": "2024-02-21T11:05:00Z", "content_size": 5120, "file_type": "TXT", "latest_version_id": "068A03"},
    {"id": "069A04", "title": "Budget", "created_date": "2024-01-30T08:00:00Z", "content_size": 40960, "file_type": "CSV", "latest_version_id": "068A04"},
    {"id": "069A05", "title": "Logo", "created_date": "2024-03-05T12:00:00Z", "content_size": 20480, "file_type": "PNG", "latest_version_id": "068A05"},
]


@pytest.fixture
def fixture_path(tmp_path):
    path = tmp_path / "attachments.json"
    path.write_text(json.dumps({"media_base_url": "https://h.example", "attachments": {"500A": ROWS}}))
    return path


def test_show_first_page(fixture_path):
    result = runner.invoke(app, ["show", str(fixture_path), "500A"])

    assert result.exit_code == 0, result.output
    assert "Files (3+)" in result.output
    assert "offset=3 total=5 more=True" in result.output


def test_show_load_more(fixture_path):
    result = runner.invoke(app, ["show", str(fixture_path), "500A", "--load-more", "2"])

    assert result.exit_code == 0, result.output
    assert "Files (5)" in result.output
    assert "offset=5 total=5 more=False" in result.output


def test_show_with_filter_and_sort(fixture_path):
    result = runner.invoke(
        app,
        ["show", str(fixture_path), "500A", "-x", "gt100KB", "--sort", "size", "--sort", "size"],
    )

    assert result.exit_code == 0, result.output
    assert "Files (3)" in result.output
    assert "sorted by size, ascending" in result.output
    assert "offset=3 total=3 more=False" in result.output


def test_show_with_page_size_override(fixture_path):
    result = runner.invoke(app, ["show", str(fixture_path), "500A", "--page-size", "10"])

    assert result.exit_code == 0, result.output
    assert "Files (5)" in result.output


def test_broken_fixture_exits_with_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{nope")

    result = runner.invoke(app, ["show", str(path), "500A"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_format_size():
    result = runner.invoke(app, ["format-size", "1048576"])

    assert result.exit_code == 0
    assert result.output.strip() == "1 MB"


def test_show_bundled_demo_fixture():
    demo = Path(__file__).resolve().parents[1] / "demo" / "attachments.json"

    result = runner.invoke(app, ["show", str(demo), "500000000000001", "--upload", "069A04"])

    assert result.exit_code == 0, result.output
    assert "Files (4+)" in result.output
    assert "offset=3 total=6 more=True" in result.output
