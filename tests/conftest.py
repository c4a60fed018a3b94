import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Callable, List

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from filePreview.domain.models.core import AttachmentRecord  # noqa: E402
from filePreview.infrastructure.services.in_memory_query_service import (  # noqa: E402
    InMemoryAttachmentQueryService,
)

PARENT_ID = "500000000000001"
BASE_URL = "https://example.file.force.com"


def make_record(
    index: int,
    size: int = 2048,
    file_type: str = "pdf",
    title: str | None = None,
) -> AttachmentRecord:
    return AttachmentRecord(
        id=f"069{index:03d}",
        title=title or f"File {index:03d}",
        created_date=datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(days=index),
        content_size=size,
        file_type=file_type,
        latest_version_id=f"068{index:03d}",
    )


class QueuedFetchRunner:
    """FetchRunner that parks jobs until the test resolves them, in any order."""

    def __init__(self) -> None:
        self.pending: List[tuple[Callable[[], Any], Callable, Callable]] = []

    def submit(self, job, on_success, on_failure) -> None:
        self.pending.append((job, on_success, on_failure))

    def resolve(self, index: int = 0) -> None:
        job, on_success, on_failure = self.pending.pop(index)
        try:
            result = job()
        except Exception as exc:
            on_failure(exc)
            return
        on_success(result)

    def fail(self, index: int = 0, exc: Exception | None = None) -> None:
        _job, _on_success, on_failure = self.pending.pop(index)
        on_failure(exc or TimeoutError("query timed out"))

    def resolve_all(self) -> None:
        while self.pending:
            self.resolve(0)


@pytest.fixture
def records() -> List[AttachmentRecord]:
    return [make_record(i, size=(i + 1) * 20 * 1024) for i in range(5)]


@pytest.fixture
def service(records) -> InMemoryAttachmentQueryService:
    return InMemoryAttachmentQueryService({PARENT_ID: records}, media_base_url=BASE_URL)


@pytest.fixture
def queued_runner() -> QueuedFetchRunner:
    return QueuedFetchRunner()
