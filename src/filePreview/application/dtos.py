from dataclasses import dataclass, field
from typing import Dict, List

from filePreview.domain.models.core import AttachmentRecord


@dataclass
class InitialFetchResult:
    records: List[AttachmentRecord] = field(default_factory=list)
    total_count: int = 0
    media_base_url: str = ""


@dataclass(frozen=True)
class Notification:
    """Payload for the toast presenter."""
    title: str
    message: str
    severity: str = "error"


@dataclass(frozen=True)
class PreviewRequest:
    selected_record_id: str
    record_ids: str

    def as_state(self) -> Dict[str, str]:
        return {
            "selectedRecordId": self.selected_record_id,
            "recordIds": self.record_ids,
        }
