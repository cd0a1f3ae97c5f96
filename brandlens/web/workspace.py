# brandlens/web/workspace.py
"""
브라우저 한 개(세션 한 개)의 화면 상태를 서버 메모리에 보관합니다.

선택한 이미지, 분석 결과, 오류 메시지, 신고 성공 여부가 여기에 담기며
새 이미지를 고르면 이전 분석과 신고 상태는 모두 버려집니다.
"""
import logging
import threading
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from typing import Optional

from brandlens.models.analysis_result import AnalysisResult

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    workspace_id: str
    image_bytes: Optional[bytes] = None
    mime_type: Optional[str] = None
    filename: Optional[str] = None
    analysis: Optional[AnalysisResult] = None
    error: Optional[str] = None
    report_id: Optional[str] = None
    is_camera_active: bool = False

    @property
    def has_image(self) -> bool:
        return self.image_bytes is not None

    @property
    def can_analyze(self) -> bool:
        return self.has_image

    @property
    def report_submitted(self) -> bool:
        return self.report_id is not None

    @property
    def can_report(self) -> bool:
        """분석 결과가 있고 아직 신고하지 않았을 때만 신고할 수 있습니다."""
        return self.analysis is not None and not self.report_submitted

    def select_image(self, image_bytes: bytes, mime_type: str, filename: Optional[str] = None):
        self.image_bytes = image_bytes
        self.mime_type = mime_type
        self.filename = filename
        self.analysis = None
        self.error = None
        self.report_id = None
        self.is_camera_active = False

    def start_camera(self):
        self.is_camera_active = True
        self.image_bytes = None
        self.mime_type = None
        self.filename = None
        self.analysis = None
        self.error = None
        self.report_id = None

    def stop_camera(self):
        self.is_camera_active = False

    def set_analysis(self, analysis: AnalysisResult):
        self.analysis = analysis
        self.error = None

    def set_error(self, message: str):
        self.error = message

    def mark_reported(self, report_id: str):
        self.report_id = report_id
        self.error = None


class WorkspaceStore:
    """
    Workspace 를 ID 로 보관하는 프로세스 내부 저장소.
    용량을 넘으면 가장 오래 사용하지 않은 항목부터 버립니다.
    """

    def __init__(self, capacity: int = 256):
        if capacity < 1:
            raise ValueError("capacity는 1 이상이어야 합니다.")
        self.capacity = capacity
        self._items: "OrderedDict[str, Workspace]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self):
        return len(self._items)

    def get(self, workspace_id: Optional[str]) -> Optional[Workspace]:
        if not workspace_id:
            return None
        with self._lock:
            workspace = self._items.get(workspace_id)
            if workspace is not None:
                self._items.move_to_end(workspace_id)
            return workspace

    def create(self) -> Workspace:
        workspace = Workspace(workspace_id=uuid.uuid4().hex)
        with self._lock:
            self._items[workspace.workspace_id] = workspace
            while len(self._items) > self.capacity:
                evicted_id, _ = self._items.popitem(last=False)
                logger.debug(f"워크스페이스 제거 (용량 초과): {evicted_id}")
        return workspace

    def get_or_create(self, workspace_id: Optional[str]) -> Workspace:
        return self.get(workspace_id) or self.create()

    def discard(self, workspace_id: Optional[str]):
        if not workspace_id:
            return
        with self._lock:
            self._items.pop(workspace_id, None)
