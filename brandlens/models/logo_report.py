# brandlens/models/logo_report.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ReportStatus(Enum):
    """신고 문서의 검토 상태. 이 서버는 최초 상태만 기록하고 이후 검토는 외부에서 합니다."""
    PENDING_REVIEW = "pending_review"


@dataclass
class LogoReport:
    """
    Firestore 'suspicious_logos' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    이미지는 별도 스토리지 없이 base64 문자열 그대로 저장합니다.
    """
    analysis: Dict[str, Any]
    image_base64: str
    mime_type: Optional[str] = None
    status: ReportStatus = ReportStatus.PENDING_REVIEW

    def to_document(self, reported_at: Any) -> Dict[str, Any]:
        """
        Firestore 에 저장할 문서 딕셔너리를 만듭니다.

        :param reported_at: 보통 firestore.SERVER_TIMESTAMP 센티널
        """
        return {
            'analysis': self.analysis,
            'imageBase64': self.image_base64,
            'mimeType': self.mime_type,
            'reportedAt': reported_at,
            'status': self.status.value,
        }
