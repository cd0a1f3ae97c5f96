# brandlens/api/reports/services.py
import logging
from typing import Any, Dict, Optional

from firebase_admin import firestore

from brandlens.models.logo_report import LogoReport
from brandlens.services.firestore_service import FirestoreService
from brandlens.utils.image_utils import split_data_url

logger = logging.getLogger(__name__)


class ReportService:
    """
    의심 로고 신고를 Firestore 에 저장하는 서비스 클래스.
    신고 한 건당 문서 한 건을 쓰며, 재시도나 중복 검사는 하지 않습니다.
    """

    def __init__(self, firestore_service: FirestoreService, collection_name: str):
        self.firestore_service = firestore_service
        self.collection_name = collection_name

    def submit_report(self, analysis: Dict[str, Any], image_base64: str,
                      mime_type: Optional[str] = None) -> str:
        """
        분석 결과와 이미지를 묶어 신고 문서를 생성합니다.

        :param analysis: 분석 결과 스냅샷 (camelCase 딕셔너리)
        :param image_base64: base64 이미지 또는 data URL (받은 그대로 저장)
        :param mime_type: 이미지 MIME 타입. 없으면 data URL 접두사에서 추출합니다.
        :return: 생성된 신고 문서 ID
        """
        if not mime_type:
            mime_type, _ = split_data_url(image_base64)

        report = LogoReport(
            analysis=analysis,
            image_base64=image_base64,
            mime_type=mime_type,
        )
        report_id = self.firestore_service.add_document(
            self.collection_name,
            report.to_document(reported_at=firestore.SERVER_TIMESTAMP)
        )

        logger.info(f"의심 로고 신고 저장 완료: {report_id} (brand={analysis.get('brandName')})")
        return report_id
