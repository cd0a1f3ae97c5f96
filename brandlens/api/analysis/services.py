# brandlens/api/analysis/services.py
import logging
from typing import Optional
from flask import current_app

from brandlens.models.analysis_result import AnalysisResult
from brandlens.utils.image_utils import guess_mime_type, is_image_mime_type

logger = logging.getLogger(__name__)


def analyze_logo_image(image_bytes: bytes, mime_type: Optional[str] = None) -> AnalysisResult:
    """
    앱에 등록된 추론 서비스로 로고 이미지를 분석합니다.
    MIME 타입이 없거나 이미지 타입이 아니면 바이트로 추정한 값을 사용합니다.
    """
    if not image_bytes:
        raise ValueError("이미지 데이터가 비어 있습니다.")

    if not is_image_mime_type(mime_type):
        mime_type = guess_mime_type(image_bytes)

    analyzer = current_app.services['analyzer']
    logger.info(f"로고 분석 요청: provider={analyzer.name}, mime={mime_type}, size={len(image_bytes)}B")
    return analyzer.analyze_logo(image_bytes, mime_type)
