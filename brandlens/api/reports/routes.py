# brandlens/api/reports/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from brandlens.api.reports.schemas import ReportLogoSchema, ReportLogoResponseSchema
from brandlens.services.firestore_service import FirebaseConfigError

logger = logging.getLogger(__name__)

reports_bp = Blueprint('reports_bp', __name__)


@reports_bp.route('/report-logo', methods=['POST'])
def report_logo():
    """
    의심 로고 신고를 저장합니다.

    Body (JSON):
        - analysis (object, required): 분석 결과 스냅샷. 빈 객체 {} 는 누락으로 보고 400 을 반환합니다.
        - imageBase64 (str, required): base64 이미지 또는 data URL
        - mimeType (str, optional): 이미지 MIME 타입
    """
    try:
        data = ReportLogoSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        logger.warning(f"신고 요청 필드 누락: {err.messages}")
        return jsonify({"error": "Missing required fields", "details": err.messages}), 400

    report_service = current_app.services['reports']

    try:
        report_id = report_service.submit_report(
            analysis=data['analysis'],
            image_base64=data['image_base64'],
            mime_type=data['mime_type']
        )
    except FirebaseConfigError as e:
        logger.error(f"Firestore 설정 오류로 신고 저장 실패: {e}")
        return jsonify({"error": "Report storage is not configured"}), 500
    except Exception as e:
        logger.error(f"신고 저장 실패: {e}", exc_info=True)
        return jsonify({"error": "Failed to report logo"}), 500

    result = {'success': True, 'report_id': report_id}
    return jsonify(ReportLogoResponseSchema().dump(result)), 200
