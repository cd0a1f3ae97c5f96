# brandlens/api/analysis/routes.py
import logging
from flask import Blueprint, request, jsonify
from marshmallow import ValidationError

from brandlens.api.analysis.schemas import AnalyzeLogoSchema, AnalysisResultSchema
from brandlens.api.analysis.services import analyze_logo_image
from brandlens.services.logo_analysis import AnalysisError
from brandlens.utils.image_utils import decode_image, split_data_url, is_image_mime_type

logger = logging.getLogger(__name__)

analysis_bp = Blueprint('analysis_bp', __name__)


def _read_image_from_request():
    """multipart 'image' 필드 또는 JSON 본문에서 (바이트, MIME) 를 꺼냅니다."""
    upload = request.files.get('image')
    if upload is not None:
        if upload.mimetype and not is_image_mime_type(upload.mimetype):
            raise ValueError("Only image files can be analyzed")
        return upload.read(), upload.mimetype

    data = AnalyzeLogoSchema().load(request.get_json(silent=True) or {})
    prefix_mime, _ = split_data_url(data['image_base64'])
    return decode_image(data['image_base64']), data['mime_type'] or prefix_mime


@analysis_bp.route('/analyze-logo', methods=['POST'])
def analyze_logo():
    """
    로고 이미지를 분석해 브랜드 정보와 진위 평가를 반환합니다.
    추론 API 키가 브라우저에 노출되지 않도록 서버에서 호출합니다.
    """
    try:
        image_bytes, mime_type = _read_image_from_request()
        if not image_bytes:
            raise ValueError("Image is empty")
    except ValidationError as err:
        return jsonify({"error": "Missing required fields", "details": err.messages}), 400
    except ValueError as e:
        logger.warning(f"분석 요청 이미지 오류: {e}")
        return jsonify({"error": "Invalid image data"}), 400

    try:
        result = analyze_logo_image(image_bytes, mime_type)
    except AnalysisError as e:
        logger.error(f"로고 분석 실패: {e}")
        return jsonify({"error": "Failed to analyze logo"}), 502

    return jsonify(AnalysisResultSchema().dump(result)), 200
