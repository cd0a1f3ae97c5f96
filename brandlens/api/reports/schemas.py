# brandlens/api/reports/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class ReportLogoSchema(Schema):
    """
    POST /api/report-logo
    의심 로고 신고 요청의 데이터 형식을 정의하고 유효성을 검사합니다.
    analysis 는 분석 결과 스냅샷으로, 내용은 해석하지 않고 그대로 저장합니다.
    """
    class Meta:
        unknown = EXCLUDE

    analysis = fields.Dict(
        required=True,
        validate=validate.Length(min=1),
        error_messages={"required": "analysis is required."}
    )
    image_base64 = fields.Str(
        required=True,
        data_key='imageBase64',
        validate=validate.Length(min=1),
        error_messages={"required": "imageBase64 is required."}
    )
    mime_type = fields.Str(data_key='mimeType', load_default=None, allow_none=True)


class ReportLogoResponseSchema(Schema):
    """신고 성공 응답"""
    success = fields.Bool(required=True)
    report_id = fields.Str(required=True, data_key='reportId')
