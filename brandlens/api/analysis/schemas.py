# brandlens/api/analysis/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE


class AnalyzeLogoSchema(Schema):
    """
    POST /api/analyze-logo (JSON 본문)
    multipart 업로드 대신 base64 이미지를 보낼 때의 형식입니다.
    """
    class Meta:
        unknown = EXCLUDE

    image_base64 = fields.Str(required=True, data_key='imageBase64', validate=validate.Length(min=1))
    mime_type = fields.Str(data_key='mimeType', load_default=None, allow_none=True)


class AnalysisResultSchema(Schema):
    """분석 결과 응답. 화면 스타일링을 위해 tier 를 함께 내려줍니다."""
    brand_name = fields.Str(required=True, data_key='brandName')
    company_info = fields.Str(required=True, data_key='companyInfo')
    founding_background = fields.Str(required=True, data_key='foundingBackground')
    symbolic_meaning = fields.Str(required=True, data_key='symbolicMeaning')
    similarity_percentage = fields.Float(
        required=True, data_key='similarityPercentage', validate=validate.Range(min=0, max=100)
    )
    originality_interpretation = fields.Str(required=True, data_key='originalityInterpretation')
    tier = fields.Function(lambda result: result.tier.value, dump_only=True)
