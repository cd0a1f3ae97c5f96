# brandlens/services/gemini_service.py
import logging
from flask import Flask
from google import genai
from google.genai import types as genai_types

from brandlens.models.analysis_result import AnalysisResult
from brandlens.services.logo_analysis import (
    LOGO_ANALYSIS_PROMPT, AnalysisError, parse_analysis_response
)

logger = logging.getLogger(__name__)

_STRING = genai_types.Schema(type=genai_types.Type.STRING)

RESPONSE_SCHEMA = genai_types.Schema(
    type=genai_types.Type.OBJECT,
    properties={
        'brandName': _STRING,
        'companyInfo': _STRING,
        'foundingBackground': _STRING,
        'symbolicMeaning': _STRING,
        'similarityPercentage': genai_types.Schema(type=genai_types.Type.NUMBER),
        'originalityInterpretation': _STRING,
    },
    required=[
        'brandName', 'companyInfo', 'foundingBackground',
        'symbolicMeaning', 'similarityPercentage', 'originalityInterpretation',
    ],
)


class GeminiService:
    """
    Google Gemini 멀티모달 모델로 로고를 분석하는 서비스 클래스.
    응답은 고정된 JSON 스키마(필드 6개)로 제한됩니다.
    """

    name = 'gemini'

    def __init__(self):
        """실제 클라이언트는 init_app 메서드를 통해 설정됩니다."""
        self.client = None
        self.model = None

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 Gemini 클라이언트를 설정합니다.

        :param app: Flask 애플리케이션 객체
        """
        api_key = app.config.get('GEMINI_API_KEY')
        if not api_key:
            raise ValueError("GEMINI_API_KEY 설정이 .env 파일에 필요합니다.")

        self.client = genai.Client(api_key=api_key)
        self.model = app.config.get('GEMINI_MODEL')
        logger.info(f"GeminiService: Gemini API 서비스가 초기화되었습니다. (model={self.model})")

    def analyze_logo(self, image_bytes: bytes, mime_type: str) -> AnalysisResult:
        """
        로고 이미지를 한 번의 요청으로 분석합니다. 재시도는 하지 않습니다.

        :param image_bytes: 이미지 원본 바이트
        :param mime_type: 이미지 MIME 타입 (예: "image/png")
        :return: 분석 결과
        :raises AnalysisError: API 호출 실패 또는 응답 형식 오류
        """
        if not self.client:
            raise RuntimeError("GeminiService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")

        config = genai_types.GenerateContentConfig(
            response_mime_type='application/json',
            response_schema=RESPONSE_SCHEMA,
        )

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=[
                    genai_types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    LOGO_ANALYSIS_PROMPT,
                ],
                config=config,
            )
        except Exception as e:
            logger.error(f"Gemini 로고 분석 요청 실패: {e}", exc_info=True)
            raise AnalysisError("Gemini request failed") from e

        result = parse_analysis_response(response.text, 'Gemini')
        logger.info(f"Gemini 로고 분석 완료: {result.brand_name} ({result.similarity_percentage}%)")
        return result
