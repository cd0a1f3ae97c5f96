# brandlens/services/openai_service.py
import logging
from flask import Flask
from openai import OpenAI

from brandlens.models.analysis_result import AnalysisResult
from brandlens.services.logo_analysis import (
    LOGO_ANALYSIS_PROMPT, ANALYSIS_RESPONSE_SCHEMA, AnalysisError, parse_analysis_response
)
from brandlens.utils.image_utils import to_data_url

logger = logging.getLogger(__name__)


class OpenAIService:
    """
    OpenAI API 연동을 담당하는 서비스 클래스.
    INFERENCE_PROVIDER=openai 일 때 Gemini 대신 로고 분석에 사용됩니다.
    """

    name = 'openai'

    def __init__(self):
        """
        OpenAI 클라이언트를 None으로 초기화합니다.
        실제 클라이언트는 init_app 메서드를 통해 설정됩니다.
        """
        self.client = None
        self.model = None

    def init_app(self, app: Flask):
        """
        Flask 앱 초기화 과정에서 호출되어 OpenAI 클라이언트를 설정합니다.

        :param app: Flask 애플리케이션 객체
        """
        api_key = app.config.get('OPENAI_API_KEY')
        if not api_key:
            raise ValueError("OPENAI_API_KEY 설정이 .env 파일에 필요합니다.")

        self.client = OpenAI(api_key=api_key)
        self.model = app.config.get('OPENAI_MODEL')
        logger.info(f"OpenAIService: OpenAI API 서비스가 초기화되었습니다. (model={self.model})")

    def analyze_logo(self, image_bytes: bytes, mime_type: str) -> AnalysisResult:
        """
        GPT 비전 모델로 로고 이미지를 분석합니다.
        이미지는 data URL 로 인라인 전송하고, 응답은 strict JSON 스키마로 받습니다.

        :param image_bytes: 이미지 원본 바이트
        :param mime_type: 이미지 MIME 타입
        :return: 분석 결과
        :raises AnalysisError: API 호출 실패 또는 응답 형식 오류
        """
        if not self.client:
            raise RuntimeError("OpenAIService가 초기화되지 않았습니다. init_app을 먼저 호출해주세요.")

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": LOGO_ANALYSIS_PROMPT},
                            {
                                "type": "image_url",
                                "image_url": {"url": to_data_url(image_bytes, mime_type)}
                            }
                        ]
                    }
                ],
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "logo_analysis",
                        "strict": True,
                        "schema": ANALYSIS_RESPONSE_SCHEMA,
                    }
                },
            )
        except Exception as e:
            logger.error(f"OpenAI 로고 분석 요청 실패: {e}", exc_info=True)
            raise AnalysisError("OpenAI request failed") from e

        content = response.choices[0].message.content if response.choices else None
        result = parse_analysis_response(content, 'OpenAI')
        logger.info(f"OpenAI 로고 분석 완료: {result.brand_name} ({result.similarity_percentage}%)")
        return result
