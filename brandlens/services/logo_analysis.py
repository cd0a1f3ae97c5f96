# brandlens/services/logo_analysis.py
"""
추론 서비스(Gemini / OpenAI)가 공통으로 사용하는 프롬프트, 응답 스키마, 파싱 함수
"""
import json
import logging
from typing import Optional

from brandlens.models.analysis_result import AnalysisResult, WIRE_FIELDS

logger = logging.getLogger(__name__)


class AnalysisError(RuntimeError):
    """추론 API 호출 또는 응답 해석에 실패했을 때 발생하는 예외"""


LOGO_ANALYSIS_PROMPT = """Analyze the provided logo image.
Identify the brand and provide the following details:
1. Brand Name
2. Company Info (Brief information about the company)
3. Founding Background (When and how the company was founded)
4. Symbolic Meaning (What the logo symbolizes)
5. Similarity Percentage (AI-estimated similarity percentage to the known original logo, 0-100)
6. Originality Interpretation (Explanation of whether the logo appears original or potentially modified based on the similarity percentage and visual cues.)

If the logo is completely unrecognizable, provide a best guess or state that it is unknown."""

# JSON Schema 형식의 응답 스키마. 여섯 필드 모두 필수입니다.
ANALYSIS_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "brandName": {"type": "string"},
        "companyInfo": {"type": "string"},
        "foundingBackground": {"type": "string"},
        "symbolicMeaning": {"type": "string"},
        "similarityPercentage": {"type": "number"},
        "originalityInterpretation": {"type": "string"},
    },
    "required": list(WIRE_FIELDS),
    "additionalProperties": False,
}


def parse_analysis_response(raw: Optional[str], provider: str) -> AnalysisResult:
    """
    모델이 돌려준 JSON 텍스트를 AnalysisResult 로 변환합니다.
    코드 블록(```json)으로 감싸진 응답도 처리합니다.

    :raises AnalysisError: 응답이 비어 있거나 스키마와 맞지 않는 경우
    """
    if not raw or not raw.strip():
        raise AnalysisError(f"No response from {provider}")

    text = raw.strip()
    if text.startswith("```"):
        text = text.strip("`")
        if text.lower().startswith("json"):
            text = text[4:]
        text = text.strip()

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"{provider} 응답 JSON 파싱 실패: {e} | raw={raw[:200]!r}")
        raise AnalysisError(f"Invalid JSON response from {provider}") from e

    try:
        return AnalysisResult.from_dict(data)
    except ValueError as e:
        logger.error(f"{provider} 응답이 스키마와 맞지 않습니다: {e}")
        raise AnalysisError(f"Incomplete analysis from {provider}") from e
