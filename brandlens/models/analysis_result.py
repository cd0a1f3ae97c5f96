# brandlens/models/analysis_result.py
import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

AUTHENTIC_THRESHOLD = 90
CAUTION_THRESHOLD = 70


class SeverityTier(Enum):
    """유사도 점수로 분류한 진위 판정 단계"""
    AUTHENTIC = "authentic"
    CAUTION = "caution"
    SUSPICIOUS = "suspicious"


def severity_tier(score) -> SeverityTier:
    """
    유사도 점수(0-100)를 세 단계로 분류합니다.
    경계값은 상위 단계에 포함됩니다 (90 -> authentic, 70 -> caution).
    """
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ValueError(f"유사도 점수는 숫자여야 합니다: {score!r}")

    if score >= AUTHENTIC_THRESHOLD:
        return SeverityTier.AUTHENTIC
    if score >= CAUTION_THRESHOLD:
        return SeverityTier.CAUTION
    return SeverityTier.SUSPICIOUS


# 모델 응답(JSON)의 키와 데이터클래스 필드의 대응표
WIRE_FIELDS = {
    'brandName': 'brand_name',
    'companyInfo': 'company_info',
    'foundingBackground': 'founding_background',
    'symbolicMeaning': 'symbolic_meaning',
    'similarityPercentage': 'similarity_percentage',
    'originalityInterpretation': 'originality_interpretation',
}


@dataclass
class AnalysisResult:
    """
    로고 한 장에 대한 브랜드 식별 및 진위 평가 결과.
    분석 요청마다 새로 만들어지며 화면 상태(Workspace)에만 보관됩니다.
    """
    brand_name: str
    company_info: str
    founding_background: str
    symbolic_meaning: str
    similarity_percentage: float
    originality_interpretation: str

    @property
    def tier(self) -> SeverityTier:
        return severity_tier(self.similarity_percentage)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AnalysisResult':
        """
        camelCase 키의 딕셔너리(모델 응답 또는 클라이언트 요청)로부터 객체를 만듭니다.
        필드가 하나라도 빠지거나 점수가 숫자가 아니면 ValueError 를 발생시킵니다.
        """
        if not isinstance(data, dict):
            raise ValueError("분석 결과는 JSON 객체여야 합니다.")

        missing = [key for key in WIRE_FIELDS if data.get(key) is None]
        if missing:
            raise ValueError(f"분석 결과에 필수 필드가 없습니다: {', '.join(missing)}")

        score = data['similarityPercentage']
        if isinstance(score, bool):
            raise ValueError(f"similarityPercentage 는 숫자여야 합니다: {score!r}")
        try:
            score = float(score)
        except (TypeError, ValueError):
            raise ValueError(f"similarityPercentage 는 숫자여야 합니다: {score!r}")
        if not math.isfinite(score):
            raise ValueError(f"similarityPercentage 는 유한한 숫자여야 합니다: {score!r}")

        # 모델에 0-100 을 요청하지만 범위를 벗어난 값이 올 수 있습니다.
        score = min(100.0, max(0.0, score))
        if score.is_integer():
            score = int(score)

        return cls(
            brand_name=str(data['brandName']),
            company_info=str(data['companyInfo']),
            founding_background=str(data['foundingBackground']),
            symbolic_meaning=str(data['symbolicMeaning']),
            similarity_percentage=score,
            originality_interpretation=str(data['originalityInterpretation']),
        )

    def to_dict(self) -> Dict[str, Any]:
        """camelCase 키의 딕셔너리로 변환합니다. (API 응답 및 신고 스냅샷용)"""
        values = asdict(self)
        return {wire: values[attr] for wire, attr in WIRE_FIELDS.items()}
