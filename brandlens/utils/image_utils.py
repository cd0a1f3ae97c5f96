# brandlens/utils/image_utils.py
"""
이미지 바이트와 base64 / data URL 사이의 변환 유틸리티

- 추론 API 에는 순수 base64 문자열을 보냅니다.
- 신고 API 는 브라우저의 FileReader 결과(data URL 전체)를 그대로 받기도 하므로
  두 형식을 모두 받아들입니다.
"""

import base64
import binascii
import logging
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = 'image/jpeg'

_DATA_URL_RE = re.compile(r'^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[\w=-]+)*;base64,(?P<data>.*)$', re.DOTALL)


def encode_image(image_bytes: bytes) -> str:
    """이미지 바이트를 base64 문자열로 인코딩"""
    return base64.b64encode(image_bytes).decode('ascii')


def to_data_url(image_bytes: bytes, mime_type: Optional[str] = None) -> str:
    """이미지 바이트를 'data:<mime>;base64,<data>' 형식으로 변환"""
    mime_type = mime_type or guess_mime_type(image_bytes)
    return f"data:{mime_type};base64,{encode_image(image_bytes)}"


def split_data_url(value: str) -> Tuple[Optional[str], str]:
    """
    data URL 에서 MIME 타입과 base64 부분을 분리합니다.
    접두사가 없는 순수 base64 문자열이면 (None, 원본) 을 반환합니다.
    """
    match = _DATA_URL_RE.match(value.strip())
    if not match:
        return None, value.strip()
    return match.group('mime'), match.group('data')


def decode_image(value: str) -> bytes:
    """
    base64 문자열(또는 data URL)을 바이트로 디코딩합니다.

    Raises:
        ValueError: 비어 있거나 올바른 base64 가 아닌 경우
    """
    _, data = split_data_url(value)
    if not data:
        raise ValueError("이미지 데이터가 비어 있습니다.")
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        logger.warning(f"base64 디코딩 실패: {e}")
        raise ValueError("이미지 데이터가 올바른 base64 형식이 아닙니다.")


def guess_mime_type(image_bytes: bytes) -> str:
    """매직 바이트로 이미지 MIME 타입을 추정합니다. 알 수 없으면 JPEG 로 간주합니다."""
    if image_bytes[:8] == b"\x89PNG\r\n\x1a\n":
        return "image/png"
    if image_bytes[:4] == b"GIF8":
        return "image/gif"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return DEFAULT_MIME_TYPE


def is_image_mime_type(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.lower().startswith('image/')
