# brandlens/utils/__init__.py
"""
유틸리티 모듈 패키지

이 패키지는 프로젝트 전체에서 공통으로 사용되는 유틸리티 함수들을 포함합니다.
"""

from .image_utils import (
    encode_image, decode_image,
    to_data_url, split_data_url,
    guess_mime_type, is_image_mime_type
)

__all__ = [
    'encode_image', 'decode_image',
    'to_data_url', 'split_data_url',
    'guess_mime_type', 'is_image_mime_type'
]
