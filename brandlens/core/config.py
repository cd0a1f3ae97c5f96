# brandlens/core/config.py

import os


def _private_key_from_env():
    # .env 에는 개행이 '\n' 문자열로 들어있으므로 실제 개행으로 복원합니다.
    key = os.getenv('FIREBASE_PRIVATE_KEY')
    return key.replace('\\n', '\n') if key else None


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 세션 쿠키(워크스페이스 ID) 서명에 사용됩니다.
    SECRET_KEY = os.getenv('SECRET_KEY', 'brandlens-dev-secret')

    # 업로드/카메라 이미지가 base64 로 JSON 본문에 실려 오므로 넉넉하게 잡습니다.
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    # 추론 API: 'gemini'(기본) 또는 'openai'
    INFERENCE_PROVIDER = os.getenv('INFERENCE_PROVIDER', 'gemini')
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY')
    GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-3-flash-preview')
    OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')
    OPENAI_MODEL = os.getenv('OPENAI_MODEL', 'gpt-4o')

    # Firestore 서비스 계정. 개별 필드 또는 JSON 파일 경로 중 하나만 있으면 됩니다.
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    FIREBASE_CLIENT_EMAIL = os.getenv('FIREBASE_CLIENT_EMAIL')
    FIREBASE_PRIVATE_KEY = _private_key_from_env()
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

    REPORT_COLLECTION = os.getenv('REPORT_COLLECTION', 'suspicious_logos')
    WORKSPACE_CAPACITY = int(os.getenv('WORKSPACE_CAPACITY', 256))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다. 외부 서비스는 테스트에서 가짜 객체로 교체합니다."""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing-secret'
    INFERENCE_PROVIDER = 'gemini'
    GEMINI_API_KEY = 'test-gemini-key'
    OPENAI_API_KEY = 'test-openai-key'
    REPORT_COLLECTION = 'suspicious_logos'
    WORKSPACE_CAPACITY = 8


class ProductionConfig(Config):
    """운영 환경 설정. SECRET_KEY 는 반드시 환경 변수로 지정해야 합니다."""
    DEBUG = False
    SECRET_KEY = os.getenv('SECRET_KEY')


config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
