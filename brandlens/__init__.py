# brandlens/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

# - 설정
from brandlens.core.config import config_by_name

# - 블루프린트
from brandlens.api.analysis.routes import analysis_bp
from brandlens.api.reports.routes import reports_bp
from brandlens.web.routes import web_bp

# - 서비스 모듈
from brandlens.services.firestore_service import FirestoreService
from brandlens.services.gemini_service import GeminiService
from brandlens.services.openai_service import OpenAIService
from brandlens.api.reports.services import ReportService
from brandlens.web.workspace import WorkspaceStore

INFERENCE_SERVICES = {
    'gemini': GeminiService,
    'openai': OpenAIService,
}


def create_app(config_name=None):
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (기본값은 FLASK_ENV)
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    if config_name not in config_by_name:
        raise ValueError(f"알 수 없는 설정 이름입니다: {config_name}")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    if not app.config.get('SECRET_KEY'):
        raise ValueError("SECRET_KEY 환경 변수가 설정되지 않았습니다.")

    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 4. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 4-1. 추론 서비스: API 키가 없으면 서버를 띄우지 않습니다.
    provider = app.config['INFERENCE_PROVIDER']
    service_class = INFERENCE_SERVICES.get(provider)
    if service_class is None:
        raise ValueError(f"지원하지 않는 INFERENCE_PROVIDER 입니다: {provider}")
    try:
        analyzer = service_class()
        analyzer.init_app(app)
        app.services['analyzer'] = analyzer
        logging.info(f"Inference service '{provider}' initialized successfully")
    except Exception as e:
        logging.error(f"Failed to initialize inference service '{provider}': {e}")
        raise

    # 4-2. Firestore: 자격 증명은 첫 신고 요청 시점에 검사합니다.
    firestore_instance = FirestoreService()
    firestore_instance.init_app(app)
    app.services['firestore'] = firestore_instance

    app.services['reports'] = ReportService(
        firestore_service=app.services['firestore'],
        collection_name=app.config['REPORT_COLLECTION']
    )
    app.services['workspaces'] = WorkspaceStore(capacity=app.config['WORKSPACE_CAPACITY'])

    # =====================================================================================
    # 5. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(web_bp)
    app.register_blueprint(analysis_bp, url_prefix='/api')
    app.register_blueprint(reports_bp, url_prefix='/api')

    # =====================================================================================
    # 6. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return jsonify({"error": "Missing required fields", "details": err.messages}), 400

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err):
        return jsonify({"error": "Request body is too large"}), 413

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 404, 405 등 HTTP 예외는 Flask 기본 응답을 그대로 사용합니다.
        if isinstance(err, HTTPException):
            return err
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
