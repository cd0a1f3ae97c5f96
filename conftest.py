# conftest.py
"""
공용 pytest fixture: 테스트 설정의 Flask 앱, 가짜 Firestore, 가짜 추론 서비스
"""
import pytest

from brandlens import create_app
from brandlens.services.logo_analysis import AnalysisError
from brandlens.testing import FakeAnalyzer, FakeFirestore


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def fake_analyzer():
    return FakeAnalyzer()


@pytest.fixture
def app(fake_db, fake_analyzer):
    app = create_app('testing')
    app.services['analyzer'] = fake_analyzer
    app.services['firestore']._db = fake_db
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def analysis_error():
    return AnalysisError("upstream unavailable")
