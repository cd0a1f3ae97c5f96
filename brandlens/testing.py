# brandlens/testing.py
"""
테스트 전용 가짜 객체와 샘플 데이터 (conftest.py 와 각 test 모듈에서 사용)
"""
import itertools

from brandlens.models.analysis_result import AnalysisResult

# 1x1 PNG
PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01"
    b"\x08\x06\x00\x00\x00\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\x0f"
    b"\x00\x00\x01\x01\x00\x05\x18\xd8N\x00\x00\x00\x00IEND\xaeB`\x82"
)


def make_analysis(score=95, brand='Acme'):
    return AnalysisResult(
        brand_name=brand,
        company_info=f'{brand} makes everything.',
        founding_background='Founded in 1920 in a garage.',
        symbolic_meaning='The arrow stands for progress.',
        similarity_percentage=score,
        originality_interpretation='The logo matches the registered mark.',
    )


class FakeDocumentRef:
    def __init__(self, collection, doc_id):
        self.collection = collection
        self.id = doc_id

    def set(self, data):
        if self.collection.db.fail_with is not None:
            raise self.collection.db.fail_with
        self.collection.documents[self.id] = data


class FakeCollection:
    def __init__(self, db, name):
        self.db = db
        self.name = name
        self.documents = {}

    def document(self):
        return FakeDocumentRef(self, f"report-{next(self.db.ids)}")


class FakeFirestore:
    """collection().document().set() 체인만 흉내내는 가짜 Firestore 클라이언트"""

    def __init__(self):
        self.collections = {}
        self.ids = itertools.count(1)
        self.fail_with = None

    def collection(self, name):
        return self.collections.setdefault(name, FakeCollection(self, name))

    def documents(self, name):
        return self.collection(name).documents


class FakeAnalyzer:
    name = 'fake'

    def __init__(self):
        self.result = make_analysis()
        self.error = None
        self.calls = []

    def analyze_logo(self, image_bytes, mime_type):
        self.calls.append((image_bytes, mime_type))
        if self.error is not None:
            raise self.error
        return self.result
