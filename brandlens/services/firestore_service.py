# brandlens/services/firestore_service.py
import logging
import os
import threading
from typing import Any, Dict

import firebase_admin
from firebase_admin import credentials, firestore
from flask import Flask

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = 'https://oauth2.googleapis.com/token'


class FirebaseConfigError(RuntimeError):
    """Firestore 서비스 계정 정보가 설정되지 않았을 때 발생하는 예외"""


class FirestoreService:
    """
    Firestore 문서 저장을 담당하는 서비스 클래스입니다.
    Firebase 앱은 첫 사용 시점에 초기화되므로, 자격 증명이 없으면
    서버 기동이 아니라 해당 요청이 실패합니다.
    """

    def __init__(self, db=None):
        """
        :param db: 이미 만들어진 Firestore 클라이언트 (테스트에서 가짜 객체 주입용)
        """
        self._config: Dict[str, Any] = {}
        self._db = db
        self._lock = threading.Lock()

    def init_app(self, app: Flask):
        """
        Flask 앱 설정에서 Firebase 관련 값만 복사해 둡니다.

        :param app: Flask 애플리케이션 객체
        """
        self._config = {
            key: app.config.get(key)
            for key in ('FIREBASE_PROJECT_ID', 'FIREBASE_CLIENT_EMAIL',
                        'FIREBASE_PRIVATE_KEY', 'FIREBASE_CREDENTIALS_PATH')
        }
        logger.info("FirestoreService: 설정이 등록되었습니다. (첫 요청 시 연결)")

    def _build_credential(self) -> credentials.Certificate:
        cred_path = self._config.get('FIREBASE_CREDENTIALS_PATH')
        if cred_path:
            if not os.path.exists(cred_path):
                raise FirebaseConfigError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
            return credentials.Certificate(cred_path)

        project_id = self._config.get('FIREBASE_PROJECT_ID')
        client_email = self._config.get('FIREBASE_CLIENT_EMAIL')
        private_key = self._config.get('FIREBASE_PRIVATE_KEY')
        if not (project_id and client_email and private_key):
            raise FirebaseConfigError(
                "Firebase credentials are not fully configured in environment variables."
            )

        return credentials.Certificate({
            'type': 'service_account',
            'project_id': project_id,
            'client_email': client_email,
            'private_key': private_key,
            'token_uri': GOOGLE_TOKEN_URI,
        })

    @property
    def db(self):
        """Firestore 클라이언트. 최초 접근 시 Firebase 앱을 초기화합니다."""
        if self._db is None:
            with self._lock:
                if self._db is None:
                    if not firebase_admin._apps:
                        firebase_admin.initialize_app(self._build_credential())
                        logger.info("Firebase 앱 초기화 완료")
                    self._db = firestore.client()
        return self._db

    def add_document(self, collection_name: str, data: Dict[str, Any]) -> str:
        """
        컬렉션에 문서 한 건을 저장하고 문서 ID를 반환합니다.
        문서 ID 는 Firestore 가 자동 생성합니다.

        :param collection_name: 문서를 저장할 컬렉션 이름
        :param data: 저장할 데이터 딕셔너리
        :return: 생성된 Firestore 문서의 고유 ID
        """
        try:
            doc_ref = self.db.collection(collection_name).document()
            doc_ref.set(data)

            logger.info(f"Firestore 저장 성공 (Collection: {collection_name}, Doc ID: {doc_ref.id})")
            return doc_ref.id

        except FirebaseConfigError:
            raise
        except Exception as e:
            logger.error(f"Firestore 저장 실패 (Collection: {collection_name}): {e}", exc_info=True)
            raise
