# brandlens/api/reports/test_routes.py
import pytest

from brandlens.services.firestore_service import FirebaseConfigError

ANALYSIS = {
    'brandName': 'Acme',
    'companyInfo': 'Acme makes everything.',
    'foundingBackground': 'Founded in 1920.',
    'symbolicMeaning': 'Progress.',
    'similarityPercentage': 42,
    'originalityInterpretation': 'Letter spacing differs from the original.',
}
IMAGE = 'data:image/png;base64,iVBORw0KGgo='


@pytest.mark.parametrize('body', [
    {'imageBase64': IMAGE, 'mimeType': 'image/png'},
    {'analysis': ANALYSIS, 'mimeType': 'image/png'},
    {'analysis': {}, 'imageBase64': IMAGE},
    {'analysis': ANALYSIS, 'imageBase64': ''},
    {'analysis': None, 'imageBase64': IMAGE},
])
def test_report_missing_required_fields(client, fake_db, body):
    response = client.post('/api/report-logo', json=body)

    assert response.status_code == 400
    assert response.get_json()['error'] == 'Missing required fields'
    assert fake_db.documents('suspicious_logos') == {}


def test_report_non_json_body(client):
    response = client.post('/api/report-logo', data='analysis=1', content_type='text/plain')

    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_report_success(client, fake_db):
    response = client.post('/api/report-logo', json={
        'analysis': ANALYSIS, 'imageBase64': IMAGE, 'mimeType': 'image/png'
    })

    assert response.status_code == 200
    assert response.get_json() == {'success': True, 'reportId': 'report-1'}

    stored = fake_db.documents('suspicious_logos')['report-1']
    assert stored['analysis'] == ANALYSIS
    assert stored['imageBase64'] == IMAGE
    assert stored['mimeType'] == 'image/png'
    assert stored['status'] == 'pending_review'
    assert 'reportedAt' in stored


def test_report_each_request_creates_new_document(client, fake_db):
    body = {'analysis': ANALYSIS, 'imageBase64': IMAGE}

    first = client.post('/api/report-logo', json=body).get_json()['reportId']
    second = client.post('/api/report-logo', json=body).get_json()['reportId']

    assert first != second
    assert len(fake_db.documents('suspicious_logos')) == 2


def test_report_mime_type_taken_from_data_url(client, fake_db):
    client.post('/api/report-logo', json={'analysis': ANALYSIS, 'imageBase64': IMAGE})

    assert fake_db.documents('suspicious_logos')['report-1']['mimeType'] == 'image/png'


def test_report_store_not_configured(app, client):
    app.services['firestore']._db = None
    app.services['firestore']._build_credential = _raise_config_error

    response = client.post('/api/report-logo', json={'analysis': ANALYSIS, 'imageBase64': IMAGE})

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Report storage is not configured'}


def test_report_store_failure(client, fake_db):
    fake_db.fail_with = RuntimeError('unavailable')

    response = client.post('/api/report-logo', json={'analysis': ANALYSIS, 'imageBase64': IMAGE})

    assert response.status_code == 500
    assert response.get_json() == {'error': 'Failed to report logo'}


def _raise_config_error():
    raise FirebaseConfigError('Firebase credentials are not fully configured in environment variables.')
