# brandlens/api/analysis/test_routes.py
import base64
import io

from brandlens.testing import PNG_BYTES, make_analysis


def test_analyze_multipart_upload(client, fake_analyzer):
    fake_analyzer.result = make_analysis(score=75, brand='Puma')

    response = client.post('/api/analyze-logo', data={
        'image': (io.BytesIO(PNG_BYTES), 'logo.png', 'image/png')
    }, content_type='multipart/form-data')

    assert response.status_code == 200
    body = response.get_json()
    assert body['brandName'] == 'Puma'
    assert body['similarityPercentage'] == 75
    assert body['tier'] == 'caution'
    assert fake_analyzer.calls == [(PNG_BYTES, 'image/png')]


def test_analyze_json_data_url(client, fake_analyzer):
    image = 'data:image/png;base64,' + base64.b64encode(PNG_BYTES).decode()

    response = client.post('/api/analyze-logo', json={'imageBase64': image})

    assert response.status_code == 200
    assert response.get_json()['tier'] == 'authentic'
    assert fake_analyzer.calls == [(PNG_BYTES, 'image/png')]


def test_analyze_guesses_missing_mime_type(client, fake_analyzer):
    client.post('/api/analyze-logo', json={'imageBase64': base64.b64encode(PNG_BYTES).decode()})

    assert fake_analyzer.calls[0][1] == 'image/png'


def test_analyze_missing_image(client, fake_analyzer):
    response = client.post('/api/analyze-logo', json={})

    assert response.status_code == 400
    assert fake_analyzer.calls == []


def test_analyze_invalid_base64(client):
    response = client.post('/api/analyze-logo', json={'imageBase64': '%%%not-base64%%%'})

    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid image data'}


def test_analyze_rejects_non_image_upload(client, fake_analyzer):
    response = client.post('/api/analyze-logo', data={
        'image': (io.BytesIO(b'%PDF-1.4'), 'logo.pdf', 'application/pdf')
    }, content_type='multipart/form-data')

    assert response.status_code == 400
    assert fake_analyzer.calls == []


def test_analyze_upstream_failure(client, fake_analyzer, analysis_error):
    fake_analyzer.error = analysis_error

    response = client.post('/api/analyze-logo', json={'imageBase64': base64.b64encode(PNG_BYTES).decode()})

    assert response.status_code == 502
    assert response.get_json() == {'error': 'Failed to analyze logo'}
