# brandlens/web/test_routes.py
import io

from brandlens.testing import PNG_BYTES, make_analysis

REPORT_DONE = 'id="report-button" class="btn btn-success" disabled>Report Submitted'


def _upload(client, data=PNG_BYTES, filename='logo.png', mimetype='image/png'):
    return client.post('/upload', data={
        'image': (io.BytesIO(data), filename, mimetype)
    }, content_type='multipart/form-data', follow_redirects=True)


def _analyzed(client):
    _upload(client)
    return client.post('/analyze', follow_redirects=True)


def test_index_empty_state(client):
    html = client.get('/').get_data(as_text=True)

    assert 'No Analysis Yet' in html
    assert 'disabled>Analyze Logo' in html


def test_upload_shows_preview(client):
    html = _upload(client).get_data(as_text=True)

    assert 'alt="Logo preview"' in html
    preview = client.get('/workspace/image')
    assert preview.status_code == 200
    assert preview.data == PNG_BYTES
    assert preview.mimetype == 'image/png'


def test_preview_without_image(client):
    assert client.get('/workspace/image').status_code == 404


def test_upload_rejects_non_image(client):
    html = _upload(client, b'%PDF-1.4', 'doc.pdf', 'application/pdf').get_data(as_text=True)

    assert 'Only image files are supported.' in html
    assert 'alt="Logo preview"' not in html


def test_analyze_without_image(client, fake_analyzer):
    html = client.post('/analyze', follow_redirects=True).get_data(as_text=True)

    assert 'Select or capture a logo image first.' in html
    assert fake_analyzer.calls == []


def test_analyze_renders_report_with_tier(client, fake_analyzer):
    fake_analyzer.result = make_analysis(score=89, brand='Adidas')

    html = _analyzed(client).get_data(as_text=True)

    assert 'Adidas' in html
    assert '89%' in html
    assert 'tier-caution' in html
    assert 'Report Suspicious Logo' in html
    assert fake_analyzer.calls == [(PNG_BYTES, 'image/png')]


def test_analyze_failure_shows_generic_message(client, fake_analyzer, analysis_error):
    fake_analyzer.error = analysis_error

    html = _analyzed(client).get_data(as_text=True)

    assert 'Failed to analyze logo' in html
    assert 'upstream unavailable' not in html
    assert 'No Analysis Yet' in html


def test_report_disabled_after_first_success(client, fake_db, fake_analyzer):
    fake_analyzer.result = make_analysis(score=40)
    _analyzed(client)

    html = client.post('/report', follow_redirects=True).get_data(as_text=True)
    assert REPORT_DONE in html
    assert len(fake_db.documents('suspicious_logos')) == 1

    html = client.post('/report', follow_redirects=True).get_data(as_text=True)
    assert REPORT_DONE in html
    assert len(fake_db.documents('suspicious_logos')) == 1

    stored = fake_db.documents('suspicious_logos')['report-1']
    assert stored['analysis']['similarityPercentage'] == 40
    assert stored['imageBase64'].startswith('data:image/png;base64,')
    assert stored['status'] == 'pending_review'


def test_new_image_allows_new_report(client, fake_db):
    _analyzed(client)
    client.post('/report')

    _analyzed(client)
    html = client.post('/report', follow_redirects=True).get_data(as_text=True)

    assert REPORT_DONE in html
    assert len(fake_db.documents('suspicious_logos')) == 2


def test_report_failure_can_be_retried(client, fake_db):
    _analyzed(client)
    fake_db.fail_with = RuntimeError('unavailable')

    html = client.post('/report', follow_redirects=True).get_data(as_text=True)
    assert 'Failed to report logo' in html
    assert 'Report Suspicious Logo' in html

    fake_db.fail_with = None
    html = client.post('/report', follow_redirects=True).get_data(as_text=True)
    assert REPORT_DONE in html


def test_report_without_analysis(client, fake_db):
    html = client.post('/report', follow_redirects=True).get_data(as_text=True)

    assert 'Analyze a logo before reporting it.' in html
    assert fake_db.documents('suspicious_logos') == {}


def test_camera_start_discards_selection(client):
    _analyzed(client)

    html = client.post('/camera/start', follow_redirects=True).get_data(as_text=True)

    assert 'id="camera-video"' in html
    assert 'No Analysis Yet' in html

    html = client.post('/camera/stop', follow_redirects=True).get_data(as_text=True)
    assert 'id="camera-video"' not in html


def test_sessions_do_not_share_workspaces(app, client):
    _analyzed(client)

    other = app.test_client()
    html = other.get('/').get_data(as_text=True)

    assert 'No Analysis Yet' in html


def test_reset(client):
    _analyzed(client)

    html = client.post('/reset', follow_redirects=True).get_data(as_text=True)

    assert 'No Analysis Yet' in html
    assert 'alt="Logo preview"' not in html


def test_cookieless_requests_do_not_evict_workspaces(app, client, fake_analyzer):
    _upload(client)
    capacity = app.config['WORKSPACE_CAPACITY']

    for _ in range(capacity):
        visitor = app.test_client()
        assert visitor.get('/workspace/image').status_code == 404
        assert visitor.get('/').status_code == 200
        visitor.post('/camera/stop')

    assert len(app.services['workspaces']) == 1

    html = client.post('/analyze', follow_redirects=True).get_data(as_text=True)
    assert 'Acme' in html
    assert fake_analyzer.calls == [(PNG_BYTES, 'image/png')]


def test_analyze_without_session_shows_error_once(app, client, fake_analyzer):
    html = client.post('/analyze', follow_redirects=True).get_data(as_text=True)

    assert 'Select or capture a logo image first.' in html
    assert len(app.services['workspaces']) == 0

    html = client.get('/').get_data(as_text=True)
    assert 'Select or capture a logo image first.' not in html


def test_nav_links_have_targets(client):
    html = client.get('/').get_data(as_text=True)

    for anchor in ('how-it-works', 'about'):
        assert f'href="#{anchor}"' in html
        assert f'id="{anchor}"' in html
