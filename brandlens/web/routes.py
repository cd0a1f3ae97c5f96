# brandlens/web/routes.py
import io
import logging
from flask import (
    Blueprint, abort, current_app, flash, redirect, render_template, request, send_file, session, url_for
)

from brandlens.api.analysis.services import analyze_logo_image
from brandlens.models.analysis_result import severity_tier
from brandlens.services.firestore_service import FirebaseConfigError
from brandlens.services.logo_analysis import AnalysisError
from brandlens.utils.image_utils import is_image_mime_type, to_data_url
from brandlens.web.workspace import Workspace

logger = logging.getLogger(__name__)

web_bp = Blueprint('web_bp', __name__)

SESSION_KEY = 'workspace_id'


def _existing_workspace():
    """세션 쿠키의 워크스페이스 ID 로 저장된 화면 상태를 찾습니다. 없으면 None."""
    return current_app.services['workspaces'].get(session.get(SESSION_KEY))


def _workspace_for_write():
    """
    이미지 선택이나 카메라 시작처럼 새 작업을 여는 요청에서만 사용합니다.
    쿠키 없는 GET 요청이 저장소를 채워 다른 사용자의 상태를 밀어내지 않도록
    새 워크스페이스는 여기서만 만듭니다.
    """
    workspace = current_app.services['workspaces'].get_or_create(session.get(SESSION_KEY))
    session[SESSION_KEY] = workspace.workspace_id
    return workspace


def _show_error(workspace, message):
    # 저장된 워크스페이스가 없으면 한 번만 보이는 flash 메시지로 전달합니다.
    if workspace is None:
        flash(message, 'error')
    else:
        workspace.set_error(message)


def _back_to_index():
    return redirect(url_for('web_bp.index'))


@web_bp.app_template_filter('severity_tier')
def severity_tier_filter(score):
    return severity_tier(score).value


@web_bp.route('/', methods=['GET'])
def index():
    # 저장하지 않는 빈 워크스페이스로 초기 화면을 그립니다.
    workspace = _existing_workspace() or Workspace(workspace_id='')
    return render_template('index.html', workspace=workspace)


@web_bp.route('/workspace/image', methods=['GET'])
def workspace_image():
    """미리보기용으로 현재 선택된 이미지를 내려줍니다."""
    workspace = _existing_workspace()
    if workspace is None or not workspace.has_image:
        abort(404)
    response = send_file(io.BytesIO(workspace.image_bytes), mimetype=workspace.mime_type)
    response.headers['Cache-Control'] = 'no-store'
    return response


@web_bp.route('/upload', methods=['POST'])
def upload_image():
    """
    파일 선택, 드래그 앤 드롭, 카메라 촬영 결과를 모두 이 경로로 받습니다.
    (카메라 촬영은 'camera-capture.jpg' 로 전송됩니다)
    """
    workspace = _workspace_for_write()
    upload = request.files.get('image')

    if upload is None or not upload.filename:
        workspace.set_error('Please choose an image to upload.')
        return _back_to_index()

    if not is_image_mime_type(upload.mimetype):
        logger.info(f"이미지가 아닌 파일 업로드 무시: {upload.filename} ({upload.mimetype})")
        workspace.set_error('Only image files are supported.')
        return _back_to_index()

    image_bytes = upload.read()
    if not image_bytes:
        workspace.set_error('Failed to read file')
        return _back_to_index()

    workspace.select_image(image_bytes, upload.mimetype, upload.filename)
    logger.info(f"이미지 선택: {upload.filename} ({upload.mimetype}, {len(image_bytes)}B)")
    return _back_to_index()


@web_bp.route('/camera/start', methods=['POST'])
def start_camera():
    _workspace_for_write().start_camera()
    return _back_to_index()


@web_bp.route('/camera/stop', methods=['POST'])
def stop_camera():
    workspace = _existing_workspace()
    if workspace is not None:
        workspace.stop_camera()
    return _back_to_index()


@web_bp.route('/analyze', methods=['POST'])
def analyze():
    workspace = _existing_workspace()
    if workspace is None or not workspace.can_analyze:
        _show_error(workspace, 'Select or capture a logo image first.')
        return _back_to_index()

    try:
        workspace.set_analysis(analyze_logo_image(workspace.image_bytes, workspace.mime_type))
    except AnalysisError as e:
        logger.error(f"로고 분석 실패 (workspace={workspace.workspace_id}): {e}")
        workspace.set_error('Failed to analyze logo')
    return _back_to_index()


@web_bp.route('/report', methods=['POST'])
def report():
    """
    현재 분석 결과를 의심 로고로 신고합니다.
    신고가 한 번 성공하면 같은 분석에 대해서는 다시 저장하지 않습니다.
    """
    workspace = _existing_workspace()

    if workspace is not None and workspace.report_submitted:
        logger.info(f"중복 신고 요청 무시: {workspace.report_id}")
        return _back_to_index()

    if workspace is None or not workspace.can_report or not workspace.has_image:
        _show_error(workspace, 'Analyze a logo before reporting it.')
        return _back_to_index()

    report_service = current_app.services['reports']
    try:
        report_id = report_service.submit_report(
            analysis=workspace.analysis.to_dict(),
            image_base64=to_data_url(workspace.image_bytes, workspace.mime_type),
            mime_type=workspace.mime_type
        )
    except FirebaseConfigError as e:
        logger.error(f"Firestore 설정 오류로 신고 실패: {e}")
        workspace.set_error('Failed to report logo')
        return _back_to_index()
    except Exception as e:
        logger.error(f"신고 저장 실패 (workspace={workspace.workspace_id}): {e}", exc_info=True)
        workspace.set_error('Failed to report logo')
        return _back_to_index()

    workspace.mark_reported(report_id)
    return _back_to_index()


@web_bp.route('/reset', methods=['POST'])
def reset():
    current_app.services['workspaces'].discard(session.pop(SESSION_KEY, None))
    return _back_to_index()
