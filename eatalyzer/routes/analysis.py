import logging
from datetime import date

from flask import Blueprint, current_app, jsonify, redirect, request, session, url_for
from werkzeug.exceptions import RequestEntityTooLarge

from ..models.session import ImageUpload
from ..services.charts.chart_data import fats_series, nutrition_series
from ..services.session.session_controller import SessionController
from ..views.page import render_page

logger = logging.getLogger(__name__)

analysis_bp = Blueprint('analysis', __name__)

TOO_LARGE_MESSAGE = "That image is too large. Please choose a smaller photo."


def current_controller() -> SessionController:
    """Controller for the browser session, creating the session id on first visit"""
    registry = current_app.extensions["eatalyzer_sessions"]
    sid = session.get("sid")
    if not sid:
        sid = registry.new_session_id()
        session["sid"] = sid
    return registry.get(sid)


@analysis_bp.get("/")
def index():
    """Main page"""
    snap = current_controller().snapshot()
    return render_page(snap, year=date.today().year)


@analysis_bp.post("/select")
def select_file():
    """Replace the session's selected image"""
    controller = current_controller()
    try:
        storage = request.files.get("image")
    except RequestEntityTooLarge:
        logger.info("Rejected upload over MAX_CONTENT_LENGTH")
        controller.reject_selection(TOO_LARGE_MESSAGE)
        return redirect(url_for("analysis.index"))

    if storage is None or not storage.filename:
        # Nothing chosen in the picker: the session is left as it was
        return redirect(url_for("analysis.index"))

    controller.select_file(ImageUpload.from_file_storage(storage))
    return redirect(url_for("analysis.index"))


@analysis_bp.post("/analyze")
def analyze():
    """Start analyzing the selected image; the page polls until it completes"""
    current_controller().start_analysis()
    return redirect(url_for("analysis.index"))


@analysis_bp.get("/state")
def state():
    """Current session snapshot and chart series as JSON"""
    snap = current_controller().snapshot()
    return jsonify({
        "pending_state": snap.pending_state.value,
        "filename": snap.filename,
        "preview": snap.preview_encoding,
        "error": snap.error_message,
        "result": snap.result.to_wire() if snap.result else None,
        "nutrition_series": [{"label": p.label, "value": p.value} for p in nutrition_series(snap.result)],
        "fats_series": [{"label": p.label, "value": p.value} for p in fats_series(snap.result)],
    }), 200
