from flask import Blueprint, current_app, jsonify
from models import utc_timestamp
import time

router = Blueprint('health', __name__)


@router.route("/", methods=["GET"])
def root():
    return jsonify({"msg": "Backend is running"})


@router.route("/api/health", methods=["GET"])
def health():
    cache = current_app.extensions["question_cache"]
    return jsonify({
        "status": "OK",
        "timestamp": utc_timestamp(),
        "uptime": time.time() - current_app.extensions["started_at"],
        "googleSheetsConfigured": cache.configured
    })
