from flask import Blueprint, current_app, request, jsonify
from models import UserSubmission
import logging

router = Blueprint('user_data', __name__, url_prefix="/api")

logger = logging.getLogger(__name__)


@router.route("/user-data", methods=["POST"])
def save_user_data():
    try:
        payload = request.get_json(silent=True)
        logger.info("Received user data: %s", payload)

        submission = UserSubmission.from_payload(payload)
        ack = current_app.extensions["submission_recorder"].record(submission)

        return jsonify(ack.to_json())
    except Exception as e:
        logger.error("Error in /api/user-data: %s", str(e), exc_info=True)
        return jsonify({
            "success": False,
            "error": "Failed to save user data",
            "message": str(e)
        }), 500
