from flask import Blueprint, current_app, request, jsonify
from errors import QuestionNotFound
import logging

router = Blueprint('questions', __name__, url_prefix="/api")

logger = logging.getLogger(__name__)


def get_cache():
    return current_app.extensions["question_cache"]


def failure(error, e, status=500):
    return jsonify({
        "success": False,
        "error": error,
        "message": str(e)
    }), status


@router.route("/questions", methods=["GET"])
def list_questions():
    try:
        cache = get_cache()
        questions = cache.get_questions()

        count = request.args.get("count", type=int)
        if not count or count < 0:
            count = len(questions)
        selected = questions[:count]

        return jsonify({
            "success": True,
            "questions": [q.to_json() for q in selected],
            "total": len(questions),
            "source": cache.source_label
        })
    except Exception as e:
        logger.error("Error in /api/questions: %s", str(e), exc_info=True)
        return failure("Failed to fetch questions", e)


@router.route("/questions/stats", methods=["GET"])
def question_stats():
    try:
        cache = get_cache()
        stats = cache.stats()
        return jsonify({
            "success": True,
            **stats,
            "source": cache.source_label
        })
    except Exception as e:
        logger.error("Error in /api/questions/stats: %s", str(e), exc_info=True)
        return failure("Failed to fetch stats", e)


@router.route("/questions/refresh", methods=["POST"])
def refresh_questions():
    try:
        cache = get_cache()
        questions = cache.refresh()
        return jsonify({
            "success": True,
            "message": "Questions cache refreshed",
            "count": len(questions),
            "source": cache.source_label
        })
    except Exception as e:
        logger.error("Error in /api/questions/refresh: %s", str(e), exc_info=True)
        return failure("Failed to refresh questions", e)


@router.route("/questions/<question_id>", methods=["GET"])
def get_question(question_id):
    try:
        cache = get_cache()
        try:
            qid = int(question_id)
        except ValueError:
            raise QuestionNotFound(question_id)

        question = cache.get_question(qid)
        return jsonify({
            "success": True,
            "question": question.to_json()
        })
    except QuestionNotFound as e:
        return failure("Question not found", e, 404)
    except Exception as e:
        logger.error("Error in /api/questions/%s: %s", question_id, str(e), exc_info=True)
        return failure("Failed to fetch question", e)
