from flask import Flask
from flask_cors import CORS
from routes.health.health import router as health_router
from routes.quiz.questions import router as questions_router
from routes.quiz.user_data import router as user_data_router
from question_cache import QuestionCache
from settings import Settings
from sheets import CredentialResolver
from submission_recorder import SubmissionRecorder
import logging
import time


def create_app(settings=None, resolver=None, cache=None, recorder=None):
    settings = settings or Settings.from_env()

    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    app = Flask(__name__)
    CORS(app, origins=settings.cors_origin_list())

    # One resolver is shared so questions and submissions see the same connection
    resolver = resolver or CredentialResolver(settings)
    app.extensions["settings"] = settings
    app.extensions["started_at"] = time.time()
    app.extensions["question_cache"] = cache or QuestionCache(
        resolver, questions_range=settings.questions_range, ttl=settings.cache_ttl
    )
    app.extensions["submission_recorder"] = recorder or SubmissionRecorder(
        resolver, user_data_range=settings.user_data_range
    )

    app.register_blueprint(health_router)
    app.register_blueprint(questions_router)
    app.register_blueprint(user_data_router)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host="0.0.0.0", port=app.extensions["settings"].port)
