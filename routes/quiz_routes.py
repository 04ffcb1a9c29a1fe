from flask import Blueprint, request, jsonify, current_app

from utils.decorators import with_user_type
from utils.documents import serialize
from utils.errors import InvalidIdError, NotFoundError, StoreError

quiz_bp = Blueprint("quiz", __name__)


def quiz_service():
    return current_app.extensions["quiz_service"]


# ---------------- LIST QUIZZES (staff: full, student: sanitized) ----------------
@quiz_bp.route("/quizzes", methods=["GET"])
@with_user_type
def list_quizzes():
    try:
        if request.is_student:
            quizzes = quiz_service().list_quizzes_for_students()
        else:
            quizzes = quiz_service().list_all_quizzes()
    except StoreError:
        return jsonify({"message": "An error occurred while fetching the quizzes"}), 500

    return jsonify({"message": "Quizzes fetched successful", "quizzes": serialize(quizzes)}), 200


# ---------------- GET QUIZ BY ID ----------------
@quiz_bp.route("/quizzes/<quiz_id>", methods=["GET"])
@with_user_type
def get_quiz(quiz_id):
    try:
        quiz = quiz_service().get_quiz(quiz_id, student=request.is_student)
    except (InvalidIdError, NotFoundError) as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        return jsonify({"message": "An error occurred while fetching the quiz"}), 500

    return jsonify({"message": "Quiz fetched successful", "quiz": serialize(quiz)}), 200
