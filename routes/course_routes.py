import logging
from flask import Blueprint, request, jsonify, current_app

from utils.documents import serialize
from utils.errors import InvalidIdError, NotFoundError, StoreError

logger = logging.getLogger(__name__)

course_bp = Blueprint("courses", __name__)


def course_service():
    return current_app.extensions["course_service"]


def _json_object():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return None
    return data


# ---------------- LIST COURSES ----------------
@course_bp.route("/courses", methods=["GET"])
def get_courses():
    try:
        course_list = course_service().list_courses()
    except StoreError:
        return jsonify({"message": "An error occurred while fetching the courses"}), 500

    if course_list:
        return jsonify({"message": "Courses fetched successfully", "courseList": serialize(course_list)}), 200
    return jsonify({"message": "No courses found", "courseList": []}), 200


# ---------------- GET COURSE BY ID ----------------
@course_bp.route("/courses/<course_id>", methods=["GET"])
def get_course(course_id):
    try:
        course = course_service().get_course(course_id)
    except (InvalidIdError, NotFoundError) as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        return jsonify({"message": "An error occurred while fetching the course"}), 500

    return jsonify({"message": "Course fetched successfully", "course": serialize(course)}), 200


# ---------------- CREATE COURSE ----------------
@course_bp.route("/courses", methods=["POST"])
def create_course():
    data = _json_object()
    if data is None:
        return jsonify({"message": "Course data must be a non-empty JSON object"}), 400

    try:
        course = course_service().create_course(data)
    except StoreError:
        return jsonify({"message": "An error occurred while creating the course"}), 500

    return jsonify({"message": "Course created successfully", "course": serialize(course)}), 201


# ---------------- UPDATE COURSE ----------------
@course_bp.route("/courses/<course_id>", methods=["PUT"])
def update_course(course_id):
    data = _json_object()
    if data is None:
        return jsonify({"message": "Course data must be a non-empty JSON object"}), 400

    try:
        course_service().update_course(course_id, data)
    except (InvalidIdError, NotFoundError) as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        return jsonify({"message": "An error occurred while updating the course"}), 500

    return jsonify({"message": "Course updated successfully"}), 200


# ---------------- DELETE COURSE ----------------
@course_bp.route("/courses/<course_id>", methods=["DELETE"])
def delete_course(course_id):
    try:
        course_service().delete_course(course_id)
    except (InvalidIdError, NotFoundError) as e:
        logger.warning("Delete of course %s refused: %s", course_id, e.message)
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        return jsonify({"message": "An error occurred while deleting the course"}), 500

    return jsonify({"message": "Course deleted successfully"}), 200
