import logging
from flask import Blueprint, request, jsonify, current_app

from utils.documents import serialize
from utils.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)

assignment_bp = Blueprint("assignments", __name__)


def assignment_service():
    return current_app.extensions["assignment_service"]


# ---------------- CREATE ASSIGNMENT (multipart upload) ----------------
@assignment_bp.route("/assignments", methods=["POST"])
def create_assignment():
    try:
        assignment = assignment_service().create_assignment(
            request.form.get("title"),
            request.form.get("description"),
            request.form.get("visibleDate"),
            request.files.get("file"),
        )
    except ValidationError as e:
        logger.warning("Rejected assignment upload: %s", e.errors)
        return jsonify({"message": e.message, "errors": e.errors}), 400
    except StoreError:
        return jsonify({"message": "An error occurred while creating the assignment"}), 500

    return jsonify(serialize(assignment)), 201


# ---------------- LIST ASSIGNMENTS ----------------
@assignment_bp.route("/assignments", methods=["GET"])
def list_assignments():
    try:
        assignments = assignment_service().list_assignments()
    except StoreError:
        return jsonify({"message": "An error occurred while fetching the assignments"}), 500

    return jsonify({"message": "Assignments fetched successfully", "assignments": serialize(assignments)}), 200
