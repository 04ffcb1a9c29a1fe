import logging
import os
import uuid
from datetime import datetime, timezone

from werkzeug.utils import secure_filename

from database.mongo import ASSIGNMENTS
from utils.errors import ValidationError
from utils.messages import REQUIRED_MESSAGES

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".pdf", ".doc", ".docx"}


def validate_assignment(title, description, visible_date, upload):
    """
    Checks every required field and returns a dict of field -> message.
    All failures are reported together.
    """
    errors = {}
    if not (title or "").strip():
        errors["title"] = REQUIRED_MESSAGES["title"]
    if not (description or "").strip():
        errors["description"] = REQUIRED_MESSAGES["description"]
    if not (visible_date or "").strip():
        errors["visibleDate"] = REQUIRED_MESSAGES["visibleDate"]
    if upload is None or not upload.filename:
        errors["file"] = REQUIRED_MESSAGES["file"]
    else:
        ext = os.path.splitext(upload.filename)[1].lower()
        if ext not in ALLOWED_EXTENSIONS:
            errors["file"] = "File must be one of: " + ", ".join(sorted(ALLOWED_EXTENSIONS))
    return errors


class AssignmentService:
    def __init__(self, store, upload_folder):
        self.store = store
        self.upload_folder = upload_folder

    def create_assignment(self, title, description, visible_date, upload):
        errors = validate_assignment(title, description, visible_date, upload)
        if errors:
            raise ValidationError(errors, "Assignment is missing required fields")

        ext = os.path.splitext(upload.filename)[1].lower()
        original_name = secure_filename(upload.filename)
        # secure_filename drops non-ASCII names down to e.g. "pdf"
        if not original_name.lower().endswith(ext):
            original_name = f"upload{ext}"
        stored_name = f"{uuid.uuid4().hex}_{original_name}"
        os.makedirs(self.upload_folder, exist_ok=True)
        path = os.path.join(self.upload_folder, stored_name)
        upload.save(path)
        size = os.path.getsize(path)
        if size == 0:
            os.remove(path)
            raise ValidationError({"file": "File must not be empty"}, "Uploaded file is empty")

        assignment = {
            "title": title.strip(),
            "description": description.strip(),
            "visibleDate": visible_date.strip(),
            "fileName": original_name,
            "storedFileName": stored_name,
            "contentType": upload.mimetype or "application/octet-stream",
            "size": size,
            "created_at": datetime.now(timezone.utc),
        }
        try:
            with self.store.collection(ASSIGNMENTS) as assignments:
                result = assignments.insert_one(assignment)
        except Exception:
            os.remove(path)
            raise
        assignment["_id"] = result.inserted_id
        logger.info("Created assignment %s with file %s", result.inserted_id, stored_name)
        return assignment

    def list_assignments(self):
        with self.store.collection(ASSIGNMENTS) as assignments:
            return list(assignments.find())
