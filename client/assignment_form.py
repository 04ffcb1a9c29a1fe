"""
Assignment creation form.

Client-side controller for the "Create Assignment" dialog: holds the field
state, validates every required field in one pass, posts the multipart upload
to the backend and reports the outcome through transient notifications.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum

import requests

from utils.errors import TransportError
from utils.messages import REQUIRED_MESSAGES

logger = logging.getLogger(__name__)


class FormState(Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


@dataclass
class Notification:
    title: str
    description: str
    status: str
    duration: int = 2000
    is_closable: bool = True


SUCCESS_NOTIFICATION = Notification(
    title="Submission Successful",
    description="Assignment has been submitted successfully.",
    status="success",
)
ERROR_NOTIFICATION = Notification(
    title="Error",
    description="An error occurred while submitting the assignment.",
    status="error",
)


def _blank(value):
    return str(value or "").strip() == ""


class AssignmentForm:
    def __init__(self, backend_url, on_submit, notify=None, session=None, timeout=None):
        self.url = backend_url.rstrip("/") + "/assignments"
        self.on_submit = on_submit
        self.notify = notify or (lambda notification: None)
        self.session = session or requests.Session()
        self.timeout = timeout

        self.state = FormState.CLOSED
        self.title = ""
        self.description = ""
        self.visible_date = ""
        self.file = None
        self.errors = {}

    @property
    def is_open(self):
        return self.state is not FormState.CLOSED

    @property
    def can_submit(self):
        return self.state is FormState.OPEN

    def open(self, prototype):
        """Re-enters the form from the prototype's values; the file is never pre-filled."""
        self.title = prototype.get("title") or ""
        self.description = prototype.get("description") or ""
        self.visible_date = prototype.get("visibleDate") or ""
        self.file = None
        self.errors = {}
        self.state = FormState.OPEN

    def close(self):
        self.state = FormState.CLOSED

    def set_title(self, value):
        self.title = value

    def set_description(self, value):
        self.description = value

    def set_visible_date(self, value):
        self.visible_date = value

    def select_file(self, file):
        """Accepts a path on disk or a (filename, bytes) pair."""
        if isinstance(file, (str, os.PathLike)):
            with open(file, "rb") as fh:
                file = (os.path.basename(file), fh.read())
        self.file = file

    def validate(self):
        errors = {}
        if _blank(self.title):
            errors["title"] = REQUIRED_MESSAGES["title"]
        if _blank(self.description):
            errors["description"] = REQUIRED_MESSAGES["description"]
        if _blank(self.visible_date):
            errors["visibleDate"] = REQUIRED_MESSAGES["visibleDate"]
        if not self.file or not self.file[1]:
            errors["file"] = REQUIRED_MESSAGES["file"]
        self.errors = errors
        return not errors

    def submit(self):
        """
        Validates and uploads the assignment.

        Returns True when the server accepted it. While a submission is in
        flight further calls are ignored and return False.
        """
        if not self.can_submit:
            logger.debug("Submit ignored in state %s", self.state.value)
            return False
        if not self.validate():
            return False

        self.state = FormState.SUBMITTING
        try:
            new_assignment = self._post()
        except TransportError as e:
            logger.error("Error: %s", e)
            self.state = FormState.OPEN
            self._notify(ERROR_NOTIFICATION)
            return False

        try:
            self.on_submit(new_assignment)
            self._notify(SUCCESS_NOTIFICATION)
        finally:
            # leaves SUBMITTING even when the callback raises
            self.close()
        return True

    def _post(self):
        name, data = self.file
        try:
            response = self.session.post(
                self.url,
                files={"file": (name, data)},
                data={
                    "title": self.title,
                    "description": self.description,
                    "visibleDate": self.visible_date,
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not reach {self.url}: {e}") from e

        if not response.ok:
            raise TransportError(f"Error creating assignment: HTTP {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            raise TransportError("Error creating assignment: invalid JSON response") from e

    def _notify(self, notification):
        log = logger.info if notification.status == "success" else logger.warning
        log("%s: %s", notification.title, notification.description)
        self.notify(notification)
