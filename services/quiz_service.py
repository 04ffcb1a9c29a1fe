import logging

from database.mongo import QUIZZES
from utils.documents import to_object_id
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)

# Fields staff see but students must not.
STAFF_ONLY_FIELDS = ("created_by",)
STAFF_ONLY_QUESTION_FIELDS = ("answer",)


# --- HELPER UTILITIES ---

def student_view(quiz):
    """
    Returns a copy of the quiz with staff-only fields and answer keys removed.
    The result is always a field-subset of the stored document.
    """
    quiz_copy = {k: v for k, v in quiz.items() if k not in STAFF_ONLY_FIELDS}
    if isinstance(quiz.get("questions"), list):
        sanitized = []
        for q in quiz["questions"]:
            if isinstance(q, dict):
                q = {k: v for k, v in q.items() if k not in STAFF_ONLY_QUESTION_FIELDS}
            sanitized.append(q)
        quiz_copy["questions"] = sanitized
    return quiz_copy


# --- CORE FUNCTIONS ---

class QuizService:
    def __init__(self, store):
        self.store = store

    def list_all_quizzes(self):
        with self.store.collection(QUIZZES) as quizzes:
            quiz_list = list(quizzes.find())
        logger.info("Fetched %d quiz(zes), full view", len(quiz_list))
        return quiz_list

    def list_quizzes_for_students(self):
        with self.store.collection(QUIZZES) as quizzes:
            quiz_list = [student_view(q) for q in quizzes.find()]
        logger.info("Fetched %d quiz(zes), student view", len(quiz_list))
        return quiz_list

    def get_quiz(self, quiz_id, student=False):
        obj_id = to_object_id(quiz_id)
        with self.store.collection(QUIZZES) as quizzes:
            quiz = quizzes.find_one({"_id": obj_id})
        if not quiz:
            raise NotFoundError("Quiz not found")
        return student_view(quiz) if student else quiz
