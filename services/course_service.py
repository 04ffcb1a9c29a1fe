import logging

from database.mongo import COURSES
from utils.documents import to_object_id
from utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class CourseService:
    """
    CRUD over the courses collection.

    Identifiers are parsed into ObjectIds here, so a malformed id raises
    InvalidIdError instead of silently matching nothing. Store failures
    propagate as StoreError after MongoStore has logged them.
    """

    def __init__(self, store):
        self.store = store

    def list_courses(self):
        with self.store.collection(COURSES) as courses:
            course_list = list(courses.find())
        logger.info("Fetched %d course(s)", len(course_list))
        return course_list

    def get_course(self, course_id):
        obj_id = to_object_id(course_id)
        with self.store.collection(COURSES) as courses:
            course = courses.find_one({"_id": obj_id})
        if not course:
            raise NotFoundError("Course not found")
        return course

    def create_course(self, new_course):
        course = {k: v for k, v in dict(new_course).items() if k != "_id"}
        with self.store.collection(COURSES) as courses:
            result = courses.insert_one(course)
        course["_id"] = result.inserted_id
        logger.info("Created course %s", result.inserted_id)
        return course

    def update_course(self, course_id, updated_course):
        obj_id = to_object_id(course_id)
        fields = {k: v for k, v in dict(updated_course).items() if k != "_id"}
        with self.store.collection(COURSES) as courses:
            if fields:
                result = courses.update_one({"_id": obj_id}, {"$set": fields})
                matched = result.matched_count
            else:
                matched = courses.count_documents({"_id": obj_id}, limit=1)
        if not matched:
            raise NotFoundError("Course not found")
        logger.info("Updated course %s", obj_id)
        return True

    def delete_course(self, course_id):
        obj_id = to_object_id(course_id)
        with self.store.collection(COURSES) as courses:
            result = courses.delete_one({"_id": obj_id})
        if not result.deleted_count:
            raise NotFoundError("Course not found")
        logger.info("Deleted course %s", obj_id)
        return True
