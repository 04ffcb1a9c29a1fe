import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure

from database.mongo import COURSES
from services.course_service import CourseService
from utils.errors import InvalidIdError, NotFoundError, StoreError


@pytest.fixture
def service(store):
    return CourseService(store)


def test_create_then_list_includes_course(service):
    created = service.create_course({"name": "Algorithms", "code": "CS101"})
    assert isinstance(created["_id"], ObjectId)

    courses = service.list_courses()
    assert len(courses) == 1
    assert courses[0]["name"] == "Algorithms"
    assert courses[0]["code"] == "CS101"


def test_create_ignores_client_supplied_id(service):
    created = service.create_course({"_id": "abc", "name": "Databases"})
    assert created["_id"] != "abc"


def test_list_empty_collection(service):
    assert service.list_courses() == []


def test_get_course_by_string_id(service):
    created = service.create_course({"name": "Networks"})
    course = service.get_course(str(created["_id"]))
    assert course["name"] == "Networks"


def test_update_is_idempotent(service, db):
    created = service.create_course({"name": "Old", "credits": 3})
    course_id = str(created["_id"])

    assert service.update_course(course_id, {"name": "New"}) is True
    once = db[COURSES].find_one({"_id": created["_id"]})
    assert service.update_course(course_id, {"name": "New"}) is True
    twice = db[COURSES].find_one({"_id": created["_id"]})

    assert once == twice == {"_id": created["_id"], "name": "New", "credits": 3}


def test_update_never_rewrites_id(service, db):
    created = service.create_course({"name": "Old"})
    service.update_course(str(created["_id"]), {"_id": str(ObjectId()), "name": "New"})
    assert db[COURSES].find_one({"_id": created["_id"]})["name"] == "New"


def test_update_unknown_id_raises_not_found(service):
    with pytest.raises(NotFoundError):
        service.update_course(str(ObjectId()), {"name": "x"})


def test_delete_removes_course_permanently(service):
    keep = service.create_course({"name": "Keep"})
    gone = service.create_course({"name": "Gone"})

    assert service.delete_course(str(gone["_id"])) is True

    ids = [c["_id"] for c in service.list_courses()]
    assert gone["_id"] not in ids
    assert keep["_id"] in ids
    with pytest.raises(NotFoundError):
        service.delete_course(str(gone["_id"]))


@pytest.mark.parametrize("bad_id", ["", "not-an-id", "123"])
def test_malformed_ids_are_rejected(service, bad_id):
    with pytest.raises(InvalidIdError):
        service.delete_course(bad_id)
    with pytest.raises(InvalidIdError):
        service.update_course(bad_id, {"name": "x"})


def test_store_failure_propagates(service, db):
    db[COURSES].fail_with = OperationFailure("boom")
    with pytest.raises(StoreError):
        service.list_courses()
    with pytest.raises(StoreError):
        service.create_course({"name": "x"})
