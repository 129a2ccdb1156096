import pytest
from pydantic import ValidationError
from conftest import course_payload, student_payload
from exceptions.custom_errors import (
    CourseFullError,
    FacultyMismatchError,
    NotFoundError,
    NotRegisteredError,
    RegistryError,
)
from schemas.registry import (
    CourseCreate,
    CourseType,
    Faculty,
    Grade,
    Semester,
    StudentStatus,
)


def test_ids_are_sequential_per_entity(registry):
    c1 = registry.add_course(course_payload())
    c2 = registry.add_course(CourseCreate(**course_payload(name="Databases")))
    s1 = registry.enroll_student(student_payload())
    s2 = registry.enroll_student(student_payload(full_name="Mariia Ivanenko"))

    assert (c1.id, c2.id) == (1, 2)
    assert (s1.id, s2.id) == (1, 2)
    assert registry.find_course(2).name == "Databases"
    assert registry.find_student(2).full_name == "Mariia Ivanenko"


def test_invalid_payload_is_rejected_without_side_effects(registry):
    with pytest.raises(ValidationError):
        registry.add_course(course_payload(faculty="Medicine"))
    with pytest.raises(ValidationError):
        registry.enroll_student(student_payload(year=0))

    assert registry.state.courses == []
    assert registry.state.students == []
    assert registry.add_course(course_payload()).id == 1


def test_register_for_course(registry):
    course = registry.add_course(course_payload())
    student = registry.enroll_student(student_payload())

    assert registry.register_for_course(student.id, course.id) is True
    assert [r.key for r in registry.state.registrations] == [(student.id, course.id)]


@pytest.mark.parametrize("student_id, course_id", [(99, 1), (1, 99), (99, 99)])
def test_register_unknown_ids(registry, student_id, course_id):
    registry.add_course(course_payload())
    registry.enroll_student(student_payload())

    with pytest.raises(NotFoundError):
        registry.register_for_course(student_id, course_id)


def test_duplicate_registration_is_a_silent_no_op(registry):
    course = registry.add_course(course_payload())
    student = registry.enroll_student(student_payload())

    registry.register_for_course(student.id, course.id)
    assert registry.register_for_course(student.id, course.id) is False

    assert len(registry.state.registrations) == 1


def test_mandatory_course_of_other_faculty_fails(registry):
    course = registry.add_course(course_payload(faculty=Faculty.ECONOMICS, max_students=500))
    student = registry.enroll_student(student_payload())

    with pytest.raises(FacultyMismatchError):
        registry.register_for_course(student.id, course.id)
    assert registry.state.registrations == []


def test_faculty_mismatch_is_reported_before_capacity(registry):
    course = registry.add_course(course_payload(faculty=Faculty.LAW, max_students=0))
    student = registry.enroll_student(student_payload())

    with pytest.raises(FacultyMismatchError):
        registry.register_for_course(student.id, course.id)


@pytest.mark.parametrize("course_type", [CourseType.OPTIONAL, CourseType.SPECIAL])
def test_non_mandatory_course_of_other_faculty_is_open(registry, course_type):
    course = registry.add_course(course_payload(type=course_type, faculty=Faculty.LAW))
    student = registry.enroll_student(student_payload())

    assert registry.register_for_course(student.id, course.id) is True


def test_course_with_one_seat(registry):
    course = registry.add_course(course_payload(max_students=1))
    first = registry.enroll_student(student_payload())
    second = registry.enroll_student(student_payload(full_name="Mariia Ivanenko"))

    registry.register_for_course(first.id, course.id)
    with pytest.raises(CourseFullError):
        registry.register_for_course(second.id, course.id)

    assert len(registry.state.registrations) == 1


def test_full_course_rejects_even_a_repeated_registration(registry):
    # Capacity is checked before the duplicate check.
    course = registry.add_course(course_payload(max_students=1))
    student = registry.enroll_student(student_payload())
    registry.register_for_course(student.id, course.id)

    with pytest.raises(CourseFullError):
        registry.register_for_course(student.id, course.id)


def test_set_grade_uses_course_semester(registry):
    course = registry.add_course(course_payload(semester=Semester.SECOND))
    student = registry.enroll_student(student_payload())
    registry.register_for_course(student.id, course.id)

    record = registry.set_grade(student.id, course.id, Grade.GOOD)

    assert record.grade == Grade.GOOD
    assert record.semester == Semester.SECOND
    assert registry.get_student_grades(student.id) == [record]


def test_set_grade_accepts_plain_integers(registry):
    course = registry.add_course(course_payload())
    student = registry.enroll_student(student_payload())
    registry.register_for_course(student.id, course.id)

    assert registry.set_grade(student.id, course.id, 5).grade is Grade.EXCELLENT


def test_set_grade_requires_registration(registry):
    course = registry.add_course(course_payload())
    student = registry.enroll_student(student_payload())

    with pytest.raises(NotRegisteredError):
        registry.set_grade(student.id, course.id, Grade.SATISFACTORY)
    assert registry.state.grades == []


def test_set_grade_rejects_values_outside_the_scale(registry):
    course = registry.add_course(course_payload())
    student = registry.enroll_student(student_payload())
    registry.register_for_course(student.id, course.id)

    with pytest.raises(ValueError):
        registry.set_grade(student.id, course.id, 1)
    assert registry.state.grades == []


def test_set_grade_falls_back_to_default_semester(registry):
    # A registration whose course has disappeared from the ledger.
    course = registry.add_course(course_payload(semester=Semester.SECOND))
    student = registry.enroll_student(student_payload())
    registry.register_for_course(student.id, course.id)
    registry.state.courses.clear()

    record = registry.set_grade(student.id, course.id, Grade.GOOD)

    assert record.semester == Semester.FIRST


def test_update_status(registry):
    student = registry.enroll_student(student_payload())

    assert registry.update_student_status(student.id, StudentStatus.ACADEMIC_LEAVE) is None
    assert registry.find_student(student.id).status == StudentStatus.ACADEMIC_LEAVE


def test_reinstating_expelled_student_warns_but_proceeds(registry, caplog):
    student = registry.enroll_student(student_payload(status=StudentStatus.EXPELLED))

    with caplog.at_level("WARNING"):
        advisory = registry.update_student_status(student.id, StudentStatus.ACTIVE)

    assert advisory is not None
    assert "rector" in advisory
    assert "rector" in caplog.text
    assert registry.find_student(student.id).status == StudentStatus.ACTIVE


@pytest.mark.parametrize(
    "old, new",
    [
        (StudentStatus.ACTIVE, StudentStatus.EXPELLED),
        (StudentStatus.GRADUATED, StudentStatus.ACTIVE),
        (StudentStatus.EXPELLED, StudentStatus.GRADUATED),
        (StudentStatus.ACTIVE, StudentStatus.ACTIVE),
    ],
)
def test_other_transitions_are_silent(registry, old, new):
    student = registry.enroll_student(student_payload(status=old))
    assert registry.update_student_status(student.id, new) is None
    assert student.status == new


def test_update_status_of_unknown_student(registry):
    with pytest.raises(NotFoundError):
        registry.update_student_status(7, StudentStatus.GRADUATED)


def test_errors_share_a_base_class():
    for exc in (NotFoundError, FacultyMismatchError, CourseFullError, NotRegisteredError):
        assert issubclass(exc, RegistryError)


def test_filters(registry):
    registry.add_course(course_payload(name="JS", semester=Semester.FIRST))
    registry.add_course(course_payload(name="Go", semester=Semester.SECOND))
    registry.add_course(course_payload(name="Micro", faculty=Faculty.ECONOMICS))
    registry.enroll_student(student_payload())
    registry.enroll_student(student_payload(full_name="Econ One", faculty=Faculty.ECONOMICS))

    first_cs = registry.get_available_courses(Faculty.COMPUTER_SCIENCE, Semester.FIRST)
    assert [c.name for c in first_cs] == ["JS"]
    assert [c.name for c in registry.get_available_courses("Economics", "First")] == ["Micro"]
    assert [s.full_name for s in registry.get_students_by_faculty(Faculty.ECONOMICS)] == ["Econ One"]
    assert registry.get_students_by_faculty(Faculty.LAW) == []
    assert registry.get_student_grades(1) == []
