from staffdirectory.repositories.department_repo import DepartmentRepository
from staffdirectory.repositories.staff_repo import StaffRepository
from staffdirectory.schemas.member import Member


def test_find_staff_by_uid(directory):
    repo = StaffRepository(directory)
    assert repo.find_by_uid(1).staff_name == "Board"
    assert repo.find_by_uid(3) is None
    assert repo.find_by_uid(99) is None


def test_find_by_person_is_distinct(directory):
    repo = StaffRepository(directory)
    staffs = repo.find_by_person(Member(uid=1000, person_uid=1))
    assert [s.uid for s in staffs] == [1, 2]


def test_find_by_person_skips_hidden_staffs(directory):
    repo = StaffRepository(directory)
    assert [s.uid for s in repo.find_by_person(Member(uid=1003, person_uid=3))] == [2]
    assert repo.find_by_person(Member(uid=0, person_uid=99)) == []


def test_find_department(directory):
    repo = DepartmentRepository(directory)
    department = repo.find_by_uid(10)
    assert department.uid == 10
    assert department.staff_uid == 1
    assert department.position_title == "Presidency"
    assert repo.find_by_uid(99) is None


def test_find_departments_by_staff(directory):
    repo = DepartmentRepository(directory)
    assert [d.uid for d in repo.find_by_staff(1)] == [11, 10]
    assert repo.find_by_staff(99) == []
