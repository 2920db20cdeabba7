import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from staffdirectory.db.base import Base
from staffdirectory.db.models import (
    Department,
    File,
    FileReference,
    FrontendUser,
    Member,
    Staff,
)


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield factory
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def directory(db_session):
    """Two staffs, three departments, four persons, five memberships.

    Jane Doe (person 1) belongs to both staffs and has an image; Bob (person 4)
    is disabled and must never show up.
    """
    db_session.add_all([
        FrontendUser(
            uid=1, username="jdoe", name="Jane Doe", first_name="Jane",
            last_name="Doe", title="Dr", address="  1 Main St \n",
            zip="1000", city="  Springfield  ", country="CH",
            email="jane@example.com", www="example.com", image="1",
            tx_staffdirectory_gender=1,
            tx_staffdirectory_mobilephone="079 000 00 00",
            tx_staffdirectory_email2="jane.doe@example.org",
        ),
        FrontendUser(
            uid=2, username="asmith", name="Alan Smith", first_name="Alan",
            last_name="Smith", image="1", tx_staffdirectory_gender=0,
        ),
        FrontendUser(
            uid=3, username="cadams", name="Carla Adams", first_name="Carla",
            last_name="Adams", image=None,
        ),
        FrontendUser(uid=4, username="bob", first_name="Bob", last_name="Zed", disable=1),
        Staff(uid=1, staff_name="Board"),
        Staff(uid=2, staff_name="Faculty"),
        Staff(uid=3, staff_name="Archive", hidden=1),
    ])
    db_session.flush()
    db_session.add_all([
        Department(uid=10, staff=1, position_title="Presidency", sorting=2),
        Department(uid=11, staff=1, position_title="Treasury", sorting=1),
        Department(uid=20, staff=2, position_title="Teachers", sorting=1),
        Department(uid=30, staff=3, position_title="Old", sorting=1),
        File(uid=100, identifier="/images/jane.jpg", name="jane.jpg"),
        File(uid=101, identifier="/images/jane-old.jpg", name="jane-old.jpg"),
    ])
    db_session.flush()
    db_session.add_all([
        Member(uid=1000, department=10, feuser_id=1, position_function="President", sorting=1),
        Member(uid=1001, department=11, feuser_id=2, position_function="Treasurer", sorting=1),
        Member(uid=1002, department=20, feuser_id=1, position_function="Teacher", sorting=2),
        Member(uid=1003, department=20, feuser_id=3, position_function="Teacher", sorting=1),
        Member(uid=1004, department=20, feuser_id=4, position_function="Teacher", sorting=3),
        Member(uid=1005, department=30, feuser_id=3, position_function="Archivist", sorting=1),
        FileReference(
            uid=500, uid_local=101, uid_foreign=1, tablenames="fe_users",
            fieldname="image", sorting_foreign=2,
        ),
        FileReference(
            uid=501, uid_local=100, uid_foreign=1, tablenames="fe_users",
            fieldname="image", sorting_foreign=1,
        ),
        FileReference(
            uid=502, uid_local=100, uid_foreign=2, tablenames="tt_content",
            fieldname="image", sorting_foreign=1,
        ),
    ])
    db_session.commit()
    return db_session
