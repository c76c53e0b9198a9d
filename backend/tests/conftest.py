"""
Point the app at a throwaway SQLite file before anything imports lifttrack,
then build the schema once for the whole run.
"""
import os
import tempfile
import uuid

import pytest

_tmpdir = tempfile.mkdtemp(prefix="lifttrack-tests-")
os.environ["SQLALCHEMY_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"


@pytest.fixture(scope="session", autouse=True)
def schema():
    from lifttrack.db import Base, engine
    from lifttrack import models  # noqa: F401
    Base.metadata.create_all(engine)
    yield
    Base.metadata.drop_all(engine)


@pytest.fixture
def db():
    from lifttrack.db import SessionLocal
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def user_id(db):
    from lifttrack.repositories.user_repo import UserRepository
    u = UserRepository(db).create(email=f"{uuid.uuid4().hex[:10]}@ex.com", name="Lifter", password_hash="")
    return u.id
