import os
from datetime import date

import pytest
from sqlmodel import Session, SQLModel

from demo_seed.config import Settings, Volumes
from demo_seed.db import build_engine, init_db
from demo_seed.random_source import RandomSource


@pytest.fixture()
def rng() -> RandomSource:
    return RandomSource(42)


@pytest.fixture()
def small_settings() -> Settings:
    # Volúmenes reducidos para que la siembra completa corra rápido en SQLite
    return Settings(
        database_url="sqlite://",
        master_seed=20260202,
        current_date=date(2026, 2, 2),
        batch_size=25,
        strict_mode=True,
        volumes=Volumes(
            employees=120,
            cases=150,
            repeat_subjects=8,
            hotspot_managers=4,
            retaliation_chains=10,
        ),
    )


@pytest.fixture()
def db_url(tmp_path) -> str:
    return f"sqlite:///{os.path.join(str(tmp_path), 'demo_test.db')}"


@pytest.fixture()
def engine(db_url):
    test_engine = build_engine(db_url, echo=False)
    init_db(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as db_session:
        yield db_session
