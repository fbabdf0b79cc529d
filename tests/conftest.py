"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the settings and
the loguru sinks are configured at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'user-directory-test')
    os.environ.setdefault('DEPLOY_ENV', 'test')


_early_setup_test_environment()

from collections.abc import Generator  # noqa: E402
from datetime import datetime, timezone  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402

from src.service.user.app.interface.i_user_repo import IUserRepo  # noqa: E402
from src.service.user.domain.entity.user_entity import UserEntity, UserRole  # noqa: E402


FIXTURES_DIR = Path(__file__).parent / 'fixtures'


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def buyer_entity() -> UserEntity:
    return UserEntity(
        id=1,
        email='buyer@example.com',
        name='Buyer',
        role=UserRole.BUYER,
        is_active=True,
        created_at=datetime(2025, 1, 10, 10, 30, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_user_repo() -> Generator[AsyncMock, None, None]:
    """AsyncMock constrained to the IUserRepo interface"""
    yield AsyncMock(spec=IUserRepo)
