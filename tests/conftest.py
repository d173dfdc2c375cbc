"""Shared pytest fixtures for the test suite."""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from payment_intentions.application.use_cases import CreatePaymentIntentionUseCase, CreationPolicy
from payment_intentions.domain.value_objects import RateLimit, ValueWindow
from payment_intentions.infrastructure import (
    FixedTimeProvider,
    InMemoryPaymentIntentionRepository,
    InMemoryUserDirectory,
    SequentialIdentityProvider,
)


@pytest.fixture
def now() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(now: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(now)


@pytest.fixture
def value_window() -> ValueWindow:
    return ValueWindow(minimum=Decimal("1"), maximum=Decimal("10000"))


@pytest.fixture
def rate_limit() -> RateLimit:
    return RateLimit(max_per_window=5, period=timedelta(days=1))


@pytest.fixture
def policy(value_window: ValueWindow, rate_limit: RateLimit) -> CreationPolicy:
    return CreationPolicy(value_window=value_window, rate_limit=rate_limit)


@pytest.fixture
def repository() -> InMemoryPaymentIntentionRepository:
    return InMemoryPaymentIntentionRepository()


@pytest.fixture
def user_directory() -> InMemoryUserDirectory:
    """Users 1, 2 and 3 exist; everything else is unknown."""
    return InMemoryUserDirectory([1, 2, 3])


@pytest.fixture
def identity_provider() -> SequentialIdentityProvider:
    return SequentialIdentityProvider()


@pytest.fixture
def use_case(
    time_provider: FixedTimeProvider,
    identity_provider: SequentialIdentityProvider,
    repository: InMemoryPaymentIntentionRepository,
    user_directory: InMemoryUserDirectory,
    policy: CreationPolicy,
) -> CreatePaymentIntentionUseCase:
    return CreatePaymentIntentionUseCase(
        time_provider=time_provider,
        identity_provider=identity_provider,
        repository=repository,
        user_directory=user_directory,
        policy=policy,
    )
