"""Shared fixtures for checkout tests."""

from __future__ import annotations

import pytest
from kungfu import Ok

from checkout import CheckoutConfig, CheckoutController
from tests._fakes import (
    CountingCart,
    FakeGateway,
    FakeSession,
    RecordingNavigator,
    lechon_belly,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Fixtures
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def cart() -> CountingCart:
    return CountingCart([lechon_belly()])


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def config() -> CheckoutConfig:
    return CheckoutConfig()


@pytest.fixture
def controller(
    cart: CountingCart,
    session: FakeSession,
    gateway: FakeGateway,
    navigator: RecordingNavigator,
    config: CheckoutConfig,
) -> CheckoutController:
    return CheckoutController(
        cart=cart,
        session=session,
        gateway=gateway,
        navigator=navigator,
        config=config,
    )


@pytest.fixture
async def mounted(controller: CheckoutController) -> CheckoutController:
    result = await controller.mount()
    assert isinstance(result, Ok)
    return controller
