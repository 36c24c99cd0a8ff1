from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from omegaconf import DictConfig, OmegaConf

import crude_profiler
from crude_profiler import Profiler
from tests.factories.clock_factory import FakeClock

CONFIG_ROOT = Path(__file__).resolve().parents[1] / "configs"


@pytest.fixture(autouse=True)
def _reset_default_profiler() -> None:
    crude_profiler.reset()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def profiler(clock: FakeClock) -> Profiler:
    return Profiler(clock=clock)


@pytest.fixture
def load_config() -> Callable[[str], DictConfig]:
    def _load(name: str = "config.yaml") -> DictConfig:
        return OmegaConf.load(CONFIG_ROOT / name)  # type: ignore[return-value]

    return _load
