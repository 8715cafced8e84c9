"""
Tests for the Result[P] envelope and the Timer.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings and has_warning()
    - Timer sections, accumulation and misuse errors
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer, timed


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**overrides):
    fields = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    fields.update(overrides)
    return Result(**fields)


# ═══════════════════════════════════════════════════════════════════════
# Result
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"method": "laplace"},
            timing={"total_seconds": 0.01},
            backend_name="cpu_laplace",
        )
        assert result.params.value == 42.0
        assert result.info["method"] == "laplace"
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_laplace"

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning(self):
        result = _result(warnings=("cofactor expansion is slow", "other"))
        assert result.has_warning("slow")
        assert not result.has_warning("singular")


class TestImmutability:

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# Timer
# ═══════════════════════════════════════════════════════════════════════


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section("a"):
            pass
        with timer.section("b"):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {"total_seconds", "a", "b"}
        assert all(v >= 0.0 for v in result.values())

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section("loop"):
                pass
        timer.stop()
        assert "loop" in timer.result()

    def test_section_recorded_when_block_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ValueError):
            with timer.section("failing"):
                raise ValueError("x")
        timer.stop()
        assert "failing" in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()

    def test_timed_context(self):
        with timed() as timer:
            sum(range(10))
        assert timer.result()["total_seconds"] >= 0.0
