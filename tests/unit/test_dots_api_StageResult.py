"""Unit tests for dots.api.StageResult module."""

from collections.abc import Iterator

from dots.api.StageResult import StageResult
from tests.unit.conftest import run_cmd


def test_stage_result_initialization():
    """Test that StageResult initializes correctly."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(
        announce="Testing",
        progress_callback=progress_gen,
    )
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_stage_result_filled_by_progress():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Halfway")
        yield (1.0, "Complete")
        result.result = "Done"
        result.success = True

    result = run_cmd(lambda: StageResult(announce="Testing", progress_callback=progress_gen))
    assert result.result == "Done"
    assert result.success is True
