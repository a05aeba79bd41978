import pytest

from core.exceptions import DeletionInProgressError
from services.deletion_tracker import DeletionPhase, DeletionTracker


def test_starts_idle():
    tracker = DeletionTracker()
    assert tracker.phase("g1", "p1") == DeletionPhase.IDLE
    assert not tracker.is_busy("g1", "p1")
    assert len(tracker) == 0


def test_confirming_then_done():
    tracker = DeletionTracker()

    with tracker.confirming("g1", "p1"):
        assert tracker.phase("g1", "p1") == DeletionPhase.CONFIRMING
        with tracker.deleting("g1", "p1") as attempt:
            assert tracker.is_busy("g1", "p1")
            assert not tracker.is_busy("g1", "p2")

    assert attempt.phase == DeletionPhase.DONE
    assert tracker.phase("g1", "p1") == DeletionPhase.IDLE
    assert len(tracker) == 0


def test_failure_is_reported_and_reraised():
    tracker = DeletionTracker()

    with pytest.raises(RuntimeError):
        with tracker.deleting("g1", "p1") as attempt:
            raise RuntimeError("boom")

    assert attempt.phase == DeletionPhase.FAILED
    assert not tracker.is_busy("g1", "p1")
    assert len(tracker) == 0


def test_second_deletion_rejected_while_busy():
    tracker = DeletionTracker()

    with tracker.deleting("g1", "p1"):
        with pytest.raises(DeletionInProgressError):
            with tracker.deleting("g1", "p1"):
                pass
        with pytest.raises(DeletionInProgressError):
            with tracker.confirming("g1", "p1"):
                pass
        assert tracker.is_busy("g1", "p1")


def test_can_retry_after_failure():
    tracker = DeletionTracker()
    with pytest.raises(ValueError):
        with tracker.deleting("g1", "p1"):
            raise ValueError()

    with tracker.deleting("g1", "p1") as attempt:
        pass
    assert attempt.phase == DeletionPhase.DONE


def test_unconfirmed_requests_leave_nothing_behind():
    tracker = DeletionTracker()

    for i in range(1000):
        with pytest.raises(LookupError):
            with tracker.confirming("g1", f"p{i}"):
                raise LookupError("not confirmed")

    assert len(tracker) == 0
