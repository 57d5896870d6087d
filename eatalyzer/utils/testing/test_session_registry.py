import pytest

from eatalyzer.models.session import ImageUpload, PendingState
from eatalyzer.services.session import SessionRegistry

from .samples import JPEG_BYTES, FakeAnalysisClient


def _jpeg():
    return ImageUpload.from_bytes("meal.jpg", "image/jpeg", JPEG_BYTES)


def test_same_id_returns_same_controller():
    registry = SessionRegistry(FakeAnalysisClient())
    assert registry.get("a") is registry.get("a")
    assert registry.get("a") is not registry.get("b")


def test_registry_never_exceeds_cap():
    registry = SessionRegistry(FakeAnalysisClient(), max_sessions=5)
    for i in range(50):
        registry.get(f"session-{i}").select_file(_jpeg())
    assert len(registry) == 5
    assert all(f"session-{i}" in registry for i in range(45, 50))
    assert "session-0" not in registry


def test_least_recently_used_is_evicted():
    registry = SessionRegistry(FakeAnalysisClient(), max_sessions=2)
    registry.get("a")
    registry.get("b")
    registry.get("a")  # touch a so b becomes the oldest
    registry.get("c")
    assert "a" in registry
    assert "b" not in registry
    assert "c" in registry


def test_evicted_session_releases_image():
    registry = SessionRegistry(FakeAnalysisClient(), max_sessions=1)
    upload = _jpeg()
    first = registry.get("a")
    first.select_file(upload)
    registry.get("b")

    snap = first.snapshot()
    assert snap.filename is None
    assert snap.preview_encoding is None
    assert snap.pending_state is PendingState.IDLE
    assert upload.stream.closed


def test_evicted_id_starts_fresh():
    registry = SessionRegistry(FakeAnalysisClient(), max_sessions=1)
    registry.get("a").select_file(_jpeg())
    registry.get("b")
    assert registry.get("a").snapshot().filename is None


def test_cap_must_be_positive():
    with pytest.raises(ValueError):
        SessionRegistry(FakeAnalysisClient(), max_sessions=0)
