import pytest

from hugo_lastmod.models import (
    BundleOutcome,
    BundleState,
    DiffResult,
    ErrorLevel,
    ImageEntry,
    ProcessError,
    RunStats,
)


def test_image_entry_serialization() -> None:
    mtime_entry = ImageEntry(rel_path="a.jpg", size=10, mtime_ms=123)
    hash_entry = ImageEntry(rel_path="b.jpg", size=20, hash="abc")

    assert mtime_entry.to_dict() == {"mtime": 123, "size": 10}
    assert hash_entry.to_dict() == {"hash": "abc", "size": 20}
    assert mtime_entry.fingerprint == 123
    assert hash_entry.fingerprint == "abc"
    assert ImageEntry.from_dict("a.jpg", {"mtime": 123, "size": 10}) == mtime_entry


def test_image_entry_rejects_bad_size() -> None:
    with pytest.raises(ValueError):
        ImageEntry.from_dict("a.jpg", {"mtime": 1, "size": "10"})


def test_diff_result_summary() -> None:
    diff = DiffResult(added=1, changed=2, deleted=3)

    assert diff.total == 6
    assert diff.summary() == "[+1 ~2 -3]"


def test_run_stats_record() -> None:
    stats = RunStats()
    stats.record(BundleOutcome("a", BundleState.UPDATED, DiffResult(added=2)))
    stats.record(BundleOutcome("b", BundleState.UNCHANGED, DiffResult(changed=1)))
    stats.record(BundleOutcome("c", BundleState.NO_IMAGES))
    stats.record(BundleOutcome("d", BundleState.INVALID_DESCRIPTOR, DiffResult(deleted=4)))
    stats.record(BundleOutcome("e", BundleState.SCAN_FAILED))

    assert stats.to_dict() == {
        "total_bundles": 5,
        "updated_bundles": 1,
        "unchanged_bundles": 1,
        "no_image_bundles": 1,
        "invalid_bundles": 1,
        "failed_bundles": 1,
        "total_added": 2,
        "total_changed": 1,
        "total_deleted": 4,
    }


def test_error_record_levels() -> None:
    error = ProcessError(
        code="W-203",
        level=ErrorLevel.RECOVERABLE,
        message="front matter missing",
        file_path="content/galleries/a/index.md",
    )
    data = error.to_dict()
    assert data["level"] == "W"
