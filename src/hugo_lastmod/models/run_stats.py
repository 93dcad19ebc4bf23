"""整次執行的統計。"""

from __future__ import annotations

from dataclasses import dataclass

from .bundle_outcome import BundleOutcome, BundleState


@dataclass
class RunStats:
    total_bundles: int = 0
    updated_bundles: int = 0
    unchanged_bundles: int = 0
    no_image_bundles: int = 0
    invalid_bundles: int = 0
    failed_bundles: int = 0
    total_added: int = 0
    total_changed: int = 0
    total_deleted: int = 0

    def record(self, outcome: BundleOutcome) -> None:
        self.total_bundles += 1
        if outcome.state is BundleState.UPDATED:
            self.updated_bundles += 1
        elif outcome.state is BundleState.UNCHANGED:
            self.unchanged_bundles += 1
        elif outcome.state is BundleState.NO_IMAGES:
            self.no_image_bundles += 1
            return
        elif outcome.state is BundleState.INVALID_DESCRIPTOR:
            self.invalid_bundles += 1
        else:
            self.failed_bundles += 1
            if outcome.state is BundleState.SCAN_FAILED:
                return

        self.total_added += outcome.diff.added
        self.total_changed += outcome.diff.changed
        self.total_deleted += outcome.diff.deleted

    def to_dict(self) -> dict[str, int]:
        return {
            "total_bundles": self.total_bundles,
            "updated_bundles": self.updated_bundles,
            "unchanged_bundles": self.unchanged_bundles,
            "no_image_bundles": self.no_image_bundles,
            "invalid_bundles": self.invalid_bundles,
            "failed_bundles": self.failed_bundles,
            "total_added": self.total_added,
            "total_changed": self.total_changed,
            "total_deleted": self.total_deleted,
        }
