from datetime import datetime, timedelta, timezone
from pathlib import Path

from PIL import Image

from hugo_lastmod.config import ConfigManager
from hugo_lastmod.core import LastmodPipeline
from hugo_lastmod.models import BundleState


class FakeClock:
    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def _create_image(path: Path, color=(255, 0, 0)) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGB", (64, 64), color=color).save(path, "png")


def _make_story(root: Path, name: str) -> Path:
    bundle = root / "content" / "stories" / name
    bundle.mkdir(parents=True)
    (bundle / "index.md").write_text(
        '---\ntitle: "trip"\nlastmod: "2020-01-01T00:00:00+00:00"\n---\ntext\n',
        encoding="utf-8",
    )
    _create_image(bundle / "a.png")
    _create_image(bundle / "b.png", color=(0, 255, 0))
    return bundle


def _pipeline(root: Path, clock: FakeClock) -> LastmodPipeline:
    config = ConfigManager()
    config.set("gitAdd", False)
    config.set("targetDirs", ["content/stories/*/"])
    config.set("fingerprint.strategy", "hash")
    config.set("fingerprint.parallelWorkers", 2)
    return LastmodPipeline.from_config(config, root, tz=timezone.utc, clock=clock)


def _lastmod(bundle: Path) -> str:
    for line in (bundle / "index.md").read_text(encoding="utf-8").splitlines():
        if line.startswith("lastmod:"):
            return line
    return ""


def test_hash_mode_uses_run_time_for_new_images(tmp_path: Path) -> None:
    bundle = _make_story(tmp_path, "trip")
    clock = FakeClock(datetime(2025, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc))

    result = _pipeline(tmp_path, clock).run()

    assert result.outcomes[0].state is BundleState.UPDATED
    assert result.outcomes[0].diff.added == 2
    assert _lastmod(bundle) == 'lastmod: "2025-03-04T05:06:07+00:00"'


def test_hash_mode_ignores_touch_without_content_change(tmp_path: Path) -> None:
    bundle = _make_story(tmp_path, "trip")
    clock = FakeClock(datetime(2025, 3, 4, tzinfo=timezone.utc))
    _pipeline(tmp_path, clock).run()

    clock.advance(days=1)
    (bundle / "a.png").touch()
    result = _pipeline(tmp_path, clock).run()

    assert result.outcomes[0].state is BundleState.UNCHANGED
    assert _lastmod(bundle) == 'lastmod: "2025-03-04T00:00:00+00:00"'


def test_hash_mode_detects_content_change(tmp_path: Path) -> None:
    bundle = _make_story(tmp_path, "trip")
    clock = FakeClock(datetime(2025, 3, 4, tzinfo=timezone.utc))
    _pipeline(tmp_path, clock).run()

    clock.advance(hours=2)
    _create_image(bundle / "a.png", color=(0, 0, 255))
    result = _pipeline(tmp_path, clock).run()

    outcome = result.outcomes[0]
    assert outcome.state is BundleState.UPDATED
    assert (outcome.diff.added, outcome.diff.changed, outcome.diff.deleted) == (0, 1, 0)
    assert _lastmod(bundle) == 'lastmod: "2025-03-04T02:00:00+00:00"'


def test_hash_mode_does_not_move_backwards(tmp_path: Path) -> None:
    bundle = _make_story(tmp_path, "trip")
    (bundle / "index.md").write_text(
        '---\nlastmod: "2099-01-01T00:00:00+00:00"\n---\n', encoding="utf-8"
    )
    clock = FakeClock(datetime(2025, 3, 4, tzinfo=timezone.utc))

    result = _pipeline(tmp_path, clock).run()

    assert result.outcomes[0].state is BundleState.UNCHANGED
    assert result.outcomes[0].diff.added == 2
