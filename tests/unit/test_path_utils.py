from pathlib import Path

from hugo_lastmod.utils import path_utils


def test_expand_target_dirs_only_directories(tmp_path: Path) -> None:
    galleries = tmp_path / "content" / "galleries"
    (galleries / "b").mkdir(parents=True)
    (galleries / "a").mkdir()
    (galleries / "file.md").write_text("x", encoding="utf-8")
    stories = tmp_path / "content" / "stories" / "s1"
    stories.mkdir(parents=True)

    result = path_utils.expand_target_dirs(
        ["content/galleries/*/", "content/stories/*", "content/galleries/a"],
        tmp_path,
    )

    assert [path_utils.to_project_relative(path, tmp_path) for path in result] == [
        "content/galleries/a",
        "content/galleries/b",
        "content/stories/s1",
    ]


def test_expand_target_dirs_no_match(tmp_path: Path) -> None:
    assert path_utils.expand_target_dirs(["content/missing/*/"], tmp_path) == []


def test_extension_helpers() -> None:
    extensions = path_utils.normalize_extensions(["JPG", ".webp", " ", "avif"])

    assert extensions == ("jpg", "webp", "avif")
    assert path_utils.has_extension("IMG_01.JPG", extensions) is True
    assert path_utils.has_extension("notes.jpg.txt", extensions) is False
    assert path_utils.has_extension("jpg", extensions) is False
