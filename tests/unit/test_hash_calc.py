import hashlib
from pathlib import Path

import pytest

from hugo_lastmod.utils import hash_calc


def test_compute_digest(tmp_path: Path) -> None:
    sample_path = tmp_path / "sample.bin"
    sample_path.write_bytes(b"hugo-lastmod" * 1000)

    digest = hash_calc.compute_digest(sample_path, "sha256", chunk_size_kb=1)

    assert digest == hashlib.sha256(b"hugo-lastmod" * 1000).hexdigest()
    assert hash_calc.compute_digest(sample_path, "md5") == hashlib.md5(b"hugo-lastmod" * 1000).hexdigest()


def test_compute_digest_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        hash_calc.compute_digest(tmp_path / "missing.bin")


def test_supported_algorithms() -> None:
    assert hash_calc.is_supported_algorithm("sha256") is True
    assert hash_calc.is_supported_algorithm("sha999") is False
