"""index.md front matter 解析與改寫。"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..models import HeaderLine, ParsedDescriptor
from ..utils.errors import InvalidDescriptorError, WriteError

LASTMOD_KEY = "lastmod"
BOM = "\ufeff"


def parse_descriptor(raw_text: str, delimiter: str = "---") -> ParsedDescriptor:
    # BOM 不算在分隔線內，改寫時再放回檔案開頭
    bom = BOM if raw_text.startswith(BOM) else ""
    lines = raw_text[len(bom) :].split("\n")
    marker = delimiter.strip()
    positions = [index for index, line in enumerate(lines) if line.strip() == marker][:2]

    if len(positions) < 2 or positions[1] <= positions[0]:
        return ParsedDescriptor(
            valid=False,
            body_lines=lines,
            bom=bom,
            error=f"找不到成對的 front matter 分隔線 '{marker}'",
        )

    start, end = positions
    header = [HeaderLine.parse(line) for line in lines[start + 1 : end]]
    return ParsedDescriptor(
        valid=True,
        current_lastmod=extract_lastmod(header),
        header=header,
        body_lines=lines[end + 1 :],
        preamble=lines[:start],
        bom=bom,
    )


def extract_lastmod(header: Iterable[HeaderLine]) -> str:
    for line in header:
        if line.is_lastmod:
            value = line.raw[len(LASTMOD_KEY) + 1 :]
            return value.replace('"', "").strip()
    return ""


def format_lastmod_line(value: str) -> str:
    return f'{LASTMOD_KEY}: "{value}"'


def render_descriptor(
    header: Sequence[HeaderLine],
    body_lines: Sequence[str],
    new_lastmod: str,
    delimiter: str = "---",
    preamble: Sequence[str] = (),
    bom: str = "",
) -> str:
    new_header: list[str] = []
    replaced = False
    for line in header:
        if not replaced and line.is_lastmod:
            new_header.append(format_lastmod_line(new_lastmod))
            replaced = True
        else:
            new_header.append(line.raw)

    if not replaced:
        new_header.append(format_lastmod_line(new_lastmod))

    marker = delimiter.strip()
    lines = [*preamble, marker, *new_header, marker, *body_lines]
    return bom + "\n".join(lines)


def require_valid(parsed: ParsedDescriptor, path: Optional[Path] = None) -> ParsedDescriptor:
    if not parsed.valid:
        raise InvalidDescriptorError(path, parsed.error or "front matter 無效")
    return parsed


def find_descriptor(bundle_dir: Path, names: Iterable[str]) -> Optional[Path]:
    for name in names:
        candidate = bundle_dir / name
        if candidate.is_file():
            return candidate
    return None


def read_descriptor(path: Path) -> str:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_descriptor(path: Path, text: str) -> None:
    try:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
