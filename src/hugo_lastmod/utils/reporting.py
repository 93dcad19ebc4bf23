"""執行結果的文字輸出。"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from ..models import BundleOutcome, BundleState, ProcessError, RunStats

SEPARATOR_HEAVY = "=" * 65
SEPARATOR_LIGHT = "-" * 65

_STATE_LABELS = {
    BundleState.UPDATED: "更新 lastmod",
    BundleState.UNCHANGED: "已是最新",
    BundleState.NO_IMAGES: "沒有圖片，略過",
    BundleState.INVALID_DESCRIPTOR: "descriptor 無效，略過",
    BundleState.SCAN_FAILED: "掃描失敗",
    BundleState.WRITE_FAILED: "寫入失敗",
}


def format_outcome_line(outcome: BundleOutcome, *, simulate: bool = False) -> str:
    target = outcome.descriptor_path or outcome.bundle_id
    label = _STATE_LABELS[outcome.state]
    images = f"圖片 {outcome.diff.summary()}"

    if outcome.state is BundleState.UPDATED:
        before = outcome.previous_lastmod or "<空>"
        line = f"{target} {label}: {before} -> {outcome.new_lastmod} {images}"
        if simulate:
            line += "（模擬模式，未寫入）"
        return line
    if outcome.state is BundleState.UNCHANGED:
        return f"{target} {label}: {outcome.previous_lastmod or '<無 lastmod>'} {images}"
    if outcome.reason:
        return f"{target} {label}: {outcome.reason}"
    return f"{target} {label}"


def build_header_text(
    *,
    version: str,
    config_path: Optional[Path],
    target_dirs: Iterable[str],
    max_depth: int,
    extensions: Iterable[str],
    strategy: str,
    git_add: bool,
    simulate: bool,
) -> str:
    lines = [
        SEPARATOR_HEAVY,
        f"hugo-lastmod v{version}",
        f"   設定檔: {config_path if config_path else '預設值（未找到設定檔）'}",
        f"   資料夾: {', '.join(target_dirs)}",
        f"   最大深度: {max_depth}",
        f"   副檔名: {', '.join(extensions)}",
        f"   指紋策略: {strategy}",
        f"   git add: {'是' if git_add else '否'}",
    ]
    if simulate:
        lines.append("   模式: 模擬（不寫入任何檔案）")
    lines.append(SEPARATOR_LIGHT)
    return "\n".join(lines)


def build_summary_text(stats: RunStats, *, simulate: bool = False) -> str:
    lines = [
        SEPARATOR_LIGHT,
        "完成：模擬執行，未寫入任何檔案" if simulate else "完成：lastmod 已視需要更新",
        (
            f"   Bundles: {stats.total_bundles}"
            f"（更新: {stats.updated_bundles}，未變更: {stats.unchanged_bundles}，"
            f"無圖片: {stats.no_image_bundles}，無效: {stats.invalid_bundles}，"
            f"失敗: {stats.failed_bundles}）"
        ),
        (
            "   圖片變動（相較上次執行）: "
            f"新增 {stats.total_added}，變更 {stats.total_changed}，刪除 {stats.total_deleted}"
        ),
        SEPARATOR_HEAVY,
    ]
    return "\n".join(lines)


def format_problems(errors: Iterable[ProcessError]) -> list[str]:
    return [error.describe() for error in errors]
