from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .config import ConfigManager
from .core import LastmodPipeline
from .models import ErrorLevel
from .utils import reporting
from .utils.errors import CacheAccessError, ConfigError


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    project_root = Path(args.root).resolve() if args.root else Path.cwd()
    try:
        config = ConfigManager.discover(
            project_root,
            Path(args.config) if args.config else None,
        )
        config.ensure_valid()
    except ConfigError as exc:
        print(f"設定檔錯誤: {exc}")
        return 1

    print(
        reporting.build_header_text(
            version=__version__,
            config_path=config.source_path,
            target_dirs=config.get("targetDirs", []),
            max_depth=int(config.get("maxDepth", 1)),
            extensions=config.get("extensions", []),
            strategy=str(config.get("fingerprint.strategy")),
            git_add=bool(config.get("gitAdd")),
            simulate=args.dry_run,
        )
    )

    pipeline = LastmodPipeline.from_config(config, project_root)
    try:
        result = pipeline.run(simulate=args.dry_run)
    except CacheAccessError as exc:
        print(f"快取檔錯誤: {exc}")
        return 1

    problems = [error for error in result.errors.errors if error.level != ErrorLevel.INFO]
    if problems:
        print("需要注意的項目:")
        for line in reporting.format_problems(problems):
            print(f"   {line}")

    print(reporting.build_summary_text(result.stats, simulate=args.dry_run))
    return 1 if result.errors.has_fatal() else 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hugo-lastmod",
        description="依圖片變動更新 Hugo bundle 的 lastmod",
    )
    parser.add_argument("--config", help="Path to config file", default=None)
    parser.add_argument("--root", help="Project root (default: current directory)", default=None)
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Simulate only: do not write index files or the cache",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser
