"""Pipeline coordinator: one pass over all configured bundles."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Optional

from ..config import ConfigManager
from ..models import BundleOutcome, BundleState, ErrorCode, Inventory, RunStats
from ..utils import path_utils, reporting
from ..utils.error_handler import ErrorHandler
from ..utils.errors import FilesystemError, InvalidDescriptorError, WriteError
from ..utils.logger import get_logger
from . import descriptor
from .differ import diff_inventories
from .fingerprint_cache import FingerprintCache
from .lastmod_policy import Clock, LastmodStrategy, build_strategy
from .notifier import GitAddNotifier, NullNotifier, WriteNotifier
from .scanner import InventoryScanner

_QUIET_STATES = {BundleState.UPDATED, BundleState.UNCHANGED}


@dataclass
class PipelineResult:
    outcomes: list[BundleOutcome]
    stats: RunStats
    errors: ErrorHandler
    simulate: bool = False
    cache_persisted: bool = False
    bundles_found: bool = True


class LastmodPipeline:
    def __init__(
        self,
        config: ConfigManager,
        project_root: Path,
        *,
        strategy: Optional[LastmodStrategy] = None,
        cache: Optional[FingerprintCache] = None,
        notifier: Optional[WriteNotifier] = None,
        logger=None,
    ) -> None:
        self.config = config
        self.project_root = project_root
        self.logger = logger or get_logger(self.__class__.__name__)
        self.strategy = strategy or build_strategy(config)
        self.cache = cache or FingerprintCache(
            project_root / str(config.get("cacheFile")),
            self.strategy.cache_version,
            self.logger,
        )
        self.notifier = notifier or NullNotifier()
        self.scanner = InventoryScanner(config, self.strategy, project_root, self.logger)
        self.delimiter = str(config.get("frontmatterDelim", "---"))
        self.descriptor_names = list(config.get("descriptorNames", ["index.md"]))

    @classmethod
    def from_config(
        cls,
        config: ConfigManager,
        project_root: Path,
        *,
        tz: Optional[tzinfo] = None,
        clock: Optional[Clock] = None,
        logger=None,
    ) -> "LastmodPipeline":
        notifier: WriteNotifier = (
            GitAddNotifier(project_root, logger) if config.get("gitAdd", False) else NullNotifier()
        )
        return cls(
            config,
            project_root,
            strategy=build_strategy(config, tz=tz, clock=clock),
            notifier=notifier,
            logger=logger,
        )

    def run(self, *, simulate: bool = False) -> PipelineResult:
        errors = ErrorHandler()
        stats = RunStats()
        outcomes: list[BundleOutcome] = []

        self.cache.load()
        if self.cache.reset_reason:
            errors.add_info(ErrorCode.CACHE_RESET, self.cache.reset_reason, str(self.cache.path))
        if self.cache.load_warning:
            errors.add_warning(ErrorCode.CACHE_UNREADABLE, self.cache.load_warning, str(self.cache.path))

        bundles = path_utils.expand_target_dirs(self.config.get("targetDirs", []), self.project_root)
        if not bundles:
            message = "找不到符合的資料夾（請檢查設定中的 targetDirs）"
            self.logger.info(message)
            errors.add_info(ErrorCode.NO_BUNDLES, message)

        for bundle_dir in bundles:
            outcome = self.process_bundle(bundle_dir, errors, simulate=simulate)
            stats.record(outcome)
            outcomes.append(outcome)

        persisted = False
        if simulate:
            self.logger.info("模擬模式：快取檔未更新")
        else:
            self.cache.persist()
            persisted = True

        return PipelineResult(
            outcomes=outcomes,
            stats=stats,
            errors=errors,
            simulate=simulate,
            cache_persisted=persisted,
            bundles_found=bool(bundles),
        )

    def process_bundle(
        self,
        bundle_dir: Path,
        errors: ErrorHandler,
        *,
        simulate: bool = False,
    ) -> BundleOutcome:
        bundle_id = path_utils.to_project_relative(bundle_dir, self.project_root)

        try:
            inventory = self.scanner.scan(bundle_dir)
        except FilesystemError as exc:
            self.logger.warning(f"無法掃描 bundle，略過: {bundle_id} ({exc})")
            errors.add_warning(ErrorCode.SCAN_FAILED, str(exc), bundle_id)
            return BundleOutcome(bundle_id=bundle_id, state=BundleState.SCAN_FAILED, reason=str(exc))

        outcome = self._evaluate(bundle_dir, bundle_id, inventory, errors, simulate=simulate)
        self.cache.put(bundle_id, inventory)

        line = reporting.format_outcome_line(outcome, simulate=simulate)
        if outcome.state in _QUIET_STATES:
            self.logger.info(line)
        else:
            self.logger.warning(line)
        return outcome

    def _evaluate(
        self,
        bundle_dir: Path,
        bundle_id: str,
        inventory: Inventory,
        errors: ErrorHandler,
        *,
        simulate: bool,
    ) -> BundleOutcome:
        if not inventory:
            return BundleOutcome(
                bundle_id=bundle_id,
                state=BundleState.NO_IMAGES,
                reason="沒有符合副檔名的圖片",
            )

        diff = diff_inventories(self.cache.get(bundle_id), inventory)
        outcome = BundleOutcome(
            bundle_id=bundle_id,
            state=BundleState.INVALID_DESCRIPTOR,
            diff=diff,
            image_count=len(inventory),
        )

        descriptor_path = descriptor.find_descriptor(bundle_dir, self.descriptor_names)
        if descriptor_path is None:
            outcome.reason = f"找不到 descriptor（{', '.join(self.descriptor_names)}）"
            errors.add_warning(ErrorCode.DESCRIPTOR_MISSING, outcome.reason, bundle_id)
            return outcome

        rel_descriptor = path_utils.to_project_relative(descriptor_path, self.project_root)
        outcome.descriptor_path = rel_descriptor
        try:
            raw_text = descriptor.read_descriptor(descriptor_path)
            parsed = descriptor.require_valid(
                descriptor.parse_descriptor(raw_text, self.delimiter),
                descriptor_path,
            )
        except (OSError, UnicodeDecodeError, InvalidDescriptorError) as exc:
            outcome.reason = f"descriptor 無效: {exc}"
            errors.add_warning(ErrorCode.DESCRIPTOR_INVALID, outcome.reason, rel_descriptor)
            return outcome

        decision = self.strategy.decide(diff, inventory, parsed.current_lastmod)
        outcome.previous_lastmod = parsed.current_lastmod
        outcome.new_lastmod = decision.candidate

        if not decision.should_update:
            outcome.state = BundleState.UNCHANGED
            outcome.new_lastmod = None
            return outcome

        outcome.state = BundleState.UPDATED
        if simulate:
            return outcome

        new_text = descriptor.render_descriptor(
            parsed.header,
            parsed.body_lines,
            decision.candidate,
            self.delimiter,
            parsed.preamble,
            parsed.bom,
        )
        try:
            descriptor.write_descriptor(descriptor_path, new_text)
        except WriteError as exc:
            outcome.state = BundleState.WRITE_FAILED
            outcome.reason = str(exc)
            errors.add_fatal(ErrorCode.WRITE_FAILED, str(exc), rel_descriptor)
            return outcome

        self.notifier.notify_written(descriptor_path)
        return outcome
