"""Deterministic depth-first file discovery."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from skukozh.config.models import OutputConfig, ScanPolicyConfig
from skukozh.discovery.ignore_file import IgnoreRuleSet, load_ignore_file
from skukozh.discovery.ignore_policy import IgnorePolicy
from skukozh.errors import IgnoreFileError, RootAccessError
from skukozh.schemas.discovery_models import DiscoveryStats, TraversalOptions

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryResult:
    """Sorted relative paths that passed every filter."""

    root: Path
    files: tuple[str, ...]
    stats: DiscoveryStats

    def __len__(self) -> int:
        return len(self.files)


class DiscoveryEngine:
    """Walk a directory tree and consult the ignore policy at every entry."""

    def __init__(
        self,
        options: TraversalOptions,
        scan_policy: ScanPolicyConfig | None = None,
        outputs: OutputConfig | None = None,
    ) -> None:
        self.options = options
        self.scan_policy = scan_policy or ScanPolicyConfig()
        self.outputs = outputs or OutputConfig()

    def discover(self, root: Path | str) -> DiscoveryResult:
        abs_root = self._resolve_root(root)
        self._narrate("Scanning directory: %s", abs_root)

        stats = DiscoveryStats()
        rules = self._load_rules(abs_root)
        stats.ignore_rules_loaded = len(rules)
        policy = IgnorePolicy.from_config(
            self.options, self.scan_policy, self.outputs, rules
        )

        try:
            entries = self._list_dir(abs_root)
        except OSError as exc:
            raise RootAccessError(f"cannot list directory {abs_root}: {exc}") from exc
        stats.directories_visited += 1

        files: list[str] = []
        self._walk(entries, "", policy, stats, files)
        files.sort()
        stats.files_admitted = len(files)
        self._narrate("Found %d files", len(files))
        return DiscoveryResult(root=abs_root, files=tuple(files), stats=stats)

    def _walk(
        self,
        entries: list[os.DirEntry[str]],
        rel_dir: str,
        policy: IgnorePolicy,
        stats: DiscoveryStats,
        files: list[str],
    ) -> None:
        for entry in entries:
            rel_path = f"{rel_dir}/{entry.name}" if rel_dir else entry.name
            stats.entries_seen += 1
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                stats.entry_errors += 1
                self._narrate("Error accessing path %s: %s", rel_path, exc)
                continue

            verdict = policy.evaluate(rel_path, is_dir)
            if not verdict.admitted:
                stats.record_skip(verdict.reason)
                if is_dir:
                    stats.directories_pruned += 1
                continue

            if not is_dir:
                files.append(rel_path)
                continue

            try:
                children = self._list_dir(Path(entry.path))
            except OSError as exc:
                stats.entry_errors += 1
                self._narrate("Error accessing path %s: %s", rel_path, exc)
                continue
            stats.directories_visited += 1
            self._walk(children, rel_path, policy, stats, files)

    def _load_rules(self, abs_root: Path) -> IgnoreRuleSet:
        if self.options.include_hidden:
            return ()
        ignore_path = abs_root / self.scan_policy.ignore_file_name
        try:
            if not ignore_path.is_file():
                return ()
            rules = load_ignore_file(ignore_path)
        except (IgnoreFileError, OSError) as exc:
            self._narrate("Error parsing %s: %s", ignore_path.name, exc)
            return ()
        self._narrate("Found %s with %d rules", ignore_path.name, len(rules))
        return rules

    def _narrate(self, message: str, *args: object) -> None:
        if self.options.verbose:
            LOGGER.info(message, *args)

    @staticmethod
    def _resolve_root(root: Path | str) -> Path:
        try:
            abs_root = Path(root).resolve()
        except (OSError, RuntimeError) as exc:
            raise RootAccessError(f"cannot resolve path {root}: {exc}") from exc
        if not abs_root.exists():
            raise RootAccessError(f"cannot access directory: {abs_root} does not exist")
        if not abs_root.is_dir():
            raise RootAccessError(f"{abs_root} is not a directory")
        return abs_root

    @staticmethod
    def _list_dir(directory: Path) -> list[os.DirEntry[str]]:
        with os.scandir(directory) as iterator:
            return sorted(iterator, key=lambda entry: entry.name)


def discover(
    root: Path | str,
    options: TraversalOptions | None = None,
    scan_policy: ScanPolicyConfig | None = None,
    outputs: OutputConfig | None = None,
) -> DiscoveryResult:
    """Walk ``root`` and return every file admitted by the ignore policy."""
    engine = DiscoveryEngine(options or TraversalOptions(), scan_policy, outputs)
    return engine.discover(root)
