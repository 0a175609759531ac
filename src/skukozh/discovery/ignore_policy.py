"""Layered admit/reject policy for discovery traversal."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import reduce

from pathspec import PathSpec

from skukozh.config.models import OutputConfig, ScanPolicyConfig
from skukozh.discovery.ignore_file import IgnoreRule, IgnoreRuleSet
from skukozh.discovery.patterns import matches
from skukozh.schemas.discovery_models import TraversalOptions
from skukozh.schemas.enums import VerdictReason

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """Admit/reject decision for one candidate path."""

    admitted: bool
    reason: VerdictReason
    detail: str | None = None

    def describe(self) -> str:
        label = self.reason.value.replace("_", " ")
        return f"{label} ({self.detail})" if self.detail else label


def _admit(reason: VerdictReason = VerdictReason.ADMITTED) -> Verdict:
    return Verdict(admitted=True, reason=reason)


def _reject(reason: VerdictReason, detail: str | None = None) -> Verdict:
    return Verdict(admitted=False, reason=reason, detail=detail)


def file_extension(name: str) -> str:
    """Lowercased suffix starting at the last dot, or "" when there is none."""
    dot = name.rfind(".")
    return name[dot:].lower() if dot != -1 else ""


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def _ancestors(rel_path: str) -> list[str]:
    parts = rel_path.split("/")
    return ["/".join(parts[:i]) for i in range(1, len(parts))]


def rule_matches(rule: IgnoreRule, rel_path: str, is_dir: bool) -> bool:
    """Whether ``rule`` applies to ``rel_path``.

    Directory-only rules match a directory's own path, and a file only
    through one of its parent directories.
    """
    if rule.directory_only and not is_dir:
        return any(matches(parent, rule.pattern) for parent in _ancestors(rel_path))
    return matches(rel_path, rule.pattern)


def last_matching_rule(
    rel_path: str, rules: IgnoreRuleSet, is_dir: bool = False
) -> IgnoreRule | None:
    """Fold over ``rules`` in order; the last rule that matches wins."""
    return reduce(
        lambda last, rule: rule if rule_matches(rule, rel_path, is_dir) else last,
        rules,
        None,
    )


def is_ignored(rel_path: str, rules: IgnoreRuleSet, is_dir: bool = False) -> bool:
    rule = last_matching_rule(rel_path, rules, is_dir)
    return rule is not None and not rule.negated


@dataclass
class IgnorePolicy:
    """Built-in exclusions + ignore-file rules + user exclude globs."""

    options: TraversalOptions
    rules: IgnoreRuleSet = ()
    vendor_dirs: frozenset[str] = field(default_factory=frozenset)
    binary_extensions: frozenset[str] = field(default_factory=frozenset)
    text_extensions: frozenset[str] = field(default_factory=frozenset)
    artifact_names: frozenset[str] = field(default_factory=frozenset)
    exclude_spec: PathSpec = field(
        default_factory=lambda: PathSpec.from_lines("gitignore", [])
    )

    @classmethod
    def from_config(
        cls,
        options: TraversalOptions,
        scan_policy: ScanPolicyConfig | None = None,
        outputs: OutputConfig | None = None,
        rules: IgnoreRuleSet = (),
    ) -> "IgnorePolicy":
        scan_policy = scan_policy or ScanPolicyConfig()
        outputs = outputs or OutputConfig()
        return cls(
            options=options,
            rules=rules,
            vendor_dirs=frozenset(name.lower() for name in scan_policy.vendor_dirs),
            binary_extensions=frozenset(scan_policy.binary_extensions),
            text_extensions=frozenset(scan_policy.text_extensions),
            artifact_names=outputs.artifact_names,
            exclude_spec=PathSpec.from_lines("gitignore", scan_policy.exclude_globs),
        )

    @property
    def consults_rules(self) -> bool:
        return not self.options.include_hidden and bool(self.rules)

    def evaluate(self, rel_path: str, is_dir: bool) -> Verdict:
        """Decide whether to descend into a directory or include a file."""
        verdict = self._decide(rel_path, is_dir)
        if self.options.verbose:
            kind = "directory" if is_dir else "file"
            action = "Admitting" if verdict.admitted else "Skipping"
            LOGGER.info("%s %s %s: %s", action, kind, rel_path, verdict.describe())
        return verdict

    def _decide(self, rel_path: str, is_dir: bool) -> Verdict:
        if rel_path in ("", "."):
            return _admit(VerdictReason.ROOT)

        opts = self.options
        name = rel_path.rsplit("/", 1)[-1]
        apply_defaults = not opts.include_hidden and not opts.bypass_default_ignores

        if not is_dir and name in self.artifact_names:
            return _reject(VerdictReason.TOOL_ARTIFACT)
        if not opts.include_hidden and is_hidden(name):
            return _reject(VerdictReason.HIDDEN)
        if is_dir and name.startswith("_"):
            return _reject(VerdictReason.UNDERSCORE_DIR)
        if apply_defaults and is_dir and name.lower() in self.vendor_dirs:
            return _reject(VerdictReason.VENDOR_DIR)

        if self.consults_rules:
            rule = last_matching_rule(rel_path, self.rules, is_dir)
            if rule is not None and not rule.negated:
                return _reject(VerdictReason.IGNORE_FILE, rule.pattern)

        spec_path = f"{rel_path}/" if is_dir else rel_path
        if self.exclude_spec.match_file(spec_path):
            return _reject(VerdictReason.USER_EXCLUDE)

        if is_dir:
            return _admit()

        ext = file_extension(name)
        if not opts.bypass_default_ignores and ext in self.binary_extensions:
            return _reject(VerdictReason.BINARY_EXTENSION, ext)
        if opts.extension_allow_list:
            if ext not in opts.extension_allow_list:
                return _reject(VerdictReason.EXTENSION, ext or "none")
        elif apply_defaults and ext not in self.text_extensions:
            return _reject(VerdictReason.EXTENSION, ext or "none")
        return _admit()
