"""Discovery exports."""

from skukozh.discovery.ignore_file import (
    IgnoreRule,
    IgnoreRuleSet,
    load_ignore_file,
    parse_ignore_text,
)
from skukozh.discovery.ignore_policy import IgnorePolicy, Verdict, is_ignored
from skukozh.discovery.patterns import matches
from skukozh.discovery.walker import DiscoveryEngine, DiscoveryResult, discover

__all__ = [
    "DiscoveryEngine",
    "DiscoveryResult",
    "IgnorePolicy",
    "IgnoreRule",
    "IgnoreRuleSet",
    "Verdict",
    "discover",
    "is_ignored",
    "load_ignore_file",
    "matches",
    "parse_ignore_text",
]
