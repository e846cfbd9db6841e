"""Name-based classification of components."""

from __future__ import annotations

__all__ = ["NamingRules"]

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass
class NamingRules:
    """Vendor, state and skip rules matched against component names.

    A vendor rule matches anywhere in the name, a state rule matches the
    end of the name and a skip rule matches the whole name.
    """

    vendors: list[str] = field(default_factory=list)
    state_suffixes: list[str] = field(default_factory=lambda: ["State"])
    skips: list[str] = field(default_factory=list)
    display_vendor_components: bool = True

    def is_vendor(self, name: str) -> bool:
        return any(vendor in name for vendor in self.vendors if vendor)

    def is_state(self, name: str) -> bool:
        return any(name.endswith(suffix) for suffix in self.state_suffixes if suffix)

    def is_skipped(self, name: str) -> bool:
        if name in self.skips:
            return True
        return not self.display_vendor_components and self.is_vendor(name)

    def filter_relation(
        self, relation: Mapping[str, Sequence[str]]
    ) -> dict[str, list[str]]:
        """Drop skipped components from keys and dependency lists."""
        return {
            name: [dep for dep in deps if not self.is_skipped(dep)]
            for name, deps in relation.items()
            if not self.is_skipped(name)
        }
