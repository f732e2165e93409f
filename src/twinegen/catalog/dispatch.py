"""Per-key locale dispatch.

A DispatchTable is the ordered list of match arms for one key plus its
default arm. The emitter renders it as a ``match`` statement and
CompiledCatalog.format() evaluates it in-process, so both share one
definition of the lookup rules:

1. Arms are grouped by language (sorted). Within a language, arms with a
   region come before the region-less arm, otherwise catalog order is kept.
2. A regional arm matches its exact (language, region). A region-less arm
   matches its language with any region.
3. Without a match, the default arm returns the key's first translation in
   catalog order.

FallbackPolicy.SAME_LANGUAGE adds, for every language that only has
regional translations, a region-less arm returning that language's first
regional translation.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from twinegen.catalog.model import CatalogEntry
from twinegen.enums import FallbackPolicy
from twinegen.syntax.locale_tag import LocaleTag
from twinegen.syntax.printf import FormatTemplate

__all__ = [
    "DispatchArm",
    "DispatchTable",
    "build_dispatch",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispatchArm:
    """One match arm.

    Attributes:
        language: Language the arm matches
        region: Region the arm matches, None for any region
        template: Template rendered by the arm
    """

    language: str
    region: str | None
    template: FormatTemplate

    def matches(self, tag: LocaleTag) -> bool:
        """Check whether a runtime locale selects this arm."""
        if tag.language != self.language:
            return False
        return self.region is None or self.region == tag.region


@dataclass(frozen=True, slots=True)
class DispatchTable:
    """Match arms of one key.

    Attributes:
        identifier: Generated function name
        arity: Number of formatting arguments
        arms: Arms in match order
        default: Template of the catch-all arm
    """

    identifier: str
    arity: int
    arms: tuple[DispatchArm, ...]
    default: FormatTemplate

    def select(self, tag: LocaleTag) -> FormatTemplate:
        """Template a runtime locale resolves to."""
        for arm in self.arms:
            if arm.matches(tag):
                return arm.template
        return self.default


def build_dispatch(
    entry: CatalogEntry, policy: FallbackPolicy = FallbackPolicy.FIRST_LISTED
) -> DispatchTable:
    """Build the dispatch table of a catalog entry.

    Args:
        entry: Compiled catalog entry
        policy: Fallback policy for locales without an exact translation

    Returns:
        DispatchTable with unreachable duplicate arms removed
    """
    candidates = [
        DispatchArm(t.tag.language, t.tag.region, t.template) for t in entry.translations
    ]

    if policy is FallbackPolicy.SAME_LANGUAGE:
        baseline = {arm.language for arm in candidates if arm.region is None}
        for arm in list(candidates):
            if arm.language not in baseline:
                candidates.append(DispatchArm(arm.language, None, arm.template))
                baseline.add(arm.language)

    # list.sort is stable: equal keys keep catalog order.
    candidates.sort(key=lambda arm: (arm.language, arm.region is None))

    arms: list[DispatchArm] = []
    seen: set[tuple[str, str | None]] = set()
    for arm in candidates:
        if (arm.language, arm.region) in seen:
            logger.debug(
                "Duplicate translation %s-%s of '%s' is unreachable",
                arm.language,
                arm.region,
                entry.key,
            )
            continue
        seen.add((arm.language, arm.region))
        arms.append(arm)

    return DispatchTable(
        identifier=entry.identifier,
        arity=entry.arity,
        arms=tuple(arms),
        default=entry.first.template,
    )
