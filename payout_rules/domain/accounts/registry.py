"""Process-wide registry of country rules."""
from __future__ import annotations

from typing import Iterable, Optional

from payout_rules.domain.accounts.countries import build_country_rules
from payout_rules.domain.accounts.variant import CountryRule
from payout_rules.infra.config.settings import settings
from payout_rules.shared.errors import UnsupportedCountryError
from payout_rules.shared.logging import get_logger
from payout_rules.shared.registry import Registry

logger = get_logger(__name__)


def normalize_country_code(country_code: Optional[str]) -> str:
    return (country_code or "").strip().upper()


class CountryRuleRegistry(Registry[CountryRule]):
    """
    Registry of payout country rules keyed by ISO 3166-1 alpha-2 code.
    """

    def register_rule(self, rule: CountryRule) -> CountryRule:
        return self.register(rule.country_code, rule)

    def resolve(self, country_code: Optional[str]) -> CountryRule:
        """
        Return the rule for country_code or raise UnsupportedCountryError.
        Never falls back to another country's rule.
        """
        code = normalize_country_code(country_code)
        rule = self.get(code)
        if rule is None:
            logger.warning("No payout rule for country %r", country_code)
            raise UnsupportedCountryError(code or str(country_code))
        return rule

    def supports(self, country_code: Optional[str]) -> bool:
        return normalize_country_code(country_code) in self


def build_registry(
    rules: Iterable[CountryRule],
    *,
    disabled: Iterable[str] = (),
    name: str = "CountryRuleRegistry",
) -> CountryRuleRegistry:
    """Register every rule except the disabled countries, then freeze."""
    skipped = {normalize_country_code(code) for code in disabled}
    registry = CountryRuleRegistry(name=name)
    for rule in rules:
        if rule.country_code in skipped:
            continue
        if rule.country_code in registry:
            raise ValueError(f"Duplicate payout rule for {rule.country_code}")
        registry.register_rule(rule)
    registry.freeze()
    logger.info(
        "%s ready: %d countries (%d disabled)",
        registry.name,
        len(registry),
        len(skipped),
    )
    return registry


# Global country rule registry
country_registry = build_registry(build_country_rules(), disabled=settings.disabled_countries)
