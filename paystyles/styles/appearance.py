"""
Appearance config projection for the hosted payment-fields widget.

The widget themes its own DOM from an ``appearance`` object with two
namespaces: ``variables`` (semantic tokens) and ``rules`` (selector ->
CSS-in-JS property map). Unset settings are left out entirely so the
widget's own defaults apply.
"""
import copy
import logging
from typing import Any, Dict, Mapping, Optional

from paystyles.styles.rules import STYLE_RULES, VARIABLES, WIDGET, StyleRule
from paystyles.styles.settings import StyleSettings, is_present

logger = logging.getLogger(__name__)

AppearanceConfig = Dict[str, Dict[str, Any]]


class AppearanceConfigProjector:

    def __init__(self, rules=STYLE_RULES):
        self._rules = tuple(rule for rule in rules if rule.system in (VARIABLES, WIDGET))

    def project(self, settings: Optional[StyleSettings]) -> AppearanceConfig:
        """Map a settings record onto ``{'variables': {...}, 'rules': {...}}``."""
        settings = settings or StyleSettings()
        variables: Dict[str, str] = {}
        rules: Dict[str, Dict[str, str]] = {}

        for rule in self._rules:
            value = settings.get(rule.field)
            if not is_present(rule.field, value):
                continue
            self._apply_rule(rule, value, variables, rules)

        return {'variables': variables, 'rules': rules}

    @staticmethod
    def _apply_rule(rule: StyleRule, value, variables, rules) -> None:
        for prop, transform in rule.declarations:
            rendered = transform(value)
            if rule.system == VARIABLES:
                variables[prop] = rendered
                continue
            for selector in rule.selectors:
                rules.setdefault(selector, {})[prop] = rendered

    def apply(self, config: Optional[Mapping[str, Any]], settings: Optional[StyleSettings]) -> Dict[str, Any]:
        """
        Merge the projection into an existing widget config.

        Returns a new dict; ``config`` is left untouched. Missing
        ``appearance``/``variables``/``rules`` keys are created, and
        projected values win over what the config already had.
        """
        merged = copy.deepcopy(dict(config or {}))
        projected = self.project(settings)

        appearance = merged.get('appearance')
        if not isinstance(appearance, dict):
            appearance = merged['appearance'] = {}
        if not isinstance(appearance.get('variables'), dict):
            appearance['variables'] = {}
        if not isinstance(appearance.get('rules'), dict):
            appearance['rules'] = {}

        appearance['variables'].update(projected['variables'])
        for selector, properties in projected['rules'].items():
            existing = appearance['rules'].get(selector)
            if not isinstance(existing, dict):
                existing = appearance['rules'][selector] = {}
            existing.update(properties)

        logger.debug(
            f"Applied {len(projected['variables'])} variables and "
            f"{len(projected['rules'])} rules to widget config"
        )
        return merged


appearance_projector = AppearanceConfigProjector()
