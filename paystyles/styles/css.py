"""
Page CSS projection for the form markup the hosted widget does not render.

Every rule is scoped to one form twice, by ``[data-form-id="<id>"]`` and by
``#<prefix><id>``, in the same selector list, so the rules apply whichever
wrapper the page renders. Values are interpolated as stored: they are
sanitized when saved and re-sanitized when loaded, and nothing is escaped
here.
"""
import logging
import re
from typing import Any, Iterable, Mapping, Optional, Tuple

from paystyles.styles.rules import BUTTON_TARGETS, CSS, STYLE_RULES, StyleRule
from paystyles.styles.settings import StyleSettings, is_present

logger = logging.getLogger(__name__)

DEFAULT_FORM_ID_PREFIX = 'simpay-form-'
SCOPE_ID_PATTERN = re.compile(r'[^A-Za-z0-9_-]')
INDENT = '    '


def format_block(selectors: Iterable[str], declarations: Iterable[Tuple[str, str]]) -> str:
    selector_text = ',\n'.join(selectors)
    body = ''.join(f'{INDENT}{prop}: {value} !important;\n' for prop, value in declarations)
    return f'{selector_text} {{\n{body}}}\n'


def scope_id(form_id: Any) -> str:
    """Form id as it may appear inside a selector."""
    return SCOPE_ID_PATTERN.sub('', str(form_id))


class CssProjector:

    def __init__(self, id_prefix: str = DEFAULT_FORM_ID_PREFIX, rules=STYLE_RULES):
        self.id_prefix = SCOPE_ID_PATTERN.sub('', id_prefix or '')
        self._rules = tuple(rule for rule in rules if rule.system == CSS)

    def scopes(self, form_id) -> Tuple[str, str]:
        form_scope = scope_id(form_id)
        return f'[data-form-id="{form_scope}"]', f'#{self.id_prefix}{form_scope}'

    def _block(self, scopes: Tuple[str, ...], rule: StyleRule, value) -> str:
        selectors = [
            f'{scope} {target}' if target else scope
            for scope in scopes
            for target in rule.selectors
        ]
        declarations = [(prop, transform(value)) for prop, transform in rule.declarations]
        return format_block(selectors, declarations)

    def project(self, form_id, settings: Optional[StyleSettings]) -> str:
        """CSS for one form: at least the button radius rule, or '' for an unusable id."""
        if not scope_id(form_id):
            logger.warning(f"No CSS for form {form_id!r}: id has no selector-safe characters")
            return ''
        settings = settings or StyleSettings()
        scopes = self.scopes(form_id)
        blocks = []
        for rule in self._rules:
            value = settings.get(rule.field)
            if not is_present(rule.field, value):
                if not rule.always:
                    continue
                value = rule.default
            blocks.append(self._block(scopes, rule, value))
        return ''.join(blocks)

    def global_reset(self) -> str:
        """Unscoped button radius reset; per-form rules are more specific and follow it."""
        return format_block(BUTTON_TARGETS, (('border-radius', '0'),))

    def project_for_multiple_forms(self, forms: Mapping[Any, Optional[StyleSettings]]) -> str:
        """
        Global reset first, then one block group per form in mapping order.

        An empty mapping yields ''. A form whose id strips to an empty
        scope, or to the scope of an earlier form, is skipped so no two forms
        ever share selectors.
        """
        if not forms:
            return ''
        parts = [self.global_reset()]
        used_scopes = {}
        for form_id, settings in forms.items():
            form_scope = scope_id(form_id)
            if not form_scope:
                logger.warning(f"Skipping CSS for form {form_id!r}: id has no selector-safe characters")
                continue
            if form_scope in used_scopes:
                logger.warning(
                    f"Skipping CSS for form {form_id!r}: scope '{form_scope}' already used by "
                    f"form {used_scopes[form_scope]!r}"
                )
                continue
            used_scopes[form_scope] = form_id
            parts.append(f'/* form {form_scope} */\n')
            parts.append(self.project(form_id, settings))
        logger.debug(f"Projected CSS for {len(used_scopes)} form(s)")
        return ''.join(parts)


css_projector = CssProjector()
