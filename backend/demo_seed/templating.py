"""Narrative templating: category lookup, template choice and placeholder expansion."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Dict, Mapping, Optional, Sequence, Tuple, Union

from .random_source import RandomSource, format_long_date


PlaceholderValue = Union[str, Sequence[str], Callable[[], str]]

PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")
_NON_KEY_CHARS = re.compile(r"[^a-z_]")

DEFAULT_CATEGORY_KEY = "policy_violation"
DEFAULT_ANONYMITY_RATE = 0.4
DETAIL_CHANCE = 0.5


@dataclass(frozen=True)
class NarrativeTemplate:
    opener: str
    body: str
    details: Tuple[str, ...] = ()
    weight: float = 1.0


@dataclass(frozen=True)
class CategoryTemplates:
    rate: float
    templates: Tuple[NarrativeTemplate, ...]


@dataclass(frozen=True)
class NarrativeResult:
    narrative: str
    suggested_anonymity_rate: float
    category_key: str


def normalize_category_key(category: Optional[str]) -> str:
    """Lowercase ``category`` and map every character outside ``[a-z_]`` to ``_``.

    >>> normalize_category_key("Conflict of Interest")
    'conflict_of_interest'
    >>> normalize_category_key("Retaliation!!")
    'retaliation__'
    """
    if not category:
        return ""
    return _NON_KEY_CHARS.sub("_", category.lower())


def replace_placeholders(
    text: str,
    values: Mapping[str, PlaceholderValue],
    rng: RandomSource,
    fallback: Optional[Callable[[str], str]] = None,
) -> str:
    """Expand every ``{token}`` in ``text`` in a single pass.

    Plain strings are used as-is, lists resolve to a uniform pick and
    callables are invoked; each occurrence is resolved on its own. An empty
    string counts as unregistered. Tokens with no registered value become generic
    filler so that a template referencing a new token never breaks a batch.
    Replacement text is not rescanned.
    """

    def _resolve(match: "re.Match[str]") -> str:
        token = match.group(1)
        value = values.get(token)
        if value is None or (not callable(value) and len(value) == 0):
            if fallback is not None:
                return fallback(token)
            return rng.lorem_words(2)
        if isinstance(value, str):
            return value
        if callable(value):
            return str(value())
        return rng.pick_random(value)

    return PLACEHOLDER_PATTERN.sub(_resolve, text)


class TemplateRegistry:
    """Category key -> :class:`CategoryTemplates`, with a mandatory default."""

    def __init__(
        self,
        categories: Mapping[str, CategoryTemplates],
        default_key: str = DEFAULT_CATEGORY_KEY,
    ) -> None:
        if default_key not in categories:
            raise ValueError(f"Default category '{default_key}' is not registered")
        for key, config in categories.items():
            if not config.templates:
                raise ValueError(f"Category '{key}' has no templates")
        self._categories: Dict[str, CategoryTemplates] = dict(categories)
        self.default_key = default_key

    def __contains__(self, key: object) -> bool:
        return key in self._categories

    def keys(self):
        return self._categories.keys()

    def items(self):
        return self._categories.items()

    def resolve_key(self, category: Optional[str]) -> str:
        key = normalize_category_key(category)
        # Una clave que queda vacía o solo con "_" nunca se consulta
        if not key.strip("_") or key not in self._categories:
            return self.default_key
        return key

    def resolve(self, category: Optional[str]) -> CategoryTemplates:
        return self._categories[self.resolve_key(category)]

    def rate_for(self, category: Optional[str], default: float = DEFAULT_ANONYMITY_RATE) -> float:
        key = normalize_category_key(category)
        config = self._categories.get(key)
        return config.rate if config is not None else default


def select_template(config: CategoryTemplates, rng: RandomSource, weighted: bool = False) -> NarrativeTemplate:
    if weighted:
        return rng.weighted_random([(template, template.weight) for template in config.templates])
    return rng.pick_random(config.templates)


def _default_registry() -> TemplateRegistry:
    from .data.narrative_templates import NARRATIVE_REGISTRY

    return NARRATIVE_REGISTRY


def _default_values(rng: RandomSource, reference: Optional[date]) -> Mapping[str, PlaceholderValue]:
    from .data.narrative_templates import build_placeholder_values

    return build_placeholder_values(rng, reference)


def generate_narrative(
    category: Optional[str],
    rng: RandomSource,
    *,
    registry: Optional[TemplateRegistry] = None,
    values: Optional[Mapping[str, PlaceholderValue]] = None,
    reference_date: Optional[date] = None,
    include_long_narrative: bool = False,
    weighted: bool = False,
) -> NarrativeResult:
    """Render a report narrative for ``category`` plus its anonymity rate.

    Unknown categories resolve to the registry default, so the result always
    carries a template from a real category and its rate.
    """
    registry = registry or _default_registry()
    if values is None:
        values = _default_values(rng, reference_date)

    key = registry.resolve_key(category)
    config = registry.resolve(category)
    template = select_template(config, rng, weighted=weighted)

    narrative = (
        replace_placeholders(template.opener, values, rng)
        + "\n\n"
        + replace_placeholders(template.body, values, rng)
    )
    if template.details and rng.chance(DETAIL_CHANCE):
        narrative += f" Specifically, this involved {rng.pick_random(template.details)}."

    if include_long_narrative:
        narrative += generate_long_narrative_addendum(rng, reference_date)

    return NarrativeResult(
        narrative=narrative,
        suggested_anonymity_rate=config.rate,
        category_key=key,
    )


def generate_long_narrative_addendum(rng: RandomSource, reference_date: Optional[date] = None) -> str:
    documentation = rng.sample(
        ["emails", "photos", "meeting notes", "chat logs", "performance reviews", "calendar invites"],
        3,
    )
    sections = [
        "\n\n## Timeline of Events\n\n",
        _generate_timeline(rng, reference_date),
        "\n\n## Supporting Details\n\n",
        rng.lorem_paragraphs(3),
        "\n\n## Additional Context\n\n",
        rng.lorem_paragraphs(2),
        "\n\n## Impact Assessment\n\n",
        rng.lorem_paragraphs(1),
        "\n\n## Witness Information\n\n",
        "The following individuals may have relevant information: "
        f"{rng.full_name()}, {rng.full_name()}, and {rng.full_name()}.",
        "\n\n## Documentation\n\n",
        f"I have the following documentation available: {', '.join(documentation)}.",
    ]
    return "".join(sections)


def _generate_timeline(rng: RandomSource, reference_date: Optional[date] = None) -> str:
    reference = reference_date or _configured_reference_date()
    base = rng.past_date(1, reference)
    events = []
    for index in range(5):
        event_date = base + timedelta(days=index * 30)
        events.append(f"- {format_long_date(event_date)}: {rng.lorem_sentence()}")
    return "\n".join(events)


def _configured_reference_date() -> date:
    from .config import settings

    return settings.current_date


UNICODE_EXAMPLES = (
    "Employee 李明 (Li Ming) reported that the incident occurred in the Shanghai office.",
    "My colleague Müller made inappropriate comments about François' accent.",
    "The email subject was '¡Urgente! Revisión necesaria' which seemed unprofessional.",
    "Witness statement from Björk Guðmundsdóttir confirms the timeline.",
    "The message included the phrase '这是不可接受的' which translates to 'this is unacceptable'.",
    "Employee Özgür reported harassment from colleague Wojciech.",
    "The document was titled 'Política de Ética Empresarial' and was not translated.",
    "Comments were made about employee Naïve's name, mocking the diaeresis.",
    "The team in São Paulo reported similar issues with the same manager.",
    "Employee Håkon from the Oslo office corroborated the complaint.",
)


def generate_unicode_narrative(rng: RandomSource) -> str:
    """Narrative with international characters, for edge-case demo records."""
    opener = rng.pick_random(UNICODE_EXAMPLES)
    additional = rng.pick_random([item for item in UNICODE_EXAMPLES if item != opener])
    return f"{opener}\n\n{rng.lorem_paragraphs(2)}\n\n{additional}"


def generate_minimal_narrative() -> str:
    return "Report filed."


def get_category_anonymity_rate(category: Optional[str], registry: Optional[TemplateRegistry] = None) -> float:
    registry = registry or _default_registry()
    return registry.rate_for(category)


def get_all_category_anonymity_rates(registry: Optional[TemplateRegistry] = None) -> Dict[str, float]:
    registry = registry or _default_registry()
    return {key: config.rate for key, config in registry.items()}
