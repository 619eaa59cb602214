"""Provider templates for seeding new profiles.

A template rewrites the ``env`` block of a settings document so that the host
application talks to a different provider endpoint and model set.
"""

import json
from dataclasses import dataclass, field
from typing import Optional

from ..errors import TemplateError
from ..models.schemas import ProviderTemplate

REMOVED_ENV_KEYS = ("ANTHROPIC_API_KEY",)


@dataclass(frozen=True)
class TemplateDefinition:
    """Provider endpoint and model overrides."""

    name: ProviderTemplate
    label: str
    requires_api_key: bool
    base_url: Optional[str] = None
    haiku_model: Optional[str] = None
    sonnet_model: Optional[str] = None
    opus_model: Optional[str] = None
    aliases: tuple[str, ...] = field(default_factory=tuple)


PROVIDER_TEMPLATES: dict[ProviderTemplate, TemplateDefinition] = {
    ProviderTemplate.ANTHROPIC: TemplateDefinition(
        name=ProviderTemplate.ANTHROPIC,
        label="Anthropic (Claude default)",
        requires_api_key=False,
        aliases=("claude",),
    ),
    ProviderTemplate.MOONSHOT: TemplateDefinition(
        name=ProviderTemplate.MOONSHOT,
        label="Moonshot (Kimi)",
        requires_api_key=True,
        base_url="https://api.kimi.com/coding/",
        haiku_model="kimi-for-coding",
        sonnet_model="kimi-for-coding",
        opus_model="kimi-for-coding",
        aliases=("kimi",),
    ),
    ProviderTemplate.ZAI: TemplateDefinition(
        name=ProviderTemplate.ZAI,
        label="Z.ai (GLM)",
        requires_api_key=True,
        base_url="https://api.z.ai/api/anthropic",
        haiku_model="glm-4.5-air",
        sonnet_model="glm-4.7",
        opus_model="glm-4.7",
        aliases=("glm",),
    ),
    ProviderTemplate.MINIMAX: TemplateDefinition(
        name=ProviderTemplate.MINIMAX,
        label="MiniMax",
        requires_api_key=True,
        base_url="https://api.minimax.io/anthropic",
        haiku_model="MiniMax-M2.1",
        sonnet_model="MiniMax-M2.1",
        opus_model="MiniMax-M2.1",
    ),
}

_ALIASES: dict[str, ProviderTemplate] = {}
for _definition in PROVIDER_TEMPLATES.values():
    _ALIASES[_definition.name.value.lower()] = _definition.name
    for _alias in _definition.aliases:
        _ALIASES[_alias.lower()] = _definition.name


def get_template_definition(template: ProviderTemplate) -> TemplateDefinition:
    return PROVIDER_TEMPLATES[ProviderTemplate(template)]


def get_provider_templates() -> list[TemplateDefinition]:
    """All templates in display order."""
    return list(PROVIDER_TEMPLATES.values())


def resolve_template_name(raw: Optional[str]) -> Optional[ProviderTemplate]:
    """Resolve a template name or alias, case-insensitively.

    Returns:
        The template, or None for empty or unknown input
    """
    if not raw:
        return None
    return _ALIASES.get(raw.strip().lower())


def apply_template(
    blob: bytes, template: ProviderTemplate, api_key: Optional[str] = None
) -> bytes:
    """Rewrite the ``env`` block of a settings blob for ``template``.

    Args:
        blob: Current settings document
        template: Template to apply
        api_key: Provider API key stored as the auth token

    Returns:
        The rewritten document, 2-space indented

    Raises:
        TemplateError: If the blob is not a JSON object
    """
    definition = get_template_definition(template)

    try:
        parsed = json.loads(blob.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise TemplateError(
            f'Cannot apply template "{definition.label}": settings are not valid JSON ({e})'
        ) from e
    if not isinstance(parsed, dict):
        raise TemplateError(
            f'Cannot apply template "{definition.label}": settings must be a JSON object'
        )

    env_block = parsed.get("env") or {}
    if not isinstance(env_block, dict):
        raise TemplateError(
            f'Cannot apply template "{definition.label}": "env" must be a JSON object'
        )

    env = dict(env_block)
    for key in REMOVED_ENV_KEYS:
        env.pop(key, None)

    if definition.base_url:
        env["ANTHROPIC_BASE_URL"] = definition.base_url
    if api_key:
        env["ANTHROPIC_AUTH_TOKEN"] = api_key
    if definition.haiku_model:
        env["ANTHROPIC_DEFAULT_HAIKU_MODEL"] = definition.haiku_model
    if definition.sonnet_model:
        env["ANTHROPIC_DEFAULT_SONNET_MODEL"] = definition.sonnet_model
    if definition.opus_model:
        env["ANTHROPIC_DEFAULT_OPUS_MODEL"] = definition.opus_model

    parsed["env"] = env
    return json.dumps(parsed, indent=2, ensure_ascii=False).encode("utf-8")
