"""Profile management module.

Provides:
- ProfileStore: listing, creation, deletion and renaming of stored profiles
- SwitchEngine: the mirror-then-replace switch workflow
- Provider templates for seeding new profiles
"""

from .store import ProfileStore
from .switcher import LIVE_SETTINGS_MISSING, SwitchEngine
from .templates import (
    PROVIDER_TEMPLATES,
    TemplateDefinition,
    apply_template,
    get_provider_templates,
    resolve_template_name,
)

__all__ = [
    "LIVE_SETTINGS_MISSING",
    "PROVIDER_TEMPLATES",
    "ProfileStore",
    "SwitchEngine",
    "TemplateDefinition",
    "apply_template",
    "get_provider_templates",
    "resolve_template_name",
]
