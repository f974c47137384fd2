"""
Intake Context

Responsibilities:
- Loads resume configuration documents (embedded default or requested path)
- Detects the configuration schema (modern or legacy)
- Normalizes either schema into the canonical ResumeDocument

Owns: Configuration loading, schema detection, field coercion, module key aliases
Never: Renders output or decides page layout
"""

from folio.contexts.intake.exceptions import ConfigLoadError
from folio.contexts.intake.loader import load_config, parse_config_text
from folio.contexts.intake.module_keys import canonical_module_key, resolve_module_order
from folio.contexts.intake.normalizer import (
    is_legacy_config,
    normalize_config,
    parse_legacy_config,
    parse_modern_config,
    select_parser,
)

__all__ = [
    # Loading
    "load_config",
    "parse_config_text",
    "ConfigLoadError",
    # Normalization
    "normalize_config",
    "is_legacy_config",
    "select_parser",
    "parse_modern_config",
    "parse_legacy_config",
    # Module keys
    "canonical_module_key",
    "resolve_module_order",
]
