"""
Configuration loading for the Intake context.

Obtains the raw YAML configuration tree, either from the embedded default
resume shipped with the package or from a caller-specified path. A requested
path is tried verbatim first, then relative to FOLIO_CONFIG_BASE_PATH; the
first candidate that exists and is not blank wins.

Failing to obtain any document is the only hard error of the intake context
(ConfigLoadError). What the document contains is normalize_config()'s concern.
"""

import os
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from dotenv import load_dotenv

from folio.contexts.intake.exceptions import ConfigLoadError
from folio.contexts.intake.logger import _log_debug, log_config_candidates, log_config_loaded

load_dotenv()
CONFIG_BASE_PATH = Path(os.getenv("FOLIO_CONFIG_BASE_PATH", "."))
EMBEDDED_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "resume.yml"


def config_candidates(requested: str, base_path: Optional[Path] = None) -> List[Path]:
    """
    List the paths tried for a requested config, in order, without duplicates.

    Examples:
        >>> config_candidates("/cv/me.yml", Path("site"))
        [PosixPath('/cv/me.yml'), PosixPath('site/cv/me.yml')]
    """
    if base_path is None:
        base_path = CONFIG_BASE_PATH

    candidates = []
    for path in (Path(requested), base_path / requested.lstrip("/")):
        if path not in candidates:
            candidates.append(path)
    return candidates


class ConfigYamlLoader(yaml.SafeLoader):
    """SafeLoader that keeps date-like scalars such as 2021-03-01 as text."""


ConfigYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:timestamp"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_config_text(text: str, source: str = "<string>") -> Any:
    """
    Parse YAML text into plain Python containers.

    Free text is taken as-is: "${...}" carries no interpolation meaning.

    Raises:
        ConfigLoadError: If the text is not valid YAML
    """
    try:
        return yaml.load(text, Loader=ConfigYamlLoader)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {source}: {e}") from e


def _read_non_blank(path: Path) -> Optional[str]:
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        _log_debug(f"Skipping blank config file: {path}")
        return None
    return text


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    base_path: Optional[Path] = None,
) -> Any:
    """
    Load the raw configuration tree.

    Args:
        config_path: Requested config file; None loads the embedded default
        base_path: Base directory for the relative fallback
                   (default: FOLIO_CONFIG_BASE_PATH, or the working directory)

    Returns:
        Parsed YAML tree (dicts, lists, scalars)

    Raises:
        ConfigLoadError: If no candidate yields a non-blank document, or the
                         document is not valid YAML
    """
    requested = str(config_path).strip() if config_path is not None else ""

    if requested:
        candidates = config_candidates(requested, base_path)
        log_config_candidates(candidates)
        for path in candidates:
            text = _read_non_blank(path)
            if text is None:
                continue
            log_config_loaded(str(path))
            return parse_config_text(text, source=str(path))

        raise ConfigLoadError(
            f"Config file not found: {requested}", requested=requested, candidates=candidates
        )

    text = _read_non_blank(EMBEDDED_CONFIG_PATH)
    if text is None:
        raise ConfigLoadError("No usable configuration: the embedded resume.yml is missing or empty")
    log_config_loaded("embedded default")
    return parse_config_text(text, source=str(EMBEDDED_CONFIG_PATH))
