"""YAML loader for the optional ``monokit.yaml`` tool configuration.

Uses ruamel.yaml in round-trip mode.
"""

from typing import Union, cast

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


def _create_yaml_loader() -> YAML:
    """Create a YAML loader that preserves quotes and block style."""
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    return yaml_obj


yaml = _create_yaml_loader()


def load_yaml_text(text: str, source: str = "<string>") -> ConfigDict:
    """Parse YAML text into a mapping.

    An empty document yields an empty dict.

    Raises:
        ValueError: If the text is not valid YAML or the root is not a mapping
    """
    try:
        raw: object = yaml.load(text)
    except YAMLError as e:
        raise ValueError(f"Invalid YAML in {source}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid YAML root in {source}: expected mapping")
    return cast(ConfigDict, dict(raw))
