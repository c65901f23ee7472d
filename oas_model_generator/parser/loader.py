"""
OpenAPI document loading.

Reads a JSON or YAML file into an ``OpenAPIDocument``. JSON files go through
``json``; everything else through ``OpenAPILoader``, a PyYAML safe loader that
resolves plain scalars with the YAML 1.2 core schema OpenAPI documents are
written in. Under the YAML 1.1 rules of ``yaml.SafeLoader`` an unquoted
``on`` would load as a boolean and ``1e3`` as a string.
"""

import json
import re
from pathlib import Path
from typing import Final

import yaml

from .document import DocumentError, OpenAPIDocument

_JSON_SUFFIXES = frozenset({".json"})

_BOOL_TAG: Final = "tag:yaml.org,2002:bool"
_INT_TAG: Final = "tag:yaml.org,2002:int"
_FLOAT_TAG: Final = "tag:yaml.org,2002:float"
_TIMESTAMP_TAG: Final = "tag:yaml.org,2002:timestamp"

_YAML11_TAGS: Final = frozenset({_BOOL_TAG, _INT_TAG, _FLOAT_TAG, _TIMESTAMP_TAG})

_CORE_BOOL_PATTERN: Final = re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$")
_CORE_INT_PATTERN: Final = re.compile(r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$")
_CORE_FLOAT_PATTERN: Final = re.compile(
    r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
    r"|[-+]?\.(?:inf|Inf|INF)"
    r"|\.(?:nan|NaN|NAN))$"
)


class OpenAPILoader(yaml.SafeLoader):
    """Safe loader with YAML 1.2 core schema scalar resolution."""


def _construct_core_int(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> int:
    value = loader.construct_scalar(node)
    if value.startswith(("0o", "0x")):
        return int(value, 0)
    return int(value)


OpenAPILoader.yaml_implicit_resolvers = {
    first: [(tag, pattern) for tag, pattern in resolvers if tag not in _YAML11_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
OpenAPILoader.add_implicit_resolver(_BOOL_TAG, _CORE_BOOL_PATTERN, list("tTfF"))
OpenAPILoader.add_implicit_resolver(_INT_TAG, _CORE_INT_PATTERN, list("-+0123456789"))
OpenAPILoader.add_implicit_resolver(_FLOAT_TAG, _CORE_FLOAT_PATTERN, list("-+0123456789."))
OpenAPILoader.add_constructor(_INT_TAG, _construct_core_int)


def load_document(file_path: str | Path) -> OpenAPIDocument:
    """Parse an OpenAPI document from file.

    Args:
        file_path: Path to a ``.json``, ``.yaml`` or ``.yml`` document.

    Returns:
        The loaded document.

    Raises:
        FileNotFoundError: If the file does not exist.
        DocumentError: If the file is not UTF-8, not valid JSON/YAML or not
            shaped like an OpenAPI document.
    """
    path = Path(file_path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"{path} is not valid UTF-8: {e}"
        raise DocumentError(msg) from e

    return parse_document(content, json_format=path.suffix.lower() in _JSON_SUFFIXES)


def parse_document(content: str, *, json_format: bool = False) -> OpenAPIDocument:
    """Parse an OpenAPI document from text."""
    try:
        data = json.loads(content) if json_format else yaml.load(content, Loader=OpenAPILoader)
    except json.JSONDecodeError as e:
        msg = f"invalid JSON: {e}"
        raise DocumentError(msg) from e
    except yaml.YAMLError as e:
        msg = f"invalid YAML: {e}"
        raise DocumentError(msg) from e

    return OpenAPIDocument(data)
