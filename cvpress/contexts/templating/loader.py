"""
CV Data Loading

Reads a YAML CV document into a plain tree of dicts, lists and scalars.
"""

from pathlib import Path
from typing import Any, Dict

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from cvpress.contexts.templating.exceptions import DocumentLoadError, MalformedInputError
from cvpress.contexts.templating.logger import _log_debug, _log_error, log_load


def load_cv_data(input_path: Path) -> Dict[str, Any]:
    """
    Load a CV data document from YAML.

    Interpolations are not resolved: "${...}" in CV text stays literal.

    Args:
        input_path: Path to the YAML document

    Returns:
        Root mapping as a plain dict (empty dict for an empty document)

    Raises:
        DocumentLoadError: If the file is missing or is not valid YAML (an
            unbalanced "${" is rejected by the parser)
        MalformedInputError: If the document root is not a mapping
    """
    input_path = Path(input_path)
    _log_debug(f"Reading CV data from {input_path}")

    if not input_path.is_file():
        _log_error(f"CV data not found: {input_path}")
        raise DocumentLoadError("CV data document not found", path=input_path)

    try:
        config = OmegaConf.load(input_path)
        data = OmegaConf.to_container(config, resolve=False)
    except (yaml.YAMLError, OmegaConfBaseException) as e:
        _log_error(f"Could not parse CV data: {input_path}")
        raise DocumentLoadError("CV data document is not valid YAML", input_path, e) from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise MalformedInputError(
            "CV data document must be a mapping at the root",
            key_path="<root>",
            expected="a mapping",
            actual=type(data).__name__,
        )

    log_load(input_path, data)
    return data
