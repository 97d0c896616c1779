"""Load the `.debyrc` JSON document into a `PartialConfig`."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from deby.constants import CONFIG_FILE
from deby.core.config import PartialConfig
from deby.core.errors import ConfigFileNotFound, InvalidConfigDocument

logger = logging.getLogger(__name__)


def load_partial_config(path: Path = Path(CONFIG_FILE)) -> PartialConfig:
    """Read and validate the config document at `path`.

    Raises
    ------
    ConfigFileNotFound
        `path` does not exist.
    InvalidConfigDocument
        The file is not valid JSON or a field has the wrong type.
    """
    try:
        data = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigFileNotFound(str(path)) from e

    try:
        config = PartialConfig.model_validate_json(data)
    except ValidationError as e:
        raise InvalidConfigDocument(str(path), str(e)) from e

    logger.debug("loaded config from %s", path)
    return config
