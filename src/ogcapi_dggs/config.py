import importlib.resources
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import attrs

from ogcapi_dggs.catalog import Catalog
from ogcapi_dggs.constants import (
    API_BASE_PATH_DEFAULT,
    MAP_PREVIEW_FORMAT,
    MAP_PREVIEW_SERVICE,
    ZONES_FORMATS_DEFAULT,
)

_log = logging.getLogger(__name__)


class ConfigException(ValueError):
    pass


@attrs.frozen(kw_only=True)
class DggsApiConfig:
    # Reference to the origin of this config (e.g. file path), for troubleshooting.
    config_source: str = "unknown"

    id: str = "ogcapi-dggs"
    title: str = "DGGS API"
    description: str = "OGC API DGGS collection service"

    # Path (relative to the service root URL) under which the API is served.
    base_path: str = API_BASE_PATH_DEFAULT

    catalog: Catalog = attrs.Factory(Catalog)

    # Ids of the services deployed next to the DGGS API (e.g. "WMS").
    services: List[str] = attrs.Factory(list)

    # Producible media types of "list zones of a collection" responses.
    collection_formats: List[str] = attrs.Factory(lambda: list(ZONES_FORMATS_DEFAULT))

    # Service that has to be available to advertise map previews, and the preview format to use.
    map_preview_service: str = MAP_PREVIEW_SERVICE
    map_preview_format: str = MAP_PREVIEW_FORMAT


def load_from_py_file(path: Union[str, Path], variable: str = "config", expected_class: Optional[type] = None):
    """Load a config value from a Python file (by evaluating it and picking given variable)."""
    path = Path(path)
    _log.debug(f"Loading configuration from Python file {path!r} (variable {variable!r})")
    code = compile(path.read_text(encoding="utf8"), filename=str(path), mode="exec")
    namespace = {"__file__": str(path), "__name__": "__config__"}
    exec(code, namespace)
    try:
        config = namespace[variable]
    except KeyError:
        raise ConfigException(f"No variable {variable!r} found in config file {path}") from None
    if expected_class is not None and not isinstance(config, expected_class):
        raise ConfigException(f"Expected {expected_class.__name__} but got {type(config).__name__} from {path}")
    if isinstance(config, DggsApiConfig) and config.config_source == "unknown":
        config = attrs.evolve(config, config_source=str(path))
    return config


class ConfigGetter:
    """Config loading singleton: config file from env var, with a packaged default."""

    ENV_VAR = "DGGS_API_CONFIG"

    def __init__(self, expected_class: type = DggsApiConfig):
        self.expected_class = expected_class
        self._config = None

    def get(self, force_reload: bool = False) -> DggsApiConfig:
        if self._config is None or force_reload:
            self._config = self._load()
        return self._config

    def _load(self) -> DggsApiConfig:
        if self.ENV_VAR in os.environ:
            path = Path(os.environ[self.ENV_VAR])
            _log.info(f"Loading config from env var {self.ENV_VAR}: {path}")
            return load_from_py_file(path, expected_class=self.expected_class)
        default = importlib.resources.files("ogcapi_dggs") / "config" / "examples" / "dummy.py"
        with importlib.resources.as_file(default) as path:
            _log.info(f"Loading default config from {path}")
            return load_from_py_file(path, expected_class=self.expected_class)

    def flush(self):
        self._config = None


# Internal singleton
_config_getter = ConfigGetter(expected_class=DggsApiConfig)


def get_config() -> DggsApiConfig:
    """Public config getter"""
    return _config_getter.get()
