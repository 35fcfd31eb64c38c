import os
from pathlib import Path

import flask
from flask.testing import FlaskClient
import pytest

from ogcapi_dggs.app import create_app
from ogcapi_dggs.config import DggsApiConfig, get_config
from ogcapi_dggs.dggs import StaticGridSystem
from ogcapi_dggs.metadata.builder import CollectionDescriptionBuilder
from ogcapi_dggs.utils import BoundingBox


def pytest_configure(config):
    """Pytest configuration hook"""

    # Load test specific config
    os.environ["DGGS_API_CONFIG"] = str(Path(__file__).parent / "backend_config.py")


@pytest.fixture
def config() -> DggsApiConfig:
    return get_config()


@pytest.fixture
def catalog(config):
    return config.catalog


@pytest.fixture
def grid_system() -> StaticGridSystem:
    return StaticGridSystem(id="isea3h", levels=[0, 1, 2, 3])


@pytest.fixture
def extent() -> BoundingBox:
    return BoundingBox.from_lat_lon(min_lat=-10, max_lat=10, min_lon=-20, max_lon=20)


@pytest.fixture
def builder() -> CollectionDescriptionBuilder:
    return CollectionDescriptionBuilder()


def get_flask_app(config: DggsApiConfig) -> flask.Flask:
    app = create_app(config=config, auto_logging_setup=False)
    app.config["TESTING"] = True
    app.config["SERVER_NAME"] = "dggs.test"
    return app


@pytest.fixture
def flask_app(config) -> flask.Flask:
    app = get_flask_app(config)
    with app.app_context():
        yield app


@pytest.fixture
def client(flask_app) -> FlaskClient:
    return flask_app.test_client()
