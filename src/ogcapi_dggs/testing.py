from typing import Optional, Sequence
from unittest import mock

import attrs

import ogcapi_dggs.config


class BrokenGridSystem:
    """Stand-in grid system whose metadata lookups fail (e.g. misconfigured store)."""

    def __init__(self, exception: Optional[Exception] = None):
        self.exception = exception or OSError("Grid store connection failed")

    def resolutions(self) -> Sequence[int]:
        raise self.exception

    def identifier(self) -> str:
        raise self.exception


class CountingGridSystem:
    """Grid system wrapper that counts metadata lookups."""

    def __init__(self, identifier: str, resolutions: Sequence[int]):
        self._identifier = identifier
        self._resolutions = list(resolutions)
        self.calls = {"identifier": 0, "resolutions": 0}

    def resolutions(self) -> Sequence[int]:
        self.calls["resolutions"] += 1
        return self._resolutions

    def identifier(self) -> str:
        self.calls["identifier"] += 1
        return self._identifier


class ApproxStr:
    """Pytest helper in style of `pytest.approx`, but for string checking, based on prefix, body and or suffix"""

    def __init__(
        self,
        prefix: Optional[str] = None,
        body: Optional[str] = None,
        suffix: Optional[str] = None,
    ):
        self.prefix = prefix
        self.body = body
        self.suffix = suffix

    def __eq__(self, other):
        return (
            isinstance(other, str)
            and (self.prefix is None or other.startswith(self.prefix))
            and (self.body is None or self.body in other)
            and (self.suffix is None or other.endswith(self.suffix))
        )

    def __repr__(self):
        return "...".join([self.prefix or ""] + ([self.body] if self.body else []) + [self.suffix or ""])


def approx_str_prefix(prefix: str) -> ApproxStr:
    return ApproxStr(prefix=prefix)


def approx_str_contains(body: str) -> ApproxStr:
    return ApproxStr(body=body)


def config_overrides(**kwargs):
    """
    *Only to be used in unit tests*

    `mock.patch` based mocker to override the config returned by `get_config()` at run time

    Can be used as context manager

        >>> with config_overrides(id="foobar"):
        ...     ...

    or as test function decorator

        >>> @config_overrides(id="foobar")
        ... def test_stuff():
    """
    config_getter = ogcapi_dggs.config._config_getter
    return mock.patch.object(config_getter, "_config", new=attrs.evolve(config_getter.get(), **kwargs))
