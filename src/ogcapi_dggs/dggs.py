"""
Grid system stores: the (read-only) data access side of DGGS backed collections.

Only the metadata needed to describe collections is covered here
(grid system identifier, supported resolutions, attribute schema),
zone querying is out of scope.
"""

from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple, runtime_checkable

import attrs


class DataStoreException(Exception):
    """A data store (or one of its feature sources) can not be accessed."""

    pass


@runtime_checkable
class GridSystem(Protocol):
    """API of a Discrete Global Grid System instance."""

    def resolutions(self) -> Sequence[int]:
        """Supported resolution levels (ascending)."""
        ...

    def identifier(self) -> str:
        """Identifier of the DGGS variant (e.g. "H3", "ISEA3H", "rHEALPix")."""
        ...


def _to_levels(levels: Iterable[int]) -> Tuple[int, ...]:
    levels = list(levels)
    non_integral = [r for r in levels if r != int(r)]
    if non_integral:
        raise ValueError(f"Resolution levels must be integers, got {non_integral!r}")
    return tuple(int(r) for r in levels)


@attrs.frozen
class StaticGridSystem:
    """Grid system with a fixed, predefined set of resolution levels."""

    id: str
    levels: Tuple[int, ...] = attrs.field(converter=_to_levels)

    def resolutions(self) -> Tuple[int, ...]:
        return self.levels

    def identifier(self) -> str:
        return self.id


@attrs.frozen
class AttributeDescriptor:
    name: str
    type: str

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.type}


@attrs.frozen(kw_only=True)
class DggsFeatureSource:
    """Feature type of a DGGS data store: the grid system it is indexed on and its attributes."""

    name: str
    grid_system: GridSystem
    attributes: Optional[Tuple[AttributeDescriptor, ...]] = None

    def get_schema(self) -> Tuple[AttributeDescriptor, ...]:
        if self.attributes is None:
            raise DataStoreException(f"Schema of feature type {self.name!r} can not be determined")
        return self.attributes


class DggsDataStore:
    """
    In-memory DGGS data store: a set of feature types, all indexed on the same grid system.
    Immutable after construction, so safe for concurrent reads.
    """

    def __init__(
        self,
        name: str,
        grid_system: GridSystem,
        feature_types: Dict[str, Optional[Sequence[AttributeDescriptor]]],
    ):
        self.name = name
        self.grid_system = grid_system
        self._sources: Dict[str, DggsFeatureSource] = {
            type_name: DggsFeatureSource(
                name=type_name,
                grid_system=grid_system,
                attributes=tuple(attributes) if attributes is not None else None,
            )
            for type_name, attributes in feature_types.items()
        }

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r} ({self.grid_system.identifier()})>"

    def get_type_names(self) -> List[str]:
        return list(self._sources.keys())

    def get_feature_source(self, type_name: str) -> DggsFeatureSource:
        try:
            return self._sources[type_name]
        except KeyError:
            raise DataStoreException(f"Feature type {type_name!r} not found in DGGS store {self.name!r}") from None
