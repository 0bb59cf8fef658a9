"""
Read-only access to graph node coordinates.

The routing graph itself lives outside this package. Anything exposing a node
count and per-node latitude/longitude can be used to build a geographic
extent; NodeCoordinateStore is a small numpy-backed implementation for
services that only know the node coordinates.
"""
from typing import Protocol, runtime_checkable
from pathlib import Path
import numpy as np


@runtime_checkable
class NodeAccess(Protocol):
    """Interface of the graph node coordinate accessor"""

    def get_nodes(self) -> int:
        """Number of nodes in the graph"""
        ...

    def get_lat(self, node: int) -> float:
        """Latitude of a node"""
        ...

    def get_lon(self, node: int) -> float:
        """Longitude of a node"""
        ...


class NodeCoordinateStore:
    """
    Growable array of node coordinates.

    Nodes are addressed by 0-based index. Setting a node beyond the current
    size grows the store; slots that were never set hold NaN coordinates.
    """

    _INITIAL_CAPACITY = 16

    def __init__(self, capacity: int = _INITIAL_CAPACITY):
        """
        Initialize an empty store.

        Args:
            capacity: Initial number of preallocated slots
        """
        capacity = max(1, capacity)
        self._lats = np.full(capacity, np.nan, dtype=np.float64)
        self._lons = np.full(capacity, np.nan, dtype=np.float64)
        self._size = 0

    def set_node(self, node: int, lat: float, lon: float) -> None:
        """
        Set the coordinates of a node.

        Args:
            node: Node index (>= 0)
            lat: Latitude in degrees
            lon: Longitude in degrees

        Raises:
            IndexError: If node is negative
        """
        if node < 0:
            raise IndexError(f"Node index must be non-negative, got {node}")
        self._ensure_capacity(node + 1)
        self._lats[node] = lat
        self._lons[node] = lon
        self._size = max(self._size, node + 1)

    def get_nodes(self) -> int:
        return self._size

    def get_lat(self, node: int) -> float:
        self._check_node(node)
        return float(self._lats[node])

    def get_lon(self, node: int) -> float:
        self._check_node(node)
        return float(self._lons[node])

    @property
    def lats(self) -> np.ndarray:
        """Latitudes of all nodes (read-only view)"""
        view = self._lats[:self._size]
        view.flags.writeable = False
        return view

    @property
    def lons(self) -> np.ndarray:
        """Longitudes of all nodes (read-only view)"""
        view = self._lons[:self._size]
        view.flags.writeable = False
        return view

    @classmethod
    def from_arrays(cls, lats, lons) -> "NodeCoordinateStore":
        """
        Create store from parallel latitude/longitude sequences.

        Raises:
            ValueError: If the sequences differ in length
        """
        lats = np.asarray(lats, dtype=np.float64).ravel()
        lons = np.asarray(lons, dtype=np.float64).ravel()
        if lats.shape != lons.shape:
            raise ValueError(
                f"Latitude and longitude arrays must have the same length, got {lats.size} and {lons.size}"
            )
        store = cls(capacity=lats.size)
        store._lats[:lats.size] = lats
        store._lons[:lons.size] = lons
        store._size = int(lats.size)
        return store

    @classmethod
    def from_csv(cls, path: str) -> "NodeCoordinateStore":
        """
        Load node coordinates from a CSV file with one 'lat,lon' row per node.

        Lines starting with '#' are ignored.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If rows do not hold exactly two numbers
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(f"Node coordinate file not found: {path}")

        data = np.loadtxt(file_path, delimiter=",", comments="#", ndmin=2, dtype=np.float64)
        if data.size == 0:
            return cls()
        if data.shape[1] != 2:
            raise ValueError(f"Expected 2 columns (lat, lon) in {path}, got {data.shape[1]}")
        return cls.from_arrays(data[:, 0], data[:, 1])

    def _ensure_capacity(self, required: int) -> None:
        capacity = self._lats.size
        if required <= capacity:
            return
        new_capacity = max(required, capacity * 2)
        self._lats = np.concatenate([self._lats, np.full(new_capacity - capacity, np.nan)])
        self._lons = np.concatenate([self._lons, np.full(new_capacity - capacity, np.nan)])

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self._size:
            raise IndexError(f"Node {node} out of range for graph with {self._size} nodes")

    def __len__(self) -> int:
        return self._size
