"""Reading binary and ASCII STL files, and models built from them."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

import numpy as np

PathLike = Union[str, "os.PathLike[str]"]

_HEADER_SIZE = 80
_COUNT_SIZE = 4
_RECORD_DTYPE = np.dtype(
    [("normal", "<f4", (3,)), ("vertices", "<f4", (3, 3)), ("attribute", "<u2")]
)
_IGNORED_KEYWORDS = frozenset({"solid", "endsolid", "outer", "endloop"})


class StlFormat(Enum):
    """Whether a file is a valid STL file and, if so, which encoding it uses."""

    INVALID = "invalid"
    ASCII = "ascii"
    BINARY = "binary"


class StlError(ValueError):
    """Raised when a file cannot be read as an STL mesh."""


@dataclass(frozen=True)
class StlMesh:
    """Triangles of an STL file.

    ``vertices`` has shape (n, 3, 3): three xyz corners per triangle.
    ``normals`` has shape (n, 3): one normal per triangle.
    """

    vertices: np.ndarray
    normals: np.ndarray

    @property
    def triangle_count(self) -> int:
        return int(self.vertices.shape[0])


def stl_file_format(path: PathLike) -> StlFormat:
    """Detect whether ``path`` is a binary STL, an ASCII STL, or neither."""
    try:
        size = os.path.getsize(path)
        with open(path, "rb") as handle:
            head = handle.read(_HEADER_SIZE + _COUNT_SIZE)
    except OSError:
        return StlFormat.INVALID
    if size >= _HEADER_SIZE + _COUNT_SIZE:
        count = int.from_bytes(head[_HEADER_SIZE:], "little")
        if _HEADER_SIZE + _COUNT_SIZE + count * _RECORD_DTYPE.itemsize == size:
            return StlFormat.BINARY
    if head.lstrip().lower().startswith(b"solid"):
        return StlFormat.ASCII
    return StlFormat.INVALID


def _read_binary(data: bytes) -> StlMesh:
    records = np.frombuffer(data, dtype=_RECORD_DTYPE, offset=_HEADER_SIZE + _COUNT_SIZE)
    return StlMesh(
        vertices=records["vertices"].astype(np.float32),
        normals=records["normal"].astype(np.float32),
    )


def _floats(words: list[str], line_number: int) -> list[float]:
    if len(words) != 3:
        raise StlError(f"line {line_number}: expected three numbers")
    try:
        return [float(word) for word in words]
    except ValueError:
        raise StlError(f"line {line_number}: invalid number") from None


def _read_ascii(data: bytes) -> StlMesh:
    try:
        text = data.decode("ascii")
    except UnicodeDecodeError:
        raise StlError("ASCII STL file contains non-ASCII bytes") from None

    normals: list[list[float]] = []
    triangles: list[list[list[float]]] = []
    normal: Optional[list[float]] = None
    corners: list[list[float]] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        words = line.split()
        if not words:
            continue
        keyword = words[0].lower()
        if keyword == "facet":
            if normal is not None:
                raise StlError(f"line {line_number}: facet inside a facet")
            if len(words) < 2 or words[1].lower() != "normal":
                raise StlError(f"line {line_number}: expected 'facet normal'")
            normal = _floats(words[2:], line_number)
            corners = []
        elif keyword == "vertex":
            if normal is None:
                raise StlError(f"line {line_number}: vertex outside a facet")
            corners.append(_floats(words[1:], line_number))
        elif keyword == "endfacet":
            if normal is None:
                raise StlError(f"line {line_number}: endfacet without facet")
            if len(corners) != 3:
                raise StlError(f"line {line_number}: facet has {len(corners)} vertices, expected 3")
            normals.append(normal)
            triangles.append(corners)
            normal = None
        elif keyword not in _IGNORED_KEYWORDS:
            raise StlError(f"line {line_number}: unexpected keyword {words[0]!r}")

    if normal is not None:
        raise StlError("file ends inside a facet")
    return StlMesh(
        vertices=np.array(triangles, dtype=np.float32).reshape(-1, 3, 3),
        normals=np.array(normals, dtype=np.float32).reshape(-1, 3),
    )


def read_stl(path: PathLike) -> StlMesh:
    """Read the triangles of a binary or ASCII STL file."""
    file_format = stl_file_format(path)
    if file_format is StlFormat.INVALID:
        raise StlError(f"{os.fspath(path)!r} is not a valid STL file")
    data = Path(path).read_bytes()
    if file_format is StlFormat.BINARY:
        return _read_binary(data)
    return _read_ascii(data)


@dataclass(frozen=True)
class Model:
    """A CAD model: its file, name, type (femur, implant, bone...) and mesh."""

    file_location: Path
    name: str
    model_type: str
    mesh: StlMesh

    @classmethod
    def load(
        cls, path: PathLike, name: Optional[str] = None, model_type: str = ""
    ) -> Model:
        """Load a model from an STL file; the name defaults to the file's stem."""
        location = Path(path)
        mesh = read_stl(location)
        return cls(
            file_location=location,
            name=location.stem if name is None else name,
            model_type=model_type,
            mesh=mesh,
        )