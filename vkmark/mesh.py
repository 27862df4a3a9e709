"""Vertex meshes and the Vulkan vertex input layout that describes them."""

from __future__ import annotations

from array import array
from dataclasses import dataclass
from enum import IntEnum
from itertools import accumulate
from numbers import Real
from typing import Iterable, List, Sequence, Tuple, Union

FLOAT_SIZE = 4

_FLOAT_MAX = 3.4028234663852886e38
# Smallest positive normal float; the starting point for maximum bounds.
_FLOAT_MIN = 1.1754943508222875e-38


class Format(IntEnum):
    """Vulkan formats, with their Vulkan enumeration values."""

    UNDEFINED = 0
    R5G6B5_UNORM_PACK16 = 4
    R8G8B8A8_UNORM = 37
    R8G8B8A8_SRGB = 43
    B8G8R8A8_UNORM = 44
    B8G8R8A8_SRGB = 50
    A2R10G10B10_UNORM_PACK32 = 58
    A2B10G10R10_UNORM_PACK32 = 64
    R32_SFLOAT = 100
    R32G32_SFLOAT = 103
    R32G32B32_SINT = 105
    R32G32B32_SFLOAT = 106
    R32G32B32A32_SFLOAT = 109
    R64G64B64_SFLOAT = 118


class VertexInputRate(IntEnum):
    """How often a vertex binding advances."""

    VERTEX = 0
    INSTANCE = 1


@dataclass(frozen=True)
class VertexInputBindingDescription:
    """A vertex buffer binding: its number, stride in bytes and input rate."""

    binding: int
    stride: int
    input_rate: VertexInputRate = VertexInputRate.VERTEX


@dataclass(frozen=True)
class VertexInputAttributeDescription:
    """A vertex attribute: shader location, binding, format and byte offset."""

    location: int
    binding: int
    format: Format
    offset: int


_FLOATS_PER_FORMAT = {
    Format.R32_SFLOAT: 1,
    Format.R32G32_SFLOAT: 2,
    Format.R32G32B32_SFLOAT: 3,
    Format.R32G32B32A32_SFLOAT: 4,
}

AttributeData = Union[float, Sequence[float]]


def _float_count(fmt: Format) -> int:
    try:
        return _FLOATS_PER_FORMAT[fmt]
    except (KeyError, TypeError):
        name = getattr(fmt, "name", str(fmt))
        raise ValueError(f"Unsupported vertex format {name}") from None


class Mesh:
    """A list of vertices, each made of float attributes in the given formats."""

    def __init__(self, formats: Iterable[Format]) -> None:
        self._vk_formats: Tuple[Format, ...] = tuple(formats)
        self._sizes: Tuple[int, ...] = tuple(_float_count(f) for f in self._vk_formats)
        self._offsets: Tuple[int, ...] = tuple(accumulate(self._sizes, initial=0))[:-1]
        self._vertex_num_floats = sum(self._sizes)
        self.interleave = False
        self._vertices: List[array] = []

    def next_vertex(self) -> None:
        """Start a new vertex with all attributes zeroed."""
        self._vertices.append(array("f", bytes(FLOAT_SIZE * self._vertex_num_floats)))

    def num_vertices(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def set_attribute(self, pos: int, data: AttributeData) -> None:
        """Set attribute pos of the current vertex to a scalar or float vector."""
        if isinstance(data, Real):
            values = (float(data),)
        else:
            values = tuple(float(x) for x in data)
        if len(values) != self._sizes[pos]:
            raise ValueError("Trying to set vertex attribute with incorrectly sized data")
        if not self._vertices:
            raise IndexError("no current vertex; call next_vertex() first")
        offset = self._offsets[pos]
        self._vertices[-1][offset:offset + len(values)] = array("f", values)

    def _vec3_offset(self, pos: int, which: str) -> int:
        if self._sizes[pos] != 3:
            raise ValueError(
                f"Trying to get {which} attribute bound from incorrectly sized data"
            )
        return self._offsets[pos]

    def min_attribute_bound(self, pos: int) -> Tuple[float, float, float]:
        """Return the component-wise minimum of a three-float attribute."""
        offset = self._vec3_offset(pos, "min")
        bound = [_FLOAT_MAX] * 3
        for vertex in self._vertices:
            bound = [min(b, x) for b, x in zip(bound, vertex[offset:offset + 3])]
        return tuple(bound)

    def max_attribute_bound(self, pos: int) -> Tuple[float, float, float]:
        """Return the component-wise maximum of a three-float attribute."""
        offset = self._vec3_offset(pos, "max")
        bound = [_FLOAT_MIN] * 3
        for vertex in self._vertices:
            bound = [max(b, x) for b, x in zip(bound, vertex[offset:offset + 3])]
        return tuple(bound)

    def binding_descriptions(self) -> List[VertexInputBindingDescription]:
        """Describe the vertex buffer bindings of the mesh data."""
        if self.interleave:
            return [
                VertexInputBindingDescription(
                    binding=0, stride=FLOAT_SIZE * self._vertex_num_floats
                )
            ]
        return [
            VertexInputBindingDescription(binding=binding, stride=FLOAT_SIZE * size)
            for binding, size in enumerate(self._sizes)
        ]

    def attribute_descriptions(self) -> List[VertexInputAttributeDescription]:
        """Describe where each vertex attribute is found."""
        return [
            VertexInputAttributeDescription(
                location=location,
                binding=0 if self.interleave else location,
                format=fmt,
                offset=FLOAT_SIZE * offset if self.interleave else 0,
            )
            for location, (fmt, offset) in enumerate(zip(self._vk_formats, self._offsets))
        ]

    def vertex_data_size(self) -> int:
        """Return the size in bytes of the vertex data."""
        return len(self._vertices) * self._vertex_num_floats * FLOAT_SIZE

    def vertex_data(self) -> bytes:
        """Return the vertex data as native 32-bit floats, laid out per interleave."""
        if self.interleave:
            return b"".join(vertex.tobytes() for vertex in self._vertices)
        return b"".join(
            vertex[offset:offset + size].tobytes()
            for offset, size in zip(self._offsets, self._sizes)
            for vertex in self._vertices
        )

    def vertex_data_binding_offsets(self) -> List[int]:
        """Return the byte offset of each binding within the vertex data."""
        if self.interleave:
            return [0]
        return [offset * FLOAT_SIZE * len(self._vertices) for offset in self._offsets]