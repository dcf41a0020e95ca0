"""COF files: layer composition and draw order of composite animations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from d2shared.enums import AnimationFrame, CompositeType, DrawEffect, WeaponClass
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

_UNKNOWN_HEADER_BYTES = 25
_WEAPON_CLASS_LENGTH = 4


@dataclass(frozen=True)
class CofLayer:
    """One layer of a composite animation."""

    type: CompositeType
    shadow: int
    transparent: bool
    # Draw effects outside the known set are kept as plain numbers.
    draw_effect: Union[DrawEffect, int]
    weapon_class: WeaponClass


@dataclass
class Cof:
    """A parsed COF file."""

    number_of_directions: int = 0
    frames_per_direction: int = 0
    number_of_layers: int = 0
    layers: list[CofLayer] = field(default_factory=list)
    # Maps each layer type to its position in ``layers``.
    composite_layers: dict[CompositeType, int] = field(default_factory=dict)
    animation_frames: list[AnimationFrame] = field(default_factory=list)
    # Draw order of layer types, indexed by direction then frame.
    priority: list[list[list[CompositeType]]] = field(default_factory=list)


def _draw_effect(value: int) -> Union[DrawEffect, int]:
    try:
        return DrawEffect(value)
    except ValueError:
        return value


def _read_layer(reader: StreamReader) -> CofLayer:
    layer_type = CompositeType(reader.get_byte())
    shadow = reader.get_byte()
    reader.skip_bytes(1)
    transparent = reader.get_byte() != 0
    draw_effect = _draw_effect(reader.get_byte())
    code = reader.read_bytes(_WEAPON_CLASS_LENGTH).replace(b"\x00", b"").decode("latin-1")
    return CofLayer(
        type=layer_type,
        shadow=shadow,
        transparent=transparent,
        draw_effect=draw_effect,
        weapon_class=WeaponClass.from_string(code.strip()),
    )


def parse_cof(data: bytes) -> Cof:
    """Parse the contents of a COF file; empty data gives an empty ``Cof``."""
    cof = Cof()
    if not data:
        return cof
    reader = StreamReader(data)
    cof.number_of_layers = reader.get_byte()
    cof.frames_per_direction = reader.get_byte()
    cof.number_of_directions = reader.get_byte()
    reader.skip_bytes(_UNKNOWN_HEADER_BYTES)

    for index in range(cof.number_of_layers):
        layer = _read_layer(reader)
        cof.layers.append(layer)
        cof.composite_layers[layer.type] = index

    cof.animation_frames = [
        AnimationFrame(b) for b in reader.read_bytes(cof.frames_per_direction)
    ]

    layers = cof.number_of_layers
    frames = cof.frames_per_direction
    priority = reader.read_bytes(cof.number_of_directions * frames * layers)
    for direction in range(cof.number_of_directions):
        direction_start = direction * frames * layers
        cof.priority.append(
            [
                [
                    CompositeType(b)
                    for b in priority[
                        direction_start + frame * layers:
                        direction_start + (frame + 1) * layers
                    ]
                ]
                for frame in range(frames)
            ]
        )
    return cof


def load_cof(file_name: str, file_provider: FileProvider) -> Cof:
    """Load ``file_name`` through the provider and parse it as a COF file."""
    return parse_cof(file_provider.load_file(file_name))