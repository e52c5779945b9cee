"""RGBA images, their placements on a window and the order they are drawn in."""

from __future__ import annotations

import struct
from dataclasses import dataclass

from fdfkit.errors import ErrorCode, MLXError
from fdfkit.pixels import pack_rgba

__all__ = ["Instance", "Image", "Scene", "BPP", "MAX_DIMENSION"]

BPP = 4
MAX_DIMENSION = 32767


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _check_dimensions(width: int, height: int) -> None:
    if not (0 < width <= MAX_DIMENSION and 0 < height <= MAX_DIMENSION):
        raise MLXError(ErrorCode.INVDIM, f"{width}x{height}")


@dataclass
class Instance:
    """One placement of an image on the window."""

    x: int
    y: int
    z: int
    enabled: bool = True


class Image:
    """A width by height buffer of RGBA pixels, four bytes each."""

    def __init__(self, width: int, height: int) -> None:
        _check_dimensions(width, height)
        self.width = width
        self.height = height
        self.pixels = bytearray(width * height * BPP)
        self.instances: list[Instance] = []
        self.enabled = True

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, instances={len(self.instances)})"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MLXError(ErrorCode.INVPOS, f"({x}, {y})")
        return (y * self.width + x) * BPP

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)`` to the 0xRRGGBBAA ``color``."""
        offset = self._offset(x, y)
        self.pixels[offset:offset + BPP] = pack_rgba(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at ``(x, y)`` as 0xRRGGBBAA."""
        offset = self._offset(x, y)
        return int.from_bytes(self.pixels[offset:offset + BPP], "big")

    def resize(self, width: int, height: int) -> None:
        """Rescale the image with nearest-neighbour sampling."""
        _check_dimensions(width, height)
        if width == self.width and height == self.height:
            return
        wstep = _f32(_f32(float(self.width)) / width)
        hstep = _f32(_f32(float(self.height)) / height)
        origin = self.pixels
        resized = bytearray(width * height * BPP)
        for j in range(height):
            src_row = int(_f32(j * hstep)) * self.width
            dst_row = j * width
            for i in range(width):
                src = (src_row + int(_f32(i * wstep))) * BPP
                dst = (dst_row + i) * BPP
                resized[dst:dst + BPP] = origin[src:src + BPP]
        self.pixels = resized
        self.width = width
        self.height = height


@dataclass
class _DrawCall:
    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        return self.image.instances[self.instance_id]


class Scene:
    """The images of a window and the queue in which their instances are drawn."""

    def __init__(self) -> None:
        self.images: list[Image] = []
        self.zdepth = 0
        self._queue: list[_DrawCall] = []
        self._sort_pending = False

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this scene."""
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at ``(x, y)`` and return its index."""
        image.instances.append(Instance(x, y, self.zdepth))
        self.zdepth += 1
        index = len(image.instances) - 1
        self._queue.insert(0, _DrawCall(image, index))
        self._sort_pending = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove ``image`` and every draw call of its instances."""
        self._queue = [call for call in self._queue if call.image is not image]
        self.images = [owned for owned in self.images if owned is not image]

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Change the depth of an instance; the queue is re-sorted before drawing."""
        if instance.z == depth:
            return
        instance.z = depth
        self._sort_pending = True

    def render_order(self) -> list[tuple[Image, Instance]]:
        """Return the visible instances from back to front."""
        if self._sort_pending:
            self._sort_pending = False
            # Among equal depths the most recently queued call comes last.
            self._queue = sorted(reversed(self._queue), key=lambda call: call.instance.z)
        return [
            (call.image, call.instance)
            for call in self._queue
            if call.image.enabled and call.instance.enabled
        ]