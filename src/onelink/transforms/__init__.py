"""URL transforms: text <-> compact URL-safe text."""

from onelink.transforms.base import Transform
from onelink.transforms.base64_transform import Base64Transform
from onelink.transforms.zlib_transform import ZlibTransform
from onelink.transforms.lzstring_transform import LZStringTransform
from onelink.transforms.registry import TransformRegistry, get_global_transform_registry

__all__ = [
    "Transform",
    "Base64Transform",
    "ZlibTransform",
    "LZStringTransform",
    "TransformRegistry",
    "get_global_transform_registry",
]
