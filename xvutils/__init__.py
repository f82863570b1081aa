"""Teaching-OS text utilities, shell parser, virtio structures and helpers."""

__version__ = "0.1.0"