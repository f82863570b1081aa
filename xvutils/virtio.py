"""Virtio MMIO register layout and the virtqueue structures used by a block device."""

import struct
from dataclasses import dataclass, field
from enum import IntEnum, IntFlag
from typing import ClassVar

NUM = 8  # descriptors per queue; a power of two

MAGIC_VALUE = 0x74726976
VENDOR_ID = 0x554D4551

BLK_T_IN = 0   # read the disk
BLK_T_OUT = 1  # write the disk

BLK_F_RO = 5
BLK_F_SCSI = 7
BLK_F_CONFIG_WCE = 11
BLK_F_MQ = 12
F_ANY_LAYOUT = 27
RING_F_INDIRECT_DESC = 28
RING_F_EVENT_IDX = 29


class MmioRegister(IntEnum):
    """Offsets of the virtio MMIO control registers."""

    MAGIC_VALUE = 0x000
    VERSION = 0x004
    DEVICE_ID = 0x008
    VENDOR_ID = 0x00C
    DEVICE_FEATURES = 0x010
    DRIVER_FEATURES = 0x020
    QUEUE_SEL = 0x030
    QUEUE_NUM_MAX = 0x034
    QUEUE_NUM = 0x038
    QUEUE_READY = 0x044
    QUEUE_NOTIFY = 0x050
    INTERRUPT_STATUS = 0x060
    INTERRUPT_ACK = 0x064
    STATUS = 0x070
    QUEUE_DESC_LOW = 0x080
    QUEUE_DESC_HIGH = 0x084
    DRIVER_DESC_LOW = 0x090
    DRIVER_DESC_HIGH = 0x094
    DEVICE_DESC_LOW = 0x0A0
    DEVICE_DESC_HIGH = 0x0A4


class ConfigStatus(IntFlag):
    """Bits of the device status register."""

    ACKNOWLEDGE = 1
    DRIVER = 2
    DRIVER_OK = 4
    FEATURES_OK = 8


class DescFlags(IntFlag):
    """Descriptor flags."""

    NEXT = 1   # chained with another descriptor
    WRITE = 2  # device writes (vs read)


def _pack(fmt, *values):
    try:
        return fmt.pack(*values)
    except struct.error as exc:
        raise ValueError(str(exc)) from exc


def _unpack(fmt, data):
    data = bytes(data)
    if len(data) != fmt.size:
        raise ValueError(f"expected {fmt.size} bytes, got {len(data)}")
    return fmt.unpack(data)


_DESC = struct.Struct("<QIHH")
_AVAIL = struct.Struct(f"<HH{NUM}HH")
_USED_ELEM = struct.Struct("<II")
_USED = struct.Struct("<HH" + "II" * NUM)
_BLK_REQ = struct.Struct("<IIQ")


@dataclass
class VirtqDesc:
    """One descriptor of the descriptor table."""

    SIZE: ClassVar[int] = _DESC.size

    addr: int = 0
    len: int = 0
    flags: int = 0
    next: int = 0

    def pack(self):
        return _pack(_DESC, self.addr, self.len, int(self.flags), self.next)

    @classmethod
    def unpack(cls, data):
        addr, length, flags, nxt = _unpack(_DESC, data)
        return cls(addr, length, DescFlags(flags), nxt)


def _check_ring(ring):
    ring = tuple(ring)
    if len(ring) != NUM:
        raise ValueError(f"ring must hold exactly {NUM} entries")
    return ring


@dataclass
class VirtqAvail:
    """The available ring written by the driver."""

    SIZE: ClassVar[int] = _AVAIL.size

    flags: int = 0
    idx: int = 0
    ring: tuple = (0,) * NUM
    unused: int = 0

    def __post_init__(self):
        self.ring = _check_ring(self.ring)

    def pack(self):
        return _pack(_AVAIL, self.flags, self.idx, *self.ring, self.unused)

    @classmethod
    def unpack(cls, data):
        values = _unpack(_AVAIL, data)
        return cls(values[0], values[1], values[2:2 + NUM], values[2 + NUM])


@dataclass
class VirtqUsedElem:
    """One completed request reported by the device."""

    SIZE: ClassVar[int] = _USED_ELEM.size

    id: int = 0
    len: int = 0

    def pack(self):
        return _pack(_USED_ELEM, self.id, self.len)

    @classmethod
    def unpack(cls, data):
        return cls(*_unpack(_USED_ELEM, data))


@dataclass
class VirtqUsed:
    """The used ring written by the device."""

    SIZE: ClassVar[int] = _USED.size

    flags: int = 0
    idx: int = 0
    ring: tuple = field(default_factory=lambda: tuple(VirtqUsedElem() for _ in range(NUM)))

    def __post_init__(self):
        self.ring = _check_ring(self.ring)

    def pack(self):
        values = [v for elem in self.ring for v in (elem.id, elem.len)]
        return _pack(_USED, self.flags, self.idx, *values)

    @classmethod
    def unpack(cls, data):
        values = _unpack(_USED, data)
        pairs = values[2:]
        ring = tuple(VirtqUsedElem(i, n) for i, n in zip(pairs[0::2], pairs[1::2]))
        return cls(values[0], values[1], ring)


@dataclass
class BlkRequest:
    """Header of a block-device request, followed by data and status descriptors."""

    SIZE: ClassVar[int] = _BLK_REQ.size

    type: int = BLK_T_IN
    reserved: int = 0
    sector: int = 0

    def pack(self):
        return _pack(_BLK_REQ, self.type, self.reserved, self.sector)

    @classmethod
    def unpack(cls, data):
        return cls(*_unpack(_BLK_REQ, data))