import pytest

from xvutils.virtio import (
    BLK_T_IN,
    BLK_T_OUT,
    NUM,
    BlkRequest,
    ConfigStatus,
    DescFlags,
    MmioRegister,
    VirtqAvail,
    VirtqDesc,
    VirtqUsed,
    VirtqUsedElem,
)


def test_register_lookup_by_offset():
    assert MmioRegister(0x000) is MmioRegister.MAGIC_VALUE
    assert MmioRegister(0x050) is MmioRegister.QUEUE_NOTIFY
    assert MmioRegister(0x0A4) is MmioRegister.DEVICE_DESC_HIGH


def test_status_and_flag_bits_on_the_wire():
    assert ConfigStatus(8) is ConfigStatus.FEATURES_OK
    packed = VirtqDesc(flags=DescFlags.WRITE).pack()
    assert packed[12:14] == b"\x02\x00"


def test_desc_wire_bytes():
    desc = VirtqDesc(addr=0x1000, len=512, flags=DescFlags.NEXT | DescFlags.WRITE, next=1)
    assert desc.pack() == (
        b"\x00\x10\x00\x00\x00\x00\x00\x00" + b"\x00\x02\x00\x00" + b"\x03\x00" + b"\x01\x00"
    )


def test_desc_round_trip():
    desc = VirtqDesc(addr=0x87654321, len=1024, flags=DescFlags.NEXT, next=5)
    data = desc.pack()
    assert len(data) == VirtqDesc.SIZE
    assert VirtqDesc.unpack(data) == desc


def test_avail_round_trip():
    avail = VirtqAvail(flags=0, idx=3, ring=range(NUM))
    data = avail.pack()
    assert len(data) == VirtqAvail.SIZE
    assert VirtqAvail.unpack(data) == avail


def test_avail_ring_length_checked():
    with pytest.raises(ValueError):
        VirtqAvail(ring=(0, 1))


def test_used_round_trip():
    ring = tuple(VirtqUsedElem(i, i * 2) for i in range(NUM))
    used = VirtqUsed(flags=0, idx=7, ring=ring)
    data = used.pack()
    assert len(data) == VirtqUsed.SIZE
    assert VirtqUsed.unpack(data) == used


def test_used_default_ring_is_empty():
    used = VirtqUsed.unpack(bytes(VirtqUsed.SIZE))
    assert used.ring == tuple(VirtqUsedElem() for _ in range(NUM))


def test_blk_request_wire_bytes():
    req = BlkRequest(type=BLK_T_OUT, reserved=0, sector=2)
    assert req.pack() == b"\x01\x00\x00\x00" + bytes(4) + b"\x02" + bytes(7)


def test_blk_request_round_trip():
    req = BlkRequest(type=BLK_T_IN, sector=123456)
    assert BlkRequest.unpack(req.pack()) == req


def test_unpack_wrong_length_rejected():
    with pytest.raises(ValueError):
        BlkRequest.unpack(b"\x00" * 3)


def test_pack_out_of_range_rejected():
    with pytest.raises(ValueError):
        VirtqDesc(next=1 << 16).pack()