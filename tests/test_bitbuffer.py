from qr_forge.bitbuffer import BitBuffer


def test_put_packs_msb_first():
    buffer = BitBuffer()
    buffer.put(0b1011, 4)
    assert buffer.length_in_bits == 4
    assert buffer.buffer == [0b10110000]
    assert [buffer.get(i) for i in range(4)] == [True, False, True, True]


def test_put_only_keeps_low_bits():
    buffer = BitBuffer()
    buffer.put(0x1FF, 4)
    assert buffer.buffer == [0xF0]


def test_values_span_byte_boundaries():
    buffer = BitBuffer()
    buffer.put(0b0100, 4)
    buffer.put(5, 8)
    buffer.put(0x48, 8)
    assert buffer.length_in_bits == 20
    assert buffer.to_bytes() == bytes([0x40, 0x54, 0x80])


def test_backing_array_grows_lazily():
    buffer = BitBuffer()
    assert buffer.buffer == []
    buffer.put_bit(False)
    assert buffer.buffer == [0]
    for _ in range(7):
        buffer.put_bit(True)
    assert buffer.buffer == [0x7F]
    buffer.put_bit(True)
    assert buffer.buffer == [0x7F, 0x80]
    assert len(buffer) == 9
    assert buffer.length_in_bits <= len(buffer.buffer) * 8
