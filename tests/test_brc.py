import pytest

from daikin_ir.brc import FRAME_LENGTH, DaikinBRC
from daikin_ir.protocol import byte_sum
from daikin_ir.sender import IRSender, encode_frame


def _checksums_valid(frame):
    return frame[6] == byte_sum(frame[0:6]) and frame[21] == byte_sum(frame[7:21])


def test_initial_frame_has_valid_checksums():
    brc = DaikinBRC()
    assert len(brc.frame) == FRAME_LENGTH
    assert _checksums_valid(brc.frame)


def test_power_on_off():
    brc = DaikinBRC()
    brc.on()
    assert brc.power == 1
    brc.off()
    assert brc.power == 0
    assert _checksums_valid(brc.frame)


@pytest.mark.parametrize("temp,code", [(22, 26), (23, 28), (36, 54)])
def test_temperature_codes(temp, code):
    brc = DaikinBRC()
    brc.set_temperature(temp)
    assert brc.frame[17] == code
    assert _checksums_valid(brc.frame)


@pytest.mark.parametrize("temp", [17, 37])
def test_temperature_out_of_range_raises(temp):
    brc = DaikinBRC()
    before = brc.frame
    with pytest.raises(ValueError):
        brc.set_temperature(temp)
    assert brc.frame == before


@pytest.mark.parametrize(
    "mode,code12,code14", [(0, 0x60, 0x00), (1, 0x20, 0x70), (2, 0x70, 0x20)]
)
def test_mode_codes_keep_power(mode, code12, code14):
    brc = DaikinBRC()
    brc.on()
    brc.set_mode(mode)
    assert brc.frame[12] & 0x70 == code12
    assert brc.frame[14] & 0x70 == code14
    assert brc.power == 1
    assert _checksums_valid(brc.frame)


@pytest.mark.parametrize("mode", [-1, 3])
def test_invalid_mode_raises(mode):
    brc = DaikinBRC()
    with pytest.raises(ValueError):
        brc.set_mode(mode)


def test_fan_bit():
    brc = DaikinBRC()
    brc.set_fan(1)
    assert brc.frame[18] & 0x20 == 0x20
    brc.set_fan(0)
    assert brc.frame[18] & 0x20 == 0x00
    with pytest.raises(ValueError):
        brc.set_fan(2)


def test_swing_bits():
    brc = DaikinBRC()
    brc.set_swing(True)
    assert brc.frame[18] & 0x03 == 0x01
    brc.set_swing(False)
    assert brc.frame[18] & 0x03 == 0x02
    assert _checksums_valid(brc.frame)


def test_swing_leaves_fan_alone():
    brc = DaikinBRC()
    brc.set_fan(1)
    brc.set_swing(True)
    assert brc.frame[18] & 0x20 == 0x20


def test_send_command_splits_frame():
    calls = []
    sender = IRSender(transmit=lambda pulses, khz: calls.append((pulses, khz)))
    brc = DaikinBRC(sender=sender)
    brc.set_temperature(25)
    header, data = brc.send_command()
    assert [pulses for pulses, _ in calls] == [header, data]
    assert header[2:] == encode_frame(brc.frame[:7])
    assert data[2:] == encode_frame(brc.frame[7:])


def test_dump_lists_every_byte():
    brc = DaikinBRC()
    text = brc.dump()
    assert text.startswith("11-DA-17-18-4-0-1E-")
    assert text.count("-") == FRAME_LENGTH