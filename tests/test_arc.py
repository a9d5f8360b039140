import pytest

from daikin_ir.arc import FRAME_LENGTH, DaikinARC, Mode
from daikin_ir.protocol import byte_sum
from daikin_ir.receiver import SAMPLE_DELAY_US
from daikin_ir.sender import IRSender, encode_frame


def _capture():
    calls = []
    sender = IRSender(transmit=lambda pulses, khz: calls.append((pulses, khz)))
    return sender, calls


def _to_pairs(pulses, gap):
    body = pulses[2:] if not pulses[0].modulated else pulses
    pairs = [
        (mark.duration // SAMPLE_DELAY_US, space.duration // SAMPLE_DELAY_US)
        for mark, space in zip(body[::2], body[1::2])
    ]
    low, high = pairs[-1]
    pairs[-1] = (low, high + gap)
    return pairs


def _checksums_valid(frame):
    return frame[7] == byte_sum(frame[0:7]) and frame[26] == byte_sum(frame[8:26])


def test_initial_state():
    arc = DaikinARC()
    assert arc.mode == Mode.HEAT
    assert arc.power == 1
    assert len(arc.frame) == FRAME_LENGTH


def test_power_on_off():
    arc = DaikinARC()
    arc.off()
    assert arc.power == 0
    arc.on()
    assert arc.power == 1
    arc.power = 0
    assert arc.power == 0
    assert _checksums_valid(arc.frame)


@pytest.mark.parametrize("mode", list(Mode))
def test_mode_round_trip_keeps_power(mode):
    arc = DaikinARC()
    arc.off()
    arc.mode = mode
    assert arc.mode == mode
    assert arc.power == 0
    assert _checksums_valid(arc.frame)


def test_invalid_mode_raises():
    arc = DaikinARC()
    mode_before = arc.mode
    frame_before = arc.frame
    with pytest.raises(ValueError):
        arc.mode = 5
    assert arc.mode == mode_before
    assert arc.frame == frame_before


@pytest.mark.parametrize("speed", range(7))
def test_fan_round_trip(speed):
    arc = DaikinARC()
    arc.swing = 1
    arc.fan = speed
    assert arc.fan == speed
    assert arc.swing == 1


@pytest.mark.parametrize("speed", [-1, 7])
def test_invalid_fan_raises(speed):
    arc = DaikinARC()
    fan_before = arc.fan
    frame_before = arc.frame
    with pytest.raises(ValueError):
        arc.fan = speed
    assert arc.fan == fan_before
    assert arc.frame == frame_before


@pytest.mark.parametrize("temp", [18, 25, 32])
def test_cool_temperature_round_trip(temp):
    arc = DaikinARC()
    arc.mode = Mode.COOL
    arc.temperature = temp
    assert arc.temperature == temp
    assert _checksums_valid(arc.frame)


@pytest.mark.parametrize(
    "mode,temp", [(Mode.COOL, 17), (Mode.COOL, 33), (Mode.HEAT, 9), (Mode.AUTO, 31)]
)
def test_temperature_out_of_range_raises(mode, temp):
    arc = DaikinARC()
    arc.mode = mode
    before = arc.temperature
    with pytest.raises(ValueError):
        arc.temperature = temp
    assert arc.temperature == before


@pytest.mark.parametrize("mode", [Mode.FAN, Mode.DRY])
def test_temperature_not_settable_in_fan_or_dry(mode):
    arc = DaikinARC()
    arc.mode = mode
    temperature_before = arc.temperature
    frame_before = arc.frame
    with pytest.raises(ValueError):
        arc.temperature = 24
    assert arc.temperature == temperature_before
    assert arc.frame == frame_before


def test_heat_accepts_low_temperature():
    arc = DaikinARC()
    arc.mode = Mode.HEAT
    arc.temperature = 10
    assert arc.temperature == 10


def test_swing_round_trips():
    arc = DaikinARC()
    arc.swing = 1
    arc.swing_lr = 1
    assert (arc.swing, arc.swing_lr) == (1, 1)
    arc.swing = 0
    arc.swing_lr = 0
    assert (arc.swing, arc.swing_lr) == (0, 0)
    assert _checksums_valid(arc.frame)


def test_send_command_sends_header_then_data():
    sender, calls = _capture()
    arc = DaikinARC(sender=sender)
    header, data = arc.send_command()
    assert len(calls) == 2
    assert _checksums_valid(arc.frame)
    assert calls[0][0] == header
    assert header[2:] == encode_frame(arc.frame[:8])
    assert data[2:] == encode_frame(arc.frame[8:])


def test_dump_lists_every_byte():
    arc = DaikinARC()
    text = arc.dump()
    assert text.startswith("11-DA-27-F0-0-0-0-20-")
    assert text.count("-") == FRAME_LENGTH


def test_description_matches_properties():
    arc = DaikinARC()
    arc.mode = Mode.COOL
    arc.temperature = 22
    arc.fan = 3
    arc.swing = 1
    state = arc.description()
    assert state.mode == arc.mode
    assert state.temperature == arc.temperature
    assert state.fan == arc.fan
    assert state.power == arc.power
    assert state.swing == arc.swing


def test_update_from_own_frame_round_trip():
    source = DaikinARC()
    source.mode = Mode.AUTO
    source.temperature = 20
    source.fan = 4
    source.swing_lr = 1
    target = DaikinARC()
    target.update_from_received(source.frame[8:])
    assert target.mode == Mode.AUTO
    assert target.temperature == 20
    assert target.fan == 4
    assert target.swing_lr == 1
    assert target.frame == source.frame


def test_update_skips_unknown_fan_code():
    source = DaikinARC()
    data = bytearray(source.frame[8:])
    data[8] = (data[8] & 0x0F) | 0x80
    target = DaikinARC()
    target.fan = 2
    target.update_from_received(data)
    assert target.fan == 2


def test_update_rejects_short_data():
    arc = DaikinARC()
    with pytest.raises(ValueError):
        arc.update_from_received(bytes(5))


def test_decode_round_trip_through_pulses():
    sender, calls = _capture()
    source = DaikinARC(sender=sender)
    source.mode = Mode.COOL
    source.temperature = 24
    source.fan = 2
    source.swing = 1
    source.swing_lr = 1
    source.send_command()
    pairs = _to_pairs(calls[0][0], 2900) + _to_pairs(calls[1][0], 2900)

    target = DaikinARC()
    assert target.decode(pairs) is True
    assert target.mode == Mode.COOL
    assert target.temperature == 24
    assert target.fan == 2
    assert target.swing == 1
    assert target.swing_lr == 1
    assert target.power == source.power


def test_decode_without_frame_returns_false():
    arc = DaikinARC()
    before = arc.frame
    assert arc.decode([]) is False
    assert arc.frame == before