import pytest

from carlkit import channels


@pytest.mark.parametrize("channel", range(2, 96))
def test_fhss_round_trip(channel):
    freq = channels.fhss_chan_to_freq(channel)
    assert freq - channel == 2400
    assert channels.freq_to_fhss_chan(freq) == channel


@pytest.mark.parametrize("channel", [-1, 0, 1, 96, 200])
def test_fhss_channel_out_of_range(channel):
    with pytest.raises(ValueError):
        channels.fhss_chan_to_freq(channel)


@pytest.mark.parametrize("freq", [2400, 2401, 2496, 5000])
def test_fhss_freq_out_of_range(freq):
    with pytest.raises(ValueError):
        channels.freq_to_fhss_chan(freq)


@pytest.mark.parametrize("channel", range(1, 14))
def test_dsss_round_trip(channel):
    freq = channels.dsss_chan_to_freq(channel)
    assert freq - 2407 == channel * 5
    assert channels.freq_to_dsss_chan(freq) == channel


@pytest.mark.parametrize("channel", range(1, 14))
@pytest.mark.parametrize("offset", [-2, -1, 0, 1, 2])
def test_dsss_picks_closest_channel(channel, offset):
    freq = channels.dsss_chan_to_freq(channel) + offset
    assert channels.freq_to_dsss_chan(freq) == channel


def test_dsss_channel_14():
    assert channels.dsss_chan_to_freq(14) == 2484
    assert channels.freq_to_dsss_chan(2484) == 14


@pytest.mark.parametrize("freq", [2482, 2483, 2485, 2486])
def test_dsss_channel_14_window(freq):
    assert channels.freq_to_dsss_chan(freq) == 14


@pytest.mark.parametrize("channel", [-3, 0, 15, 36])
def test_dsss_channel_out_of_range(channel):
    with pytest.raises(ValueError):
        channels.dsss_chan_to_freq(channel)


@pytest.mark.parametrize("freq", [2409, 2475, 2481, 2487, 5180])
def test_dsss_freq_out_of_range(freq):
    with pytest.raises(ValueError):
        channels.freq_to_dsss_chan(freq)


def test_hr_and_erp_match_dsss():
    for channel in range(1, 15):
        freq = channels.dsss_chan_to_freq(channel)
        assert channels.hr_chan_to_freq(channel) == freq
        assert channels.erp_chan_to_freq(channel) == freq
        assert channels.freq_to_hr_chan(freq) == channel
        assert channels.freq_to_erp_chan(freq) == channel


@pytest.mark.parametrize("s_freq", [4000, 5000])
@pytest.mark.parametrize("channel", [1, 36, 100, 165, 200])
def test_ofdm_round_trip(s_freq, channel):
    freq = channels.ofdm_chan_to_freq(s_freq, channel)
    assert freq - s_freq == channel * 5
    assert channels.freq_to_ofdm_chan(s_freq, freq) == channel


@pytest.mark.parametrize("channel", [1, 36, 149, 200])
@pytest.mark.parametrize("offset", [-2, -1, 0, 1, 2])
def test_ofdm_picks_closest_channel(channel, offset):
    freq = channels.ofdm_chan_to_freq(5000, channel) + offset
    assert channels.freq_to_ofdm_chan(5000, freq) == channel


@pytest.mark.parametrize("channel", [0, -1, 201])
def test_ofdm_channel_out_of_range(channel):
    with pytest.raises(ValueError):
        channels.ofdm_chan_to_freq(5000, channel)


def test_ofdm_low_starting_frequency_rejected():
    with pytest.raises(ValueError):
        channels.ofdm_chan_to_freq(3999, 36)
    with pytest.raises(ValueError):
        channels.freq_to_ofdm_chan(3999, 4180)


@pytest.mark.parametrize("offset", [0, 1, 2, 1203])
def test_ofdm_freq_out_of_range(offset):
    with pytest.raises(ValueError):
        channels.freq_to_ofdm_chan(5000, 5000 + offset)


def test_tu_to_usec():
    assert channels.tu_to_usec(0) == 0
    assert channels.tu_to_usec(1) == 1024
    assert channels.tu_to_usec(100) == 100 * channels.tu_to_usec(1)


def test_tu_to_usec_negative_rejected():
    with pytest.raises(ValueError):
        channels.tu_to_usec(-1)