"""Convert between IEEE 802.11 channel numbers and centre frequencies in MHz.

Each conversion raises ``ValueError`` when the channel or frequency lies
outside the band the physical layer defines.
"""

from __future__ import annotations

TU_USEC = 1024


def _out_of_range(what: str, value: int) -> ValueError:
    return ValueError(f"{what} {value} is out of range")


def fhss_chan_to_freq(channel: int) -> int:
    """Return the frequency of an FHSS channel (IEEE 802.11-2007 14.6)."""
    if 1 < channel < 96:
        return channel + 2400
    raise _out_of_range("FHSS channel", channel)


def freq_to_fhss_chan(freq: int) -> int:
    """Return the FHSS channel at a frequency (IEEE 802.11-2007 14.6)."""
    if 2401 < freq < 2496:
        return freq - 2400
    raise _out_of_range("FHSS frequency", freq)


def dsss_chan_to_freq(channel: int) -> int:
    """Return the centre frequency of a DSSS channel (IEEE 802.11-2007 15.6)."""
    if 0 < channel < 14:
        return 2407 + channel * 5
    if channel == 14:
        return 2484
    raise _out_of_range("DSSS channel", channel)


def freq_to_dsss_chan(freq: int) -> int:
    """Return the DSSS channel whose centre frequency is closest to ``freq``."""
    if 2410 <= freq < 2475:
        return (freq - 2405) // 5
    if 2482 <= freq < 2487:
        return 14
    raise _out_of_range("DSSS frequency", freq)


# HR/DSSS and ERP use the same channels and frequencies as DSSS.
hr_chan_to_freq = dsss_chan_to_freq
freq_to_hr_chan = freq_to_dsss_chan
erp_chan_to_freq = dsss_chan_to_freq
freq_to_erp_chan = freq_to_dsss_chan


def ofdm_chan_to_freq(s_freq: int, channel: int) -> int:
    """Return the centre frequency of an OFDM channel.

    ``s_freq`` is the channel starting frequency in MHz
    (IEEE 802.11-2007 17.3.8.3.2).
    """
    if s_freq < 4000:
        raise _out_of_range("OFDM starting frequency", s_freq)
    if 0 < channel <= 200:
        return s_freq + channel * 5
    raise _out_of_range("OFDM channel", channel)


def freq_to_ofdm_chan(s_freq: int, freq: int) -> int:
    """Return the OFDM channel whose centre frequency is closest to ``freq``."""
    if s_freq < 4000:
        raise _out_of_range("OFDM starting frequency", s_freq)
    if s_freq + 2 < freq <= s_freq + 1202:
        return (freq + 2 - s_freq) // 5
    raise _out_of_range("OFDM frequency", freq)


def tu_to_usec(tu: int) -> int:
    """Convert time units (1024 microseconds each) to microseconds."""
    if tu < 0:
        raise ValueError(f"time units must not be negative: {tu}")
    return TU_USEC * tu