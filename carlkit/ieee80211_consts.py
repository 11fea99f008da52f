"""Numeric codes defined by IEEE 802.11 for management frames and elements."""

from enum import IntEnum


class StatusCode(IntEnum):
    """Status codes carried in management frames."""

    SUCCESS = 0
    UNSPECIFIED_FAILURE = 1
    CAPS_UNSUPPORTED = 10
    REASSOC_NO_ASSOC = 11
    ASSOC_DENIED_UNSPEC = 12
    NOT_SUPPORTED_AUTH_ALG = 13
    UNKNOWN_AUTH_TRANSACTION = 14
    CHALLENGE_FAIL = 15
    AUTH_TIMEOUT = 16
    AP_UNABLE_TO_HANDLE_NEW_STA = 17
    ASSOC_DENIED_RATES = 18
    # 802.11b
    ASSOC_DENIED_NOSHORTPREAMBLE = 19
    ASSOC_DENIED_NOPBCC = 20
    ASSOC_DENIED_NOAGILITY = 21
    # 802.11h
    ASSOC_DENIED_NOSPECTRUM = 22
    ASSOC_REJECTED_BAD_POWER = 23
    ASSOC_REJECTED_BAD_SUPP_CHAN = 24
    # 802.11g
    ASSOC_DENIED_NOSHORTTIME = 25
    ASSOC_DENIED_NODSSSOFDM = 26
    # 802.11w
    ASSOC_REJECTED_TEMPORARILY = 30
    ROBUST_MGMT_FRAME_POLICY_VIOLATION = 31
    # 802.11i
    INVALID_IE = 40
    INVALID_GROUP_CIPHER = 41
    INVALID_PAIRWISE_CIPHER = 42
    INVALID_AKMP = 43
    UNSUPP_RSN_VERSION = 44
    INVALID_RSN_IE_CAP = 45
    CIPHER_SUITE_REJECTED = 46
    # 802.11e
    UNSPECIFIED_QOS = 32
    ASSOC_DENIED_NOBANDWIDTH = 33
    ASSOC_DENIED_LOWACK = 34
    ASSOC_DENIED_UNSUPP_QOS = 35
    REQUEST_DECLINED = 37
    INVALID_QOS_PARAM = 38
    CHANGE_TSPEC = 39
    WAIT_TS_DELAY = 47
    NO_DIRECT_LINK = 48
    STA_NOT_PRESENT = 49
    STA_NOT_QSTA = 50
    # 802.11s
    ANTI_CLOG_REQUIRED = 76
    FCG_NOT_SUPP = 78
    STA_NO_TBTT = 78


class ReasonCode(IntEnum):
    """Reason codes for deauthentication and disassociation."""

    UNSPECIFIED = 1
    PREV_AUTH_NOT_VALID = 2
    DEAUTH_LEAVING = 3
    DISASSOC_DUE_TO_INACTIVITY = 4
    DISASSOC_AP_BUSY = 5
    CLASS2_FRAME_FROM_NONAUTH_STA = 6
    CLASS3_FRAME_FROM_NONASSOC_STA = 7
    DISASSOC_STA_HAS_LEFT = 8
    STA_REQ_ASSOC_WITHOUT_AUTH = 9
    # 802.11h
    DISASSOC_BAD_POWER = 10
    DISASSOC_BAD_SUPP_CHAN = 11
    # 802.11i
    INVALID_IE = 13
    MIC_FAILURE = 14
    FOUR_WAY_HANDSHAKE_TIMEOUT = 15
    GROUP_KEY_HANDSHAKE_TIMEOUT = 16
    IE_DIFFERENT = 17
    INVALID_GROUP_CIPHER = 18
    INVALID_PAIRWISE_CIPHER = 19
    INVALID_AKMP = 20
    UNSUPP_RSN_VERSION = 21
    INVALID_RSN_IE_CAP = 22
    IEEE8021X_FAILED = 23
    CIPHER_SUITE_REJECTED = 24
    # 802.11e
    DISASSOC_UNSPECIFIED_QOS = 32
    DISASSOC_QAP_NO_BANDWIDTH = 33
    DISASSOC_LOW_ACK = 34
    DISASSOC_QAP_EXCEED_TXOP = 35
    QSTA_LEAVE_QBSS = 36
    QSTA_NOT_USE = 37
    QSTA_REQUIRE_SETUP = 38
    QSTA_TIMEOUT = 39
    QSTA_CIPHER_NOT_SUPP = 45
    # 802.11s
    MESH_PEER_CANCELED = 52
    MESH_MAX_PEERS = 53
    MESH_CONFIG = 54
    MESH_CLOSE = 55
    MESH_MAX_RETRIES = 56
    MESH_CONFIRM_TIMEOUT = 57
    MESH_INVALID_GTK = 58
    MESH_INCONSISTENT_PARAM = 59
    MESH_INVALID_SECURITY = 60
    MESH_PATH_ERROR = 61
    MESH_PATH_NOFORWARD = 62
    MESH_PATH_DEST_UNREACHABLE = 63
    MAC_EXISTS_IN_MBSS = 64
    MESH_CHAN_REGULATORY = 65
    MESH_CHAN = 66


class ElementId(IntEnum):
    """Information element identifiers."""

    SSID = 0
    SUPP_RATES = 1
    FH_PARAMS = 2
    DS_PARAMS = 3
    CF_PARAMS = 4
    TIM = 5
    IBSS_PARAMS = 6
    CHALLENGE = 16

    COUNTRY = 7
    HP_PARAMS = 8
    HP_TABLE = 9
    REQUEST = 10

    QBSS_LOAD = 11
    EDCA_PARAM_SET = 12
    TSPEC = 13
    TCLAS = 14
    SCHEDULE = 15
    TS_DELAY = 43
    TCLAS_PROCESSING = 44
    QOS_CAPA = 46
    # 802.11z
    LINK_ID = 101
    # 802.11s
    MESH_CONFIG = 113
    MESH_ID = 114
    LINK_METRIC_REPORT = 115
    CONGESTION_NOTIFICATION = 116
    PEER_MGMT = 117
    CHAN_SWITCH_PARAM = 118
    MESH_AWAKE_WINDOW = 119
    BEACON_TIMING = 120
    MCCAOP_SETUP_REQ = 121
    MCCAOP_SETUP_RESP = 122
    MCCAOP_ADVERT = 123
    MCCAOP_TEARDOWN = 124
    GANN = 125
    RANN = 126
    PREQ = 130
    PREP = 131
    PERR = 132
    PXU = 137
    PXUC = 138
    AUTH_MESH_PEER_EXCH = 139
    MIC = 140

    PWR_CONSTRAINT = 32
    PWR_CAPABILITY = 33
    TPC_REQUEST = 34
    TPC_REPORT = 35
    SUPPORTED_CHANNELS = 36
    CHANNEL_SWITCH = 37
    MEASURE_REQUEST = 38
    MEASURE_REPORT = 39
    QUIET = 40
    IBSS_DFS = 41

    ERP_INFO = 42
    EXT_SUPP_RATES = 50

    HT_CAPABILITY = 45
    HT_OPERATION = 61

    RSN = 48
    MMIE = 76
    WPA = 221
    GENERIC = 221
    VENDOR_SPECIFIC = 221
    QOS_PARAMETER = 222

    AP_CHAN_REPORT = 51
    NEIGHBOR_REPORT = 52
    RCPI = 53
    BSS_AVG_ACCESS_DELAY = 63
    ANTENNA_INFO = 64
    RSNI = 65
    MEASUREMENT_PILOT_TX_INFO = 66
    BSS_AVAILABLE_CAPACITY = 67
    BSS_AC_ACCESS_DELAY = 68
    RRM_ENABLED_CAPABILITIES = 70
    MULTIPLE_BSSID = 71
    BSS_COEX_2040 = 72
    OVERLAP_BSS_SCAN_PARAM = 74
    EXT_CAPABILITY = 127

    MOBILITY_DOMAIN = 54
    FAST_BSS_TRANSITION = 55
    TIMEOUT_INTERVAL = 56
    RIC_DATA = 57
    RIC_DESCRIPTOR = 75

    DSE_REGISTERED_LOCATION = 58
    SUPPORTED_REGULATORY_CLASSES = 59
    EXT_CHANSWITCH_ANN = 60


class Category(IntEnum):
    """Action frame category codes."""

    SPECTRUM_MGMT = 0
    QOS = 1
    DLS = 2
    BACK = 3
    PUBLIC = 4
    HT = 7
    SA_QUERY = 8
    PROTECTED_DUAL_OF_ACTION = 9
    TDLS = 12
    MESH_ACTION = 13
    MULTIHOP_ACTION = 14
    SELF_PROTECTED = 15
    WMM = 17
    VENDOR_SPECIFIC_PROTECTED = 126
    VENDOR_SPECIFIC = 127


class MaxAmpduLengthExp(IntEnum):
    """Exponent of the largest A-MPDU a station can receive: 2**(13 + exp) - 1 octets."""

    SIZE_8K = 0
    SIZE_16K = 1
    SIZE_32K = 2
    SIZE_64K = 3


class MinMpduSpacing(IntEnum):
    """Minimum MPDU start spacing."""

    NONE = 0
    DENSITY_0_25 = 1
    DENSITY_0_5 = 2
    DENSITY_1 = 3
    DENSITY_2 = 4
    DENSITY_4 = 5
    DENSITY_8 = 6
    DENSITY_16 = 7


class BackActionCode(IntEnum):
    """Block-ack action codes."""

    ADDBA_REQ = 0
    ADDBA_RESP = 1
    DELBA = 2


class TdlsActionCode(IntEnum):
    """TDLS action codes."""

    SETUP_REQUEST = 0
    SETUP_RESPONSE = 1
    SETUP_CONFIRM = 2
    TEARDOWN = 3
    PEER_TRAFFIC_INDICATION = 4
    CHANNEL_SWITCH_REQUEST = 5
    CHANNEL_SWITCH_RESPONSE = 6
    PEER_PSM_REQUEST = 7
    PEER_PSM_RESPONSE = 8
    PEER_TRAFFIC_RESPONSE = 9
    DISCOVERY_REQUEST = 10


class KeyLength(IntEnum):
    """Key lengths in bytes for each cipher."""

    WEP40 = 5
    WEP104 = 13
    CCMP = 16
    TKIP = 32
    AES_CMAC = 16