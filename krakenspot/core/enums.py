"""Core enumerations."""

from enum import Enum, IntEnum


class OHLCInterval(IntEnum):
    """OHLC candle interval in minutes."""

    M1 = 1
    M5 = 5
    M15 = 15
    M30 = 30
    H1 = 60
    H4 = 240
    D1 = 1440
    W1 = 10080
    D15 = 21600


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    MARKET = "market"
    LIMIT = "limit"
    STOP_LOSS = "stop-loss"
    TAKE_PROFIT = "take-profit"
    STOP_LOSS_LIMIT = "stop-loss-limit"
    TAKE_PROFIT_LIMIT = "take-profit-limit"
    TRAILING_STOP = "trailing-stop"
    TRAILING_STOP_LIMIT = "trailing-stop-limit"
    SETTLE_POSITION = "settle-position"


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    GTD = "GTD"


class Trigger(str, Enum):
    INDEX = "index"
    LAST = "last"


class SelfTradePrevention(str, Enum):
    CANCEL_NEWEST = "cancel-newest"
    CANCEL_OLDEST = "cancel-oldest"
    CANCEL_BOTH = "cancel-both"


class ReportType(str, Enum):
    TRADES = "trades"
    LEDGERS = "ledgers"


class ReportFormat(str, Enum):
    CSV = "CSV"
    TSV = "TSV"


class DeleteReportType(str, Enum):
    CANCEL = "cancel"
    DELETE = "delete"


class MediaType(str, Enum):
    """Response media types the pipeline knows how to handle."""

    JSON = "application/json"
    OCTET_STREAM = "application/octet-stream"
    ZIP = "application/zip"

    @property
    def is_stream(self) -> bool:
        return self is not MediaType.JSON
