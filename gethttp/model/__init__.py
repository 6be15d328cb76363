from .header import ConnectionTarget, ParsedUrl, ProxyDescriptor, RequestMode, TransferStats
from .errors import (
    ConnectError,
    GetHttpError,
    InputError,
    RecvError,
    RequestSizeError,
    ResolutionError,
    SendError,
    SocketError,
)
