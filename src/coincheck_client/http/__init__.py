from .decoder import RawResponse, decode
from .request_builder import AuthHeaders, PreparedRequest, build_request, encode_target, sign_request
from .transport import HttpDispatcher

__all__ = [
    "RawResponse",
    "decode",
    "AuthHeaders",
    "PreparedRequest",
    "build_request",
    "encode_target",
    "sign_request",
    "HttpDispatcher",
]
