from .credentials import Credentials, load_credentials
from .nonce import NonceGenerator
from .signing import build_message, sign

__all__ = ["Credentials", "load_credentials", "NonceGenerator", "build_message", "sign"]
