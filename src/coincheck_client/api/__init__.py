from .public import PublicApi
from .private import PrivateApi

__all__ = ["PublicApi", "PrivateApi"]
