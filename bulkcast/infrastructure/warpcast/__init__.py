from .direct_cast_client import DirectCastClient, RequestError, serialize_payload

__all__ = ["DirectCastClient", "RequestError", "serialize_payload"]
