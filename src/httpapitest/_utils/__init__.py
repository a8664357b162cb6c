from ._json import JSONCapture, decode_json_into, encode_json
from ._multipart import encode_multipart, random_boundary

__all__ = [
    "JSONCapture",
    "decode_json_into",
    "encode_json",
    "encode_multipart",
    "random_boundary",
]
