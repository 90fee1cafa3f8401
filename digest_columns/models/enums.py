from enum import Enum


class DigestEncoding(str, Enum):
    BINARY = "binary"
    HEX = "hex"
    BASE64 = "base64"
