#!/usr/bin/env python3
"""
Header Reader - validates and parses the fixed-size FIT file header
"""
import struct

from ..const import FILE_CRC_SIZE, FIT_DATA_TYPE, VALID_HEADER_SIZES
from ..exceptions import malformed_header, truncated_stream
from ..utils import get_logger
from .interface import FileHeader


logger = get_logger(__name__)

# protocol version, profile version, data size, data type tag
_HEADER_BODY = struct.Struct('<BHI4s')
_HEADER_CRC = struct.Struct('<H')


def read_header(data: bytes) -> FileHeader:
    """
    Parse the file header at the start of a FIT buffer.

    Args:
        data: Complete file contents

    Returns:
        FileHeader

    Raises:
        MalformedHeaderError: bad size byte, bad tag, non-positive data size
            or a buffer shorter than the header
        TruncatedStreamError: data size disagrees with the buffer length
    """
    if not data:
        raise malformed_header("Empty FIT buffer")

    header_size = data[0]
    if header_size not in VALID_HEADER_SIZES:
        raise malformed_header("Invalid header size", header_size=header_size)
    if len(data) < header_size:
        raise malformed_header("Buffer shorter than header", header_size=header_size, length=len(data))

    protocol_version, profile_version, data_size, tag = _HEADER_BODY.unpack_from(data, 1)
    crc = None
    if header_size == 14:
        crc = _HEADER_CRC.unpack_from(data, 1 + _HEADER_BODY.size)[0]

    if tag != FIT_DATA_TYPE:
        raise malformed_header("Invalid data type tag", data_type=tag.decode('ascii', errors='replace'))
    if data_size <= 0:
        raise malformed_header("Non-positive data size", data_size=data_size)

    available = len(data) - header_size - FILE_CRC_SIZE
    if available != data_size:
        raise truncated_stream(
            "Data size does not match stream length",
            data_size=data_size,
            available=available,
        )

    header = FileHeader(
        header_size=header_size,
        protocol_version=protocol_version,
        profile_version=profile_version,
        data_size=data_size,
        data_type=tag.decode('ascii'),
        crc=crc,
    )
    logger.debug("Header parsed", **header.to_dict())
    return header
