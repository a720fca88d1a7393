"""
This module generates SIEC255 key pairs. A private key is a scalar in [0, N)
sampled from a caller-supplied randomness source by rejection sampling, and the
public key is the private key times the base point.
"""

from __future__ import annotations
import logging
import secrets
from typing import BinaryIO, Callable, Optional, Tuple, Union
from .curve import CurveParams, siec255

logger = logging.getLogger(__name__)

RandomSource = Union[Callable[[int], bytes], BinaryIO]

_MASK = (0xFF, 0x1, 0x3, 0x7, 0xF, 0x1F, 0x3F, 0x7F)


class RandomSourceError(OSError):
    """Raised when the randomness source cannot supply the requested bytes."""


def _read(rand: RandomSource, size: int) -> bytes:
    """
    Read exactly size bytes from rand, continuing after partial reads.

    Raises:
    RandomSourceError: If rand raises OSError or runs dry before size bytes
    have been read.
    """
    read = rand.read if hasattr(rand, "read") else rand
    buf = bytearray()
    while len(buf) < size:
        try:
            chunk = read(size - len(buf))
        except OSError as e:
            raise RandomSourceError("Failed to read from the randomness source.") from e
        if not chunk:
            raise RandomSourceError(
                f"Randomness source ran out after {len(buf)} bytes, expected {size}."
            )
        buf += chunk
    return bytes(buf)


def generate_key(
    rand: RandomSource = secrets.token_bytes, curve: Optional[CurveParams] = None
) -> Tuple[bytes, int, int]:
    """
    Generate a public/private key pair.

    Parameters:
    rand (RandomSource, optional): A callable returning n random bytes, or a
        binary file-like object. Defaults to secrets.token_bytes.
    curve (Optional[CurveParams], optional): Defaults to SIEC255.

    Returns:
    Tuple[bytes, int, int]: The big-endian private key and the x- and
    y-coordinates of the public key.

    Raises:
    RandomSourceError: If the randomness source fails. The read is not retried.

    Sampling repeats for as long as the candidate is out of range; a source
    that never yields a value below N makes this loop forever.
    """
    curve = curve if curve is not None else siec255()
    n = curve.n
    bit_size = n.bit_length()
    byte_len = (bit_size + 7) >> 3

    while True:
        k = bytearray(_read(rand, byte_len))
        # Mask off excess bits when the order is not a whole number of bytes.
        k[0] &= _MASK[bit_size % 8]
        # Keeps an all-zero source from producing the zero scalar.
        if byte_len > 1:
            k[1] ^= 0x42
        if int.from_bytes(k, "big") >= n:
            logger.debug("sampled scalar out of range, resampling")
            continue
        k = bytes(k)
        x, y = curve.scalar_base_mult(k)
        return k, x, y
