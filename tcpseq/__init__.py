"""32-bit wrapping TCP sequence numbers and their conversion to absolute positions.

The value type and the ``wrap``/``unwrap`` functions are in
``tcpseq.wrapping_integers``.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]