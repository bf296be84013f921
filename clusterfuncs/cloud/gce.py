"""GCE label encoding.

GCE label values only allow lowercase letters, digits, ``-`` and ``_``.
Every other UTF-8 byte is escaped as ``_`` followed by its two-digit
lowercase hex, e.g. ``k8s.io/role`` becomes ``k8s_2eio_2frole`` and
``é`` becomes ``_c3_a9``.
"""

from __future__ import annotations

import re

_ALLOWED = frozenset(b"0123456789abcdefghijklmnopqrstuvwxyz-")
_ESCAPE_RE = re.compile(rb"_([0-9a-f]{2})")


def encode_gce_label(s: str) -> str:
    """Encode *s* so it is a valid GCE label value."""
    out = []
    for b in s.encode("utf-8"):
        if b in _ALLOWED:
            out.append(chr(b))
        else:
            out.append(f"_{b:02x}")
    return "".join(out)


def decode_gce_label(s: str) -> str:
    """Invert :func:`encode_gce_label`.

    Raises :class:`ValueError` for a ``_`` not followed by two hex digits
    or for escapes that do not form valid UTF-8.
    """
    raw = s.encode("utf-8")
    out = bytearray()
    pos = 0
    while pos < len(raw):
        b = raw[pos]
        if b != ord("_"):
            out.append(b)
            pos += 1
            continue
        m = _ESCAPE_RE.match(raw, pos)
        if m is None:
            raise ValueError(f"Malformed GCE label escape at offset {pos} in {s!r}")
        out.append(int(m.group(1), 16))
        pos = m.end()
    return out.decode("utf-8")
