"""Cluster template functions.

Exposes cluster-derived values and lookups to a template renderer and
synthesizes the startup argv for the DNS add-on controllers
(``dns-controller`` and ``external-dns``).
"""

try:
    from importlib.metadata import version

    __version__ = version("cluster-template-functions")
except Exception:
    __version__ = "0.0.0.dev0"

__all__ = ["__version__"]
