"""Country lookup for IPv4 addresses from an ipinfo lite CSV file, in seven index structures."""

__version__ = "0.1.0"
__all__ = ["records", "v1", "v2", "v3", "v4", "v5", "v6", "v7"]