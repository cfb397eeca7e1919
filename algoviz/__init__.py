"""Step-by-step traces of merge, quick, bucket, radix, heap, tree and tournament sorts and of ternary and exponential search."""

__version__ = "0.1.0"