"""World map graph generation: jittered grid points joined by a spanning tree and proximity links."""

__version__ = "0.1.0"
