"""LZ77 block compression, archive member bookkeeping and a small player model."""

__version__ = "0.1.0"
__all__ = ["lz", "member", "memberlist", "player"]