"""NFT Roles Registry - role assignments bound to non-fungible tokens."""

__version__ = "0.1.0"
