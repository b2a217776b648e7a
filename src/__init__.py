"""
Publication Registry - Metadata, permission and usage tracking for digital works

Tracks publication metadata, per-user access permissions and per-publication
usage counters, with ownership-gated mutation.

Registry Rules:
- Identifiers start at 1 and are never reissued
- Only the creator may modify, transfer or remove a publication
- Access is default-deny; the creator is granted access at registration
- Every operation is all-or-nothing
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
