"""vault — dostawca dokumentów markdown z katalogu."""

from .provider import VaultProvider

__all__ = ["VaultProvider"]
