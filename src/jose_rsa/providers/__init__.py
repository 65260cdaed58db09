"""
Провайдеры RSA-примитивов.

Provider'ы реализуют jose_rsa.core.protocols.PrimitiveProvider.
"""

from jose_rsa.providers.cryptography_provider import CryptographyProvider

__all__ = ["CryptographyProvider"]
