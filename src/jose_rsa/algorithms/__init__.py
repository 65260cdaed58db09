"""
RSA-алгоритмы: разрешение схем и фасад операций.
"""

from jose_rsa.algorithms.resolver import (
    PKCS1_V15_PADDING_OVERHEAD,
    SUPPORTED_ENCRYPTION_ALGORITHMS,
    SUPPORTED_SIGNATURE_ALGORITHMS,
    is_ciphertext_length_valid,
    is_plaintext_length_valid,
    max_plaintext_length,
    resolve_encryption_scheme,
    resolve_signature_scheme,
)
from jose_rsa.algorithms.rsa import RSAOperations, decrypt, encrypt, sign, verify

__all__ = [
    # Resolver
    "PKCS1_V15_PADDING_OVERHEAD",
    "SUPPORTED_SIGNATURE_ALGORITHMS",
    "SUPPORTED_ENCRYPTION_ALGORITHMS",
    "resolve_signature_scheme",
    "resolve_encryption_scheme",
    "is_plaintext_length_valid",
    "is_ciphertext_length_valid",
    "max_plaintext_length",
    # Operations
    "RSAOperations",
    "sign",
    "verify",
    "encrypt",
    "decrypt",
]
