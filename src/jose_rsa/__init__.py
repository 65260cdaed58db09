"""
RSA-операции для JOSE, параметризованные алгоритмом.
EN: Algorithm-parameterized RSA sign / verify / encrypt / decrypt layer over
an opaque primitive provider. Single import point for the public API.
"""

from jose_rsa.algorithms import (
    SUPPORTED_ENCRYPTION_ALGORITHMS,
    SUPPORTED_SIGNATURE_ALGORITHMS,
    RSAOperations,
    decrypt,
    encrypt,
    sign,
    verify,
)
from jose_rsa.config import ProviderProfile, RSAConfig
from jose_rsa.core import (
    NO_DESCRIPTION_AVAILABLE,
    AlgorithmNotSupportedError,
    AsymmetricKeyAlgorithm,
    CipherTextLengthNotSatisfiedError,
    DecryptingFailedError,
    EncryptingFailedError,
    KeyHandle,
    OperationKind,
    PlainTextLengthNotSatisfiedError,
    PrimitiveFault,
    PrimitiveProvider,
    RSAError,
    RSAOperationFailedError,
    SchemeId,
    SignatureAlgorithm,
    SigningFailedError,
    VerifyingFailedError,
)
from jose_rsa.providers import CryptographyProvider

__version__ = "1.0.0"

__all__ = [
    # Operations
    "sign",
    "verify",
    "encrypt",
    "decrypt",
    "RSAOperations",
    # Algorithms
    "SignatureAlgorithm",
    "AsymmetricKeyAlgorithm",
    "OperationKind",
    "SchemeId",
    "SUPPORTED_SIGNATURE_ALGORITHMS",
    "SUPPORTED_ENCRYPTION_ALGORITHMS",
    # Providers
    "KeyHandle",
    "PrimitiveFault",
    "PrimitiveProvider",
    "CryptographyProvider",
    # Config
    "ProviderProfile",
    "RSAConfig",
    # Exceptions
    "NO_DESCRIPTION_AVAILABLE",
    "RSAError",
    "AlgorithmNotSupportedError",
    "PlainTextLengthNotSatisfiedError",
    "CipherTextLengthNotSatisfiedError",
    "RSAOperationFailedError",
    "SigningFailedError",
    "VerifyingFailedError",
    "EncryptingFailedError",
    "DecryptingFailedError",
]
