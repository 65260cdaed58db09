"""
Ядро RSA-слоя: перечисления алгоритмов, протокол провайдера, исключения.
"""

from jose_rsa.core.exceptions import (
    NO_DESCRIPTION_AVAILABLE,
    AlgorithmNotSupportedError,
    CipherTextLengthNotSatisfiedError,
    DecryptingFailedError,
    EncryptingFailedError,
    PlainTextLengthNotSatisfiedError,
    RSAError,
    RSAOperationFailedError,
    SigningFailedError,
    VerifyingFailedError,
)
from jose_rsa.core.metadata import (
    AsymmetricKeyAlgorithm,
    OperationKind,
    SchemeId,
    SignatureAlgorithm,
)
from jose_rsa.core.protocols import KeyHandle, PrimitiveFault, PrimitiveProvider

__all__ = [
    # Metadata
    "SignatureAlgorithm",
    "AsymmetricKeyAlgorithm",
    "OperationKind",
    "SchemeId",
    # Protocols
    "KeyHandle",
    "PrimitiveFault",
    "PrimitiveProvider",
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
