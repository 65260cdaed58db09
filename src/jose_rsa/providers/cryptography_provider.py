"""
Провайдер RSA-примитивов на базе библиотеки cryptography.

Дескрипторы ключей: объекты cryptography:
    - rsa.RSAPrivateKey: sign, decrypt
    - rsa.RSAPublicKey: verify, encrypt

Схемы:
    - rsa-signature-message-pkcs1v15-sha512 → PKCS1v15 + SHA-512
      (хеш от сообщения вычисляет cryptography)
    - rsa-encryption-pkcs1 → PKCS1v15

Канал ошибок:
    - InvalidSignature при проверке → False (подпись не совпала)
    - подпись длиной не в один блок ключа → PrimitiveFault
      (проверку невозможно выполнить)
    - ValueError, TypeError, UnsupportedAlgorithm → PrimitiveFault
      с сообщением библиотеки

Example:
    >>> from cryptography.hazmat.primitives.asymmetric import rsa
    >>> private_key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    >>> provider = CryptographyProvider()
    >>> provider.block_size_bytes(private_key)
    256

Security Note:
    Провайдер не сериализует и не логирует ключи, plaintext и подписи.
    В лог попадают только имена схем и длины в байтах.

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from jose_rsa.core.metadata import OperationKind, SchemeId
from jose_rsa.core.protocols import KeyHandle, PrimitiveFault

__all__: list[str] = ["CryptographyProvider"]

logger = logging.getLogger(__name__)

_LIBRARY_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


# ==============================================================================
# SCHEME PARAMETERS
# ==============================================================================

_SIGNATURE_PARAMETERS: Dict[
    SchemeId,
    Tuple[Callable[[], padding.AsymmetricPadding], Callable[[], hashes.HashAlgorithm]],
] = {
    SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512: (padding.PKCS1v15, hashes.SHA512),
}

_ENCRYPTION_PADDINGS: Dict[SchemeId, Callable[[], padding.AsymmetricPadding]] = {
    SchemeId.RSA_ENCRYPTION_PKCS1: padding.PKCS1v15,
}

# Тип ключа и семейство схем для каждой операции
_CAPABILITIES: Dict[OperationKind, Tuple[type, Callable[[SchemeId], bool]]] = {
    OperationKind.SIGN: (rsa.RSAPrivateKey, lambda scheme: scheme.is_signature),
    OperationKind.VERIFY: (rsa.RSAPublicKey, lambda scheme: scheme.is_signature),
    OperationKind.ENCRYPT: (rsa.RSAPublicKey, lambda scheme: scheme.is_encryption),
    OperationKind.DECRYPT: (rsa.RSAPrivateKey, lambda scheme: scheme.is_encryption),
}


# ==============================================================================
# PROVIDER
# ==============================================================================


class CryptographyProvider:
    """
    PrimitiveProvider поверх cryptography.hazmat.

    Без состояния: один экземпляр можно использовать из нескольких потоков.

    Example:
        >>> provider = CryptographyProvider()
        >>> provider.is_algorithm_supported(
        ...     public_key, OperationKind.SIGN,
        ...     SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512,
        ... )
        False
    """

    def __init__(self) -> None:
        self._logger = logger.getChild("cryptography")

    def is_algorithm_supported(
        self,
        key: KeyHandle,
        operation: OperationKind,
        scheme: SchemeId,
    ) -> bool:
        if not isinstance(operation, OperationKind) or not isinstance(scheme, SchemeId):
            return False
        key_type, in_family = _CAPABILITIES[operation]
        return isinstance(key, key_type) and in_family(scheme)

    def compute_signature(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        self._require(key, OperationKind.SIGN, scheme)
        pad_factory, hash_factory = _SIGNATURE_PARAMETERS[scheme]
        try:
            signature: bytes = key.sign(data, pad_factory(), hash_factory())
        except _LIBRARY_ERRORS as exc:
            raise PrimitiveFault(str(exc) or None) from exc

        self._logger.debug(f"Signed {len(data)}B → {len(signature)}B ({scheme.value})")
        return signature

    def verify_signature(
        self,
        key: KeyHandle,
        scheme: SchemeId,
        data: bytes,
        signature: bytes,
    ) -> bool:
        self._require(key, OperationKind.VERIFY, scheme)
        expected_size = self.block_size_bytes(key)
        if len(signature) != expected_size:
            raise PrimitiveFault(
                f"Signature length {len(signature)} does not match "
                f"key size {expected_size} bytes"
            )
        pad_factory, hash_factory = _SIGNATURE_PARAMETERS[scheme]
        try:
            key.verify(signature, data, pad_factory(), hash_factory())
        except InvalidSignature:
            self._logger.debug(f"Signature mismatch ({scheme.value})")
            return False
        except _LIBRARY_ERRORS as exc:
            raise PrimitiveFault(str(exc) or None) from exc
        return True

    def encrypt_data(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        self._require(key, OperationKind.ENCRYPT, scheme)
        try:
            ciphertext: bytes = key.encrypt(data, _ENCRYPTION_PADDINGS[scheme]())
        except _LIBRARY_ERRORS as exc:
            raise PrimitiveFault(str(exc) or None) from exc

        self._logger.debug(
            f"Encrypted {len(data)}B → {len(ciphertext)}B ({scheme.value})"
        )
        return ciphertext

    def decrypt_data(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        self._require(key, OperationKind.DECRYPT, scheme)
        try:
            plaintext: bytes = key.decrypt(data, _ENCRYPTION_PADDINGS[scheme]())
        except _LIBRARY_ERRORS as exc:
            raise PrimitiveFault(str(exc) or None) from exc

        self._logger.debug(f"Decrypted {len(data)}B → {len(plaintext)}B ({scheme.value})")
        return plaintext

    def block_size_bytes(self, key: KeyHandle) -> int:
        if not isinstance(key, (rsa.RSAPrivateKey, rsa.RSAPublicKey)):
            raise PrimitiveFault(f"Not an RSA key: {type(key).__name__}")
        return (key.key_size + 7) // 8

    def _require(self, key: KeyHandle, operation: OperationKind, scheme: SchemeId) -> None:
        if not self.is_algorithm_supported(key, operation, scheme):
            raise PrimitiveFault(
                f"Scheme {getattr(scheme, 'value', scheme)} is not supported "
                f"for {operation.value} with {type(key).__name__}"
            )
