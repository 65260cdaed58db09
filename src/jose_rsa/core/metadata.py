"""
Перечисления алгоритмов и нативных схем RSA-слоя.

Определяет:
- SignatureAlgorithm: алгоритмы подписи (JOSE "alg": RS512)
- AsymmetricKeyAlgorithm: алгоритмы асимметричного шифрования (RSA1_5)
- OperationKind: вид операции для capability query провайдера
- SchemeId: нативные идентификаторы схем, понятные провайдеру

Все перечисления наследуют str для корректной JSON сериализации
и являются константами: новых значений во время выполнения не появляется.

Example:
    >>> from jose_rsa.core.metadata import SignatureAlgorithm
    >>> SignatureAlgorithm.from_str("RS512")
    <SignatureAlgorithm.RS512: 'RS512'>

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

__all__: list[str] = [
    "SignatureAlgorithm",
    "AsymmetricKeyAlgorithm",
    "OperationKind",
    "SchemeId",
]


_E = TypeVar("_E", bound=Enum)


def _parse(cls: Type[_E], value: str, kind: str) -> _E:
    for member in cls:
        if member.value == value:
            return member
    try:
        return cls[value]
    except KeyError:
        raise ValueError(
            f"Неизвестный {kind}: {value}. "
            f"Допустимые значения: {[m.value for m in cls]}"
        ) from None


# ==============================================================================
# ENUM: SIGNATURE ALGORITHM
# ==============================================================================


class SignatureAlgorithm(str, Enum):
    """
    Алгоритм цифровой подписи.

    Значения совпадают с параметром "alg" заголовка JWS (RFC 7518).

    Алгоритмы:
        - RS512: RSASSA-PKCS1-v1_5 с SHA-512

    Example:
        >>> SignatureAlgorithm.RS512.value
        'RS512'
    """

    RS512 = "RS512"

    @classmethod
    def from_str(cls, value: str) -> SignatureAlgorithm:
        """
        Парсинг из значения заголовка "alg".

        Сравнение чувствительно к регистру: "rs512" не является
        корректным значением JOSE.

        Raises:
            ValueError: Неизвестный алгоритм
        """
        return _parse(cls, value, "алгоритм подписи")


# ==============================================================================
# ENUM: ASYMMETRIC KEY ALGORITHM
# ==============================================================================


class AsymmetricKeyAlgorithm(str, Enum):
    """
    Алгоритм асимметричного шифрования ключа.

    Значения совпадают с параметром "alg" заголовка JWE (RFC 7518).

    Алгоритмы:
        - RSA1_5: RSAES-PKCS1-v1_5
    """

    RSA1_5 = "RSA1_5"

    @classmethod
    def from_str(cls, value: str) -> AsymmetricKeyAlgorithm:
        """
        Парсинг из значения заголовка "alg".

        Raises:
            ValueError: Неизвестный алгоритм
        """
        return _parse(cls, value, "алгоритм шифрования")


# ==============================================================================
# ENUM: OPERATION KIND
# ==============================================================================


class OperationKind(str, Enum):
    """Вид операции, для которой провайдер проверяет поддержку схемы ключом."""

    SIGN = "sign"
    VERIFY = "verify"
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ==============================================================================
# ENUM: NATIVE SCHEME ID
# ==============================================================================


class SchemeId(str, Enum):
    """
    Нативный идентификатор схемы (padding + hash) для провайдера примитивов.

    Схемы:
        - RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512: подпись сообщения,
          провайдер сам вычисляет SHA-512 от входных данных
        - RSA_ENCRYPTION_PKCS1: шифрование RSAES-PKCS1-v1_5
    """

    RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512 = "rsa-signature-message-pkcs1v15-sha512"
    RSA_ENCRYPTION_PKCS1 = "rsa-encryption-pkcs1"

    @property
    def is_signature(self) -> bool:
        """True для схем подписи."""
        return self in _SIGNATURE_SCHEMES

    @property
    def is_encryption(self) -> bool:
        """True для схем шифрования."""
        return self in _ENCRYPTION_SCHEMES


_SIGNATURE_SCHEMES = frozenset({SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512})
_ENCRYPTION_SCHEMES = frozenset({SchemeId.RSA_ENCRYPTION_PKCS1})
