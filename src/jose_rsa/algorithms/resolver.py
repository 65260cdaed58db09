"""
Разрешение алгоритмов в нативные схемы провайдера.

Отображает абстрактный алгоритм (SignatureAlgorithm, AsymmetricKeyAlgorithm)
на SchemeId провайдера и хранит законы длины входных данных для каждой схемы.

Правила:
    - Отображение явное, без ветки "по умолчанию": значение без записи
      в таблице даёт None, а не какую-то схему.
    - Законы длины пишутся отдельно для каждого алгоритма. OAEP и PSS
      имеют другие законы, и живут они только в этом модуле.

RSA1_5 (RFC 3447, Section 7.2):
    - plaintext: len < block_size - 11
      (0x00 || 0x02 || PS (>= 8 байт) || 0x00 || M)
    - ciphertext: len == block_size (ровно один RSA-блок)

Example:
    >>> resolve_signature_scheme(SignatureAlgorithm.RS512)
    <SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512: 'rsa-signature-message-pkcs1v15-sha512'>
    >>> is_plaintext_length_valid(AsymmetricKeyAlgorithm.RSA1_5, b"hello", 256)
    True

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from jose_rsa.core.metadata import AsymmetricKeyAlgorithm, SchemeId, SignatureAlgorithm

__all__: list[str] = [
    "PKCS1_V15_PADDING_OVERHEAD",
    "SUPPORTED_SIGNATURE_ALGORITHMS",
    "SUPPORTED_ENCRYPTION_ALGORITHMS",
    "resolve_signature_scheme",
    "resolve_encryption_scheme",
    "is_plaintext_length_valid",
    "is_ciphertext_length_valid",
    "max_plaintext_length",
]


# ==============================================================================
# CONSTANTS
# ==============================================================================

# 0x00 0x02 + минимум 8 байт случайного PS + разделитель 0x00
PKCS1_V15_PADDING_OVERHEAD = 11


# ==============================================================================
# SCHEME TABLES
# ==============================================================================

_SIGNATURE_SCHEMES: Dict[SignatureAlgorithm, SchemeId] = {
    SignatureAlgorithm.RS512: SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512,
}

_ENCRYPTION_SCHEMES: Dict[AsymmetricKeyAlgorithm, SchemeId] = {
    AsymmetricKeyAlgorithm.RSA1_5: SchemeId.RSA_ENCRYPTION_PKCS1,
}

SUPPORTED_SIGNATURE_ALGORITHMS: Tuple[SignatureAlgorithm, ...] = tuple(_SIGNATURE_SCHEMES)
SUPPORTED_ENCRYPTION_ALGORITHMS: Tuple[AsymmetricKeyAlgorithm, ...] = tuple(
    _ENCRYPTION_SCHEMES
)


# ==============================================================================
# LENGTH LAWS
# ==============================================================================

# (длина plaintext, block_size) -> допустимо
_PLAINTEXT_LENGTH_LAWS: Dict[AsymmetricKeyAlgorithm, Callable[[int, int], bool]] = {
    AsymmetricKeyAlgorithm.RSA1_5: lambda length, block: (
        length < block - PKCS1_V15_PADDING_OVERHEAD
    ),
}

# (длина ciphertext, block_size) -> допустимо
_CIPHERTEXT_LENGTH_LAWS: Dict[AsymmetricKeyAlgorithm, Callable[[int, int], bool]] = {
    AsymmetricKeyAlgorithm.RSA1_5: lambda length, block: length == block,
}

_MAX_PLAINTEXT_LENGTHS: Dict[AsymmetricKeyAlgorithm, Callable[[int], int]] = {
    AsymmetricKeyAlgorithm.RSA1_5: lambda block: block - PKCS1_V15_PADDING_OVERHEAD - 1,
}


# ==============================================================================
# PUBLIC API
# ==============================================================================


def resolve_signature_scheme(algorithm: Any) -> Optional[SchemeId]:
    """
    Нативная схема для алгоритма подписи.

    Args:
        algorithm: Значение SignatureAlgorithm

    Returns:
        SchemeId или None, если у значения нет отображения
        (в том числе для строк и значений чужих перечислений)
    """
    if not isinstance(algorithm, SignatureAlgorithm):
        return None
    return _SIGNATURE_SCHEMES.get(algorithm)


def resolve_encryption_scheme(algorithm: Any) -> Optional[SchemeId]:
    """
    Нативная схема для алгоритма шифрования.

    Args:
        algorithm: Значение AsymmetricKeyAlgorithm

    Returns:
        SchemeId или None, если у значения нет отображения
    """
    if not isinstance(algorithm, AsymmetricKeyAlgorithm):
        return None
    return _ENCRYPTION_SCHEMES.get(algorithm)


def is_plaintext_length_valid(
    algorithm: Any,
    plaintext: bytes,
    block_size: int,
) -> bool:
    """
    Проверить, что plaintext не превышает максимум для алгоритма и ключа.

    Args:
        algorithm: Значение AsymmetricKeyAlgorithm
        plaintext: Данные для шифрования
        block_size: Размер блока публичного ключа в байтах

    Returns:
        True если длина допустима; False для нарушения закона
        или алгоритма без закона длины

    Example:
        >>> is_plaintext_length_valid(AsymmetricKeyAlgorithm.RSA1_5, b"x" * 245, 256)
        False
    """
    if not isinstance(algorithm, AsymmetricKeyAlgorithm):
        return False
    law = _PLAINTEXT_LENGTH_LAWS.get(algorithm)
    if law is None:
        return False
    return law(len(plaintext), block_size)


def is_ciphertext_length_valid(
    algorithm: Any,
    ciphertext: bytes,
    block_size: int,
) -> bool:
    """
    Проверить длину ciphertext относительно блока приватного ключа.

    Args:
        algorithm: Значение AsymmetricKeyAlgorithm
        ciphertext: Данные для расшифровки
        block_size: Размер блока приватного ключа в байтах

    Returns:
        True если длина допустима
    """
    if not isinstance(algorithm, AsymmetricKeyAlgorithm):
        return False
    law = _CIPHERTEXT_LENGTH_LAWS.get(algorithm)
    if law is None:
        return False
    return law(len(ciphertext), block_size)


def max_plaintext_length(algorithm: Any, block_size: int) -> Optional[int]:
    """
    Максимальная допустимая длина plaintext (для диагностики).

    Returns:
        Число байт (не меньше 0) или None для алгоритма без закона длины

    Example:
        >>> max_plaintext_length(AsymmetricKeyAlgorithm.RSA1_5, 256)
        244
    """
    if not isinstance(algorithm, AsymmetricKeyAlgorithm):
        return None
    rule = _MAX_PLAINTEXT_LENGTHS.get(algorithm)
    if rule is None:
        return None
    return max(rule(block_size), 0)
