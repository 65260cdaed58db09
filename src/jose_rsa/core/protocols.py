"""
Протокол провайдера RSA-примитивов.

Провайдер: внешний компонент, выполняющий собственно RSA-математику
(модульное возведение в степень, padding, генерация случайных чисел)
для непрозрачного дескриптора ключа и нативного идентификатора схемы.
RSA-слой только проверяет предусловия и делегирует работу провайдеру.

Модуль использует typing.Protocol (structural subtyping): провайдер не
обязан наследоваться от PrimitiveProvider. Протокол помечен
@runtime_checkable для поддержки isinstance() проверок.

Канал ошибок:
    Провайдер сообщает об операционном сбое, поднимая PrimitiveFault
    с необязательным описанием. Отрицательный результат проверки подписи
    (подпись не совпала) возвращается как False, а НЕ как исключение.

Example:
    >>> from jose_rsa.providers import CryptographyProvider
    >>> provider = CryptographyProvider()
    >>> isinstance(provider, PrimitiveProvider)
    True

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from jose_rsa.core.metadata import OperationKind, SchemeId

__all__: list[str] = [
    "KeyHandle",
    "PrimitiveFault",
    "PrimitiveProvider",
]

KeyHandle = Any
"""Непрозрачная ссылка на RSA-ключ, принадлежащая провайдеру."""


class PrimitiveFault(Exception):
    """
    Операционный сбой провайдера примитивов.

    Attributes:
        description: Диагностика провайдера (может отсутствовать)

    Example:
        >>> raise PrimitiveFault("RSA key too small for the requested padding")
    """

    def __init__(self, description: Optional[str] = None) -> None:
        super().__init__(description or "")
        self.description = description


@runtime_checkable
class PrimitiveProvider(Protocol):
    """
    Протокол для провайдера RSA-примитивов.

    Все методы принимают дескриптор ключа "на время вызова": провайдер
    владеет ключом, RSA-слой его только передаёт и никогда не изменяет.

    Validation Rules (ответственность вызывающего RSA-слоя):
        - схема проверена через is_algorithm_supported до любого вызова
        - длины plaintext/ciphertext проверены относительно block_size_bytes

    Example:
        >>> provider.is_algorithm_supported(
        ...     private_key, OperationKind.SIGN,
        ...     SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512,
        ... )
        True
        >>> signature = provider.compute_signature(
        ...     private_key, SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512, b"data"
        ... )
        >>> len(signature) == provider.block_size_bytes(private_key)
        True
    """

    def is_algorithm_supported(
        self,
        key: KeyHandle,
        operation: OperationKind,
        scheme: SchemeId,
    ) -> bool:
        """
        Capability query: поддерживает ли ключ схему для операции.

        Returns:
            True если операция возможна, False иначе (никогда не поднимает
            исключение для неподходящего ключа)
        """
        ...

    def compute_signature(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        """
        Создать подпись над сырыми данными.

        Raises:
            PrimitiveFault: При операционном сбое
        """
        ...

    def verify_signature(
        self,
        key: KeyHandle,
        scheme: SchemeId,
        data: bytes,
        signature: bytes,
    ) -> bool:
        """
        Проверить подпись.

        Returns:
            True если подпись совпала, False если не совпала

        Raises:
            PrimitiveFault: Если проверку невозможно выполнить
        """
        ...

    def encrypt_data(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        """
        Зашифровать данные публичным ключом.

        Raises:
            PrimitiveFault: При операционном сбое
        """
        ...

    def decrypt_data(self, key: KeyHandle, scheme: SchemeId, data: bytes) -> bytes:
        """
        Расшифровать данные приватным ключом.

        Raises:
            PrimitiveFault: При операционном сбое
        """
        ...

    def block_size_bytes(self, key: KeyHandle) -> int:
        """Размер RSA-модуля ключа в байтах."""
        ...
