"""
Исключения RSA-слоя.

Закрытая иерархия типизированных ошибок для четырёх RSA-операций
(sign, verify, encrypt, decrypt). Каждый класс соответствует одному
классу сбоя и несёт только данные, нужные для диагностики.

Example:
    >>> from jose_rsa.core.exceptions import RSAError
    >>> try:
    ...     rsa_ops.encrypt(plaintext, public_key, AsymmetricKeyAlgorithm.RSA1_5)
    ... except RSAError as e:
    ...     logger.error(f"RSA operation failed: {e}")
    ...     print(f"Algorithm: {e.algorithm}")

Иерархия:
    RSAError (базовое)
    ├── AlgorithmNotSupportedError
    ├── PlainTextLengthNotSatisfiedError
    ├── CipherTextLengthNotSatisfiedError
    └── RSAOperationFailedError
        ├── SigningFailedError
        ├── VerifyingFailedError
        ├── EncryptingFailedError
        └── DecryptingFailedError

Security Note:
    Исключения НЕ содержат:
    - Ключи или их части
    - Plaintext, ciphertext или подписи
    Только имена алгоритмов, операции и длины в байтах.

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "NO_DESCRIPTION_AVAILABLE",
    # Base exception
    "RSAError",
    # Caller errors
    "AlgorithmNotSupportedError",
    "PlainTextLengthNotSatisfiedError",
    "CipherTextLengthNotSatisfiedError",
    # Provider faults
    "RSAOperationFailedError",
    "SigningFailedError",
    "VerifyingFailedError",
    "EncryptingFailedError",
    "DecryptingFailedError",
]

NO_DESCRIPTION_AVAILABLE = "No description available."
"""Описание по умолчанию, если провайдер не сообщил причину сбоя."""


# ==============================================================================
# BASE EXCEPTION
# ==============================================================================


class RSAError(Exception):
    """
    Базовое исключение для всех ошибок RSA-слоя.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        algorithm: Имя алгоритма (например, "RS512")
        context: Дополнительный контекст для отладки (без секретов!)

    Example:
        >>> try:
        ...     rsa_ops.sign(data, private_key, SignatureAlgorithm.RS512)
        ... except RSAError as e:
        ...     print(e.algorithm)
        RS512
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.algorithm = algorithm
        self.context = context or {}

    def __str__(self) -> str:
        """
        Строковое представление исключения.

        Example:
            >>> str(error)
            'SigningFailedError: Signing failed: key too small [algorithm=RS512]'
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.algorithm:
            parts.append(f" [algorithm={self.algorithm}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        """Представление для отладки."""
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"algorithm={self.algorithm!r}, "
            f"context={self.context!r})"
        )


def _algorithm_name(algorithm: Any) -> Optional[str]:
    if algorithm is None:
        return None
    value = getattr(algorithm, "value", algorithm)
    return str(value)


# ==============================================================================
# CALLER ERRORS
# ==============================================================================


class AlgorithmNotSupportedError(RSAError):
    """
    Алгоритм не поддерживается для данной операции и ключа.

    Raises когда:
    - У значения алгоритма нет отображения на нативную схему провайдера
    - Ключ отклонил схему для запрошенной операции (capability query)

    Ошибка конфигурации вызывающего кода, повтор не имеет смысла.

    Attributes:
        operation: Запрошенная операция ("sign", "verify", ...)

    Example:
        >>> rsa_ops.sign(data, public_key, SignatureAlgorithm.RS512)
        AlgorithmNotSupportedError: Algorithm 'RS512' is not supported for sign
    """

    def __init__(self, algorithm: Any, operation: Any) -> None:
        name = _algorithm_name(algorithm)
        op = str(getattr(operation, "value", operation))
        super().__init__(
            f"Algorithm '{name}' is not supported for {op}",
            algorithm=name,
            context={"operation": op},
        )
        self.operation = op


class PlainTextLengthNotSatisfiedError(RSAError):
    """
    Длина plaintext нарушает ограничение алгоритма относительно ключа.

    Для RSA1_5: len(plaintext) < block_size - 11 (RFC 3447, Section 7.2).

    Attributes:
        actual_size: Фактическая длина plaintext
        block_size: Размер блока (модуля) публичного ключа в байтах
        max_size: Максимально допустимая длина (если известна)
    """

    def __init__(
        self,
        algorithm: Any,
        *,
        actual_size: int,
        block_size: int,
        max_size: Optional[int] = None,
    ) -> None:
        name = _algorithm_name(algorithm)
        message = f"Plaintext length not satisfied for {name}: got {actual_size} bytes"
        if max_size is not None:
            message += f", max {max_size} bytes"

        context: Dict[str, Any] = {
            "actual_size": actual_size,
            "block_size": block_size,
        }
        if max_size is not None:
            context["max_size"] = max_size

        super().__init__(message, algorithm=name, context=context)
        self.actual_size = actual_size
        self.block_size = block_size
        self.max_size = max_size


class CipherTextLengthNotSatisfiedError(RSAError):
    """
    Длина ciphertext не совпадает с размером блока приватного ключа.

    Для RSA1_5 ciphertext должен быть ровно одним RSA-блоком.

    Attributes:
        actual_size: Фактическая длина ciphertext
        expected_size: Ожидаемая длина (размер блока ключа)
    """

    def __init__(
        self,
        algorithm: Any,
        *,
        actual_size: int,
        expected_size: int,
    ) -> None:
        name = _algorithm_name(algorithm)
        super().__init__(
            f"Ciphertext length not satisfied for {name}: "
            f"expected {expected_size} bytes, got {actual_size} bytes",
            algorithm=name,
            context={"expected_size": expected_size, "actual_size": actual_size},
        )
        self.actual_size = actual_size
        self.expected_size = expected_size


# ==============================================================================
# PROVIDER FAULTS
# ==============================================================================


class RSAOperationFailedError(RSAError):
    """
    Провайдер примитивов сообщил об операционном сбое.

    Attributes:
        description: Диагностика провайдера или NO_DESCRIPTION_AVAILABLE
    """

    operation_label: str = "RSA operation"

    def __init__(
        self,
        description: Optional[str] = None,
        *,
        algorithm: Any = None,
    ) -> None:
        self.description = description or NO_DESCRIPTION_AVAILABLE
        super().__init__(
            f"{self.operation_label} failed: {self.description}",
            algorithm=_algorithm_name(algorithm),
        )


class SigningFailedError(RSAOperationFailedError):
    """Провайдер не смог создать подпись."""

    operation_label = "Signing"


class VerifyingFailedError(RSAOperationFailedError):
    """
    Проверку подписи не удалось выполнить.

    Отличается от результата False: False означает, что проверка прошла
    и подпись не совпала, а это исключение означает, что провайдер
    не смог оценить подпись (некорректный формат и т.п.).
    """

    operation_label = "Verifying"


class EncryptingFailedError(RSAOperationFailedError):
    """Провайдер не смог зашифровать данные."""

    operation_label = "Encrypting"


class DecryptingFailedError(RSAOperationFailedError):
    """Провайдер не смог расшифровать данные."""

    operation_label = "Decrypting"
