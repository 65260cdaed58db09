"""
RSA-операции, параметризованные алгоритмом: sign, verify, encrypt, decrypt.

Тонкая граница между абстрактным алгоритмом (SignatureAlgorithm,
AsymmetricKeyAlgorithm) и провайдером RSA-примитивов. Каждая операция
выполняется в три фазы:

    1. resolve:  алгоритм → SchemeId + capability query к ключу
    2. validate: законы длины входных данных относительно block size
    3. delegate: вызов провайдера, перевод его сбоя в типизированную ошибку

Операции НЕ выполняют padding, хеширование или добавление длины:
вся криптографическая работа принадлежит провайдеру.

Результаты verify:
    - True : подпись совпала
    - False: проверка выполнена, подпись не совпала (не ошибка)
    - VerifyingFailedError: проверку невозможно выполнить

Concurrency:
    Операции синхронные и без состояния. RSAOperations хранит только
    ссылку на провайдер, ключи только читаются, поэтому блокировки не нужны.
    Вызов блокирует поток на время RSA-вычисления (единицы миллисекунд
    для больших модулей) и не может быть отменён.

Example:
    >>> from jose_rsa import sign, verify, SignatureAlgorithm
    >>> signature = sign(b"header.payload", private_key, SignatureAlgorithm.RS512)
    >>> verify(b"header.payload", signature, public_key, SignatureAlgorithm.RS512)
    True

    >>> from jose_rsa import encrypt, decrypt, AsymmetricKeyAlgorithm
    >>> ct = encrypt(b"hello", public_key, AsymmetricKeyAlgorithm.RSA1_5)
    >>> decrypt(ct, private_key, AsymmetricKeyAlgorithm.RSA1_5)
    b'hello'

References:
    - RFC 3447 Section 7.2 (RSAES-PKCS1-v1_5), Section 8.2 (RSASSA-PKCS1-v1_5)
    - RFC 7518 Section 3.3 (RS512), Section 4.2 (RSA1_5)

Version: 1.0
Date: October 19, 2026
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from jose_rsa.algorithms.resolver import (
    is_ciphertext_length_valid,
    is_plaintext_length_valid,
    max_plaintext_length,
    resolve_encryption_scheme,
    resolve_signature_scheme,
)
from jose_rsa.config import RSAConfig
from jose_rsa.core.exceptions import (
    NO_DESCRIPTION_AVAILABLE,
    AlgorithmNotSupportedError,
    CipherTextLengthNotSatisfiedError,
    DecryptingFailedError,
    EncryptingFailedError,
    PlainTextLengthNotSatisfiedError,
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

__all__: list[str] = [
    "RSAOperations",
    "sign",
    "verify",
    "encrypt",
    "decrypt",
]

logger = logging.getLogger(__name__)


# ==============================================================================
# HELPER FUNCTIONS
# ==============================================================================


def _ensure_bytes(value: Any, name: str) -> None:
    """
    Проверить, что значение является bytes.

    Raises:
        TypeError: Если value не является bytes
    """
    if not isinstance(value, bytes):
        raise TypeError(f"{name} must be bytes, got {type(value).__name__}")


def _fault_description(exc: BaseException) -> Optional[str]:
    if isinstance(exc, PrimitiveFault):
        return exc.description
    return str(exc) or None


def _name(algorithm: Any) -> str:
    return str(getattr(algorithm, "value", algorithm))


# ==============================================================================
# OPERATION FACADE
# ==============================================================================


class RSAOperations:
    """
    Фасад четырёх RSA-операций поверх провайдера примитивов.

    Attributes:
        provider: Провайдер RSA-примитивов (PrimitiveProvider)

    Example:
        >>> ops = RSAOperations(CryptographyProvider())
        >>> sig = ops.sign(b"data", private_key, SignatureAlgorithm.RS512)
        >>> ops.verify(b"data", sig, public_key, SignatureAlgorithm.RS512)
        True

    Thread safety: экземпляр не меняется после создания.
    """

    def __init__(
        self,
        provider: PrimitiveProvider,
        *,
        missing_description: str = NO_DESCRIPTION_AVAILABLE,
    ) -> None:
        if not isinstance(provider, PrimitiveProvider):
            raise TypeError(
                f"provider must implement PrimitiveProvider, "
                f"got {type(provider).__name__}"
            )
        self._provider = provider
        self._missing_description = missing_description
        self._logger = logger.getChild("operations")

    @classmethod
    def from_config(cls, config: RSAConfig) -> RSAOperations:
        """Создать фасад с провайдером из конфигурации."""
        return cls(
            config.create_provider(),
            missing_description=config.missing_description,
        )

    @property
    def provider(self) -> PrimitiveProvider:
        return self._provider

    # --------------------------------------------------------------------------
    # SIGNATURES
    # --------------------------------------------------------------------------

    def sign(
        self,
        signing_input: bytes,
        private_key: KeyHandle,
        algorithm: SignatureAlgorithm,
    ) -> bytes:
        """
        Подписать входные данные алгоритмом и приватным ключом.

        Args:
            signing_input: Данные для подписи
            private_key: Дескриптор приватного ключа
            algorithm: Алгоритм подписи

        Returns:
            Подпись (без преобразований)

        Raises:
            TypeError: Если signing_input не bytes
            AlgorithmNotSupportedError: Нет схемы или ключ её не поддерживает
            SigningFailedError: Сбой провайдера
        """
        _ensure_bytes(signing_input, "signing_input")
        scheme = self._resolve(
            resolve_signature_scheme(algorithm), private_key, OperationKind.SIGN, algorithm
        )

        try:
            signature = self._provider.compute_signature(private_key, scheme, signing_input)
        except Exception as exc:
            description = self._describe(exc)
            self._logger.error(f"{_name(algorithm)} signing failed: {description}")
            raise SigningFailedError(description, algorithm=algorithm) from exc

        self._logger.debug(
            f"Signed {len(signing_input)}B → {len(signature)}B ({_name(algorithm)})"
        )
        return signature

    def verify(
        self,
        verifying_input: bytes,
        signature: bytes,
        public_key: KeyHandle,
        algorithm: SignatureAlgorithm,
    ) -> bool:
        """
        Проверить подпись входных данных.

        Args:
            verifying_input: Подписанные данные
            signature: Подпись для проверки
            public_key: Дескриптор публичного ключа
            algorithm: Алгоритм подписи

        Returns:
            True если подпись совпала, False если проверка выполнена
            и подпись не совпала

        Raises:
            TypeError: Если входные данные не bytes
            AlgorithmNotSupportedError: Нет схемы или ключ её не поддерживает
            VerifyingFailedError: Проверку невозможно выполнить; в том числе
                сбой провайдера без описания (описание по умолчанию)
        """
        _ensure_bytes(verifying_input, "verifying_input")
        _ensure_bytes(signature, "signature")
        scheme = self._resolve(
            resolve_signature_scheme(algorithm), public_key, OperationKind.VERIFY, algorithm
        )

        try:
            verified = self._provider.verify_signature(
                public_key, scheme, verifying_input, signature
            )
        except Exception as exc:
            description = self._describe(exc)
            self._logger.error(f"{_name(algorithm)} verification failed: {description}")
            raise VerifyingFailedError(description, algorithm=algorithm) from exc

        if not verified:
            self._logger.debug(f"Signature not verified ({_name(algorithm)})")
            return False
        return True

    # --------------------------------------------------------------------------
    # ENCRYPTION
    # --------------------------------------------------------------------------

    def encrypt(
        self,
        plaintext: bytes,
        public_key: KeyHandle,
        algorithm: AsymmetricKeyAlgorithm,
    ) -> bytes:
        """
        Зашифровать plaintext алгоритмом и публичным ключом.

        Длина plaintext проверяется ДО вызова провайдера: для RSA1_5
        plaintext должен быть минимум на 11 байт меньше модуля ключа.

        Raises:
            TypeError: Если plaintext не bytes
            AlgorithmNotSupportedError: Нет схемы или ключ её не поддерживает
            PlainTextLengthNotSatisfiedError: Plaintext слишком длинный
            EncryptingFailedError: Сбой провайдера
        """
        _ensure_bytes(plaintext, "plaintext")
        scheme = self._resolve(
            resolve_encryption_scheme(algorithm), public_key, OperationKind.ENCRYPT, algorithm
        )

        try:
            block_size = self._provider.block_size_bytes(public_key)
            if not is_plaintext_length_valid(algorithm, plaintext, block_size):
                self._logger.warning(
                    f"{_name(algorithm)} plaintext length {len(plaintext)}B "
                    f"not satisfied for {block_size}B key"
                )
                raise PlainTextLengthNotSatisfiedError(
                    algorithm,
                    actual_size=len(plaintext),
                    block_size=block_size,
                    max_size=max_plaintext_length(algorithm, block_size),
                )
            ciphertext = self._provider.encrypt_data(public_key, scheme, plaintext)
        except PlainTextLengthNotSatisfiedError:
            raise
        except Exception as exc:
            description = self._describe(exc)
            self._logger.error(f"{_name(algorithm)} encryption failed: {description}")
            raise EncryptingFailedError(description, algorithm=algorithm) from exc

        self._logger.debug(
            f"Encrypted {len(plaintext)}B → {len(ciphertext)}B ({_name(algorithm)})"
        )
        return ciphertext

    def decrypt(
        self,
        ciphertext: bytes,
        private_key: KeyHandle,
        algorithm: AsymmetricKeyAlgorithm,
    ) -> bytes:
        """
        Расшифровать ciphertext алгоритмом и приватным ключом.

        Для RSA1_5 ciphertext должен быть ровно одним RSA-блоком.

        Raises:
            TypeError: Если ciphertext не bytes
            AlgorithmNotSupportedError: Нет схемы или ключ её не поддерживает
            CipherTextLengthNotSatisfiedError: Длина не равна размеру блока
            DecryptingFailedError: Сбой провайдера
        """
        _ensure_bytes(ciphertext, "ciphertext")
        scheme = self._resolve(
            resolve_encryption_scheme(algorithm), private_key, OperationKind.DECRYPT, algorithm
        )

        try:
            block_size = self._provider.block_size_bytes(private_key)
            if not is_ciphertext_length_valid(algorithm, ciphertext, block_size):
                self._logger.warning(
                    f"{_name(algorithm)} ciphertext length {len(ciphertext)}B "
                    f"not satisfied for {block_size}B key"
                )
                raise CipherTextLengthNotSatisfiedError(
                    algorithm,
                    actual_size=len(ciphertext),
                    expected_size=block_size,
                )
            plaintext = self._provider.decrypt_data(private_key, scheme, ciphertext)
        except CipherTextLengthNotSatisfiedError:
            raise
        except Exception as exc:
            description = self._describe(exc)
            # Без деталей ciphertext: только описание провайдера
            self._logger.warning(f"{_name(algorithm)} decryption failed: {description}")
            raise DecryptingFailedError(description, algorithm=algorithm) from exc

        self._logger.debug(
            f"Decrypted {len(ciphertext)}B → {len(plaintext)}B ({_name(algorithm)})"
        )
        return plaintext

    # --------------------------------------------------------------------------
    # INTERNALS
    # --------------------------------------------------------------------------

    def _resolve(
        self,
        scheme: Optional[SchemeId],
        key: KeyHandle,
        operation: OperationKind,
        algorithm: Any,
    ) -> SchemeId:
        if scheme is None:
            self._logger.warning(f"No native scheme for {_name(algorithm)}")
            raise AlgorithmNotSupportedError(algorithm, operation)

        try:
            supported = self._provider.is_algorithm_supported(key, operation, scheme)
        except Exception as exc:
            self._logger.warning(
                f"Capability query failed for {_name(algorithm)} "
                f"({operation.value}): {self._describe(exc)}"
            )
            raise AlgorithmNotSupportedError(algorithm, operation) from exc

        if not supported:
            self._logger.warning(
                f"Key does not support {scheme.value} for {operation.value}"
            )
            raise AlgorithmNotSupportedError(algorithm, operation)
        return scheme

    def _describe(self, exc: BaseException) -> str:
        return _fault_description(exc) or self._missing_description


# ==============================================================================
# MODULE-LEVEL API
# ==============================================================================

_default_operations = RSAOperations.from_config(RSAConfig())


def _operations(provider: Optional[PrimitiveProvider]) -> RSAOperations:
    if provider is None:
        return _default_operations
    return RSAOperations(provider)


def sign(
    signing_input: bytes,
    private_key: KeyHandle,
    algorithm: SignatureAlgorithm,
    *,
    provider: Optional[PrimitiveProvider] = None,
) -> bytes:
    """Подписать данные (см. RSAOperations.sign)."""
    return _operations(provider).sign(signing_input, private_key, algorithm)


def verify(
    verifying_input: bytes,
    signature: bytes,
    public_key: KeyHandle,
    algorithm: SignatureAlgorithm,
    *,
    provider: Optional[PrimitiveProvider] = None,
) -> bool:
    """Проверить подпись (см. RSAOperations.verify)."""
    return _operations(provider).verify(verifying_input, signature, public_key, algorithm)


def encrypt(
    plaintext: bytes,
    public_key: KeyHandle,
    algorithm: AsymmetricKeyAlgorithm,
    *,
    provider: Optional[PrimitiveProvider] = None,
) -> bytes:
    """Зашифровать данные (см. RSAOperations.encrypt)."""
    return _operations(provider).encrypt(plaintext, public_key, algorithm)


def decrypt(
    ciphertext: bytes,
    private_key: KeyHandle,
    algorithm: AsymmetricKeyAlgorithm,
    *,
    provider: Optional[PrimitiveProvider] = None,
) -> bytes:
    """Расшифровать данные (см. RSAOperations.decrypt)."""
    return _operations(provider).decrypt(ciphertext, private_key, algorithm)
