"""
Тесты для модуля rsa.py (фасад RSA-операций).

Покрытие:
- Round trip sign/verify и encrypt/decrypt на реальных ключах cryptography
- Законы длины RSA1_5 (plaintext < block - 11, ciphertext == block)
- Трёхвариантный результат verify (True / False / VerifyingFailedError)
- Неподдерживаемые алгоритмы и ключи для всех четырёх операций
- Перевод сбоев провайдера в типизированные ошибки (FakeProvider)
- Module-level API и логирование без секретов

Date: October 19, 2026
"""

from __future__ import annotations

import hashlib
import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import pytest
from cryptography.hazmat.primitives.asymmetric import rsa

from jose_rsa import (
    NO_DESCRIPTION_AVAILABLE,
    AlgorithmNotSupportedError,
    AsymmetricKeyAlgorithm,
    CipherTextLengthNotSatisfiedError,
    CryptographyProvider,
    DecryptingFailedError,
    EncryptingFailedError,
    OperationKind,
    PlainTextLengthNotSatisfiedError,
    PrimitiveFault,
    RSAConfig,
    RSAOperations,
    SchemeId,
    SignatureAlgorithm,
    SigningFailedError,
    VerifyingFailedError,
    decrypt,
    encrypt,
    sign,
    verify,
)

RS512 = SignatureAlgorithm.RS512
RSA1_5 = AsymmetricKeyAlgorithm.RSA1_5


class FutureSignatureAlgorithm(str, Enum):
    """Алгоритм без отображения на нативную схему."""

    PS256 = "PS256"


class FutureKeyAlgorithm(str, Enum):
    """Алгоритм шифрования без отображения на нативную схему."""

    RSA_OAEP_256 = "RSA-OAEP-256"


# ==============================================================================
# FIXTURES
# ==============================================================================


@pytest.fixture(scope="module")
def private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="module")
def public_key(private_key: rsa.RSAPrivateKey) -> rsa.RSAPublicKey:
    return private_key.public_key()


@pytest.fixture
def ops() -> RSAOperations:
    return RSAOperations(CryptographyProvider())


class FakeProvider:
    """Провайдер с настраиваемыми ответами и журналом вызовов."""

    def __init__(
        self,
        *,
        supported: bool = True,
        block_size: int = 64,
        result: Any = b"\x01" * 64,
        fault: Optional[BaseException] = None,
        capability_fault: Optional[BaseException] = None,
        block_size_fault: Optional[BaseException] = None,
    ) -> None:
        self.supported = supported
        self.block_size = block_size
        self.result = result
        self.fault = fault
        self.capability_fault = capability_fault
        self.block_size_fault = block_size_fault
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _op(self, name: str, *args: Any) -> Any:
        self.calls.append((name, args))
        if self.fault is not None:
            raise self.fault
        return self.result

    def is_algorithm_supported(self, key: Any, operation: OperationKind, scheme: SchemeId) -> bool:
        self.calls.append(("is_algorithm_supported", (key, operation, scheme)))
        if self.capability_fault is not None:
            raise self.capability_fault
        return self.supported

    def compute_signature(self, key: Any, scheme: SchemeId, data: bytes) -> bytes:
        return self._op("compute_signature", key, scheme, data)

    def verify_signature(self, key: Any, scheme: SchemeId, data: bytes, signature: bytes) -> bool:
        return self._op("verify_signature", key, scheme, data, signature)

    def encrypt_data(self, key: Any, scheme: SchemeId, data: bytes) -> bytes:
        return self._op("encrypt_data", key, scheme, data)

    def decrypt_data(self, key: Any, scheme: SchemeId, data: bytes) -> bytes:
        return self._op("decrypt_data", key, scheme, data)

    def block_size_bytes(self, key: Any) -> int:
        self.calls.append(("block_size_bytes", (key,)))
        if self.block_size_fault is not None:
            raise self.block_size_fault
        return self.block_size

    def called(self, name: str) -> bool:
        return any(call[0] == name for call in self.calls)


# ==============================================================================
# TEST: ROUND TRIPS
# ==============================================================================


class TestRoundTrips:
    """Round trip на реальных RSA-2048 ключах."""

    def test_sign_verify_round_trip(
        self, ops: RSAOperations, private_key: Any, public_key: Any
    ) -> None:
        signature = ops.sign(b"header.payload", private_key, RS512)
        assert ops.verify(b"header.payload", signature, public_key, RS512) is True

    def test_sign_sha512_digest_scenario(
        self, ops: RSAOperations, private_key: Any, public_key: Any
    ) -> None:
        """Подпись SHA-512 от "test": 256 байт, проверка True, другой вход False."""
        signing_input = hashlib.sha512(b"test").digest()

        signature = ops.sign(signing_input, private_key, RS512)

        assert len(signature) == 256
        assert ops.verify(signing_input, signature, public_key, RS512) is True
        other = hashlib.sha512(b"other").digest()
        assert ops.verify(other, signature, public_key, RS512) is False

    def test_signature_is_deterministic(
        self, ops: RSAOperations, private_key: Any
    ) -> None:
        """PKCS1-v1_5 подпись детерминирована: фасад ничего не добавляет."""
        assert ops.sign(b"data", private_key, RS512) == ops.sign(b"data", private_key, RS512)

    def test_encrypt_hello_scenario(
        self, ops: RSAOperations, private_key: Any, public_key: Any
    ) -> None:
        ciphertext = ops.encrypt(b"hello", public_key, RSA1_5)

        assert len(ciphertext) == 256
        assert ops.decrypt(ciphertext, private_key, RSA1_5) == b"hello"

    @pytest.mark.parametrize("length", [1, 5, 32, 128, 244])
    def test_encrypt_decrypt_round_trip(
        self, ops: RSAOperations, private_key: Any, public_key: Any, length: int
    ) -> None:
        plaintext = bytes(range(256))[:length]
        ciphertext = ops.encrypt(plaintext, public_key, RSA1_5)
        assert ops.decrypt(ciphertext, private_key, RSA1_5) == plaintext


# ==============================================================================
# TEST: LENGTH LAWS
# ==============================================================================


class TestLengthLaws:
    """Законы длины RSA1_5 относительно блока ключа."""

    @pytest.mark.parametrize("length", [245, 246, 256, 1000])
    def test_plaintext_too_long(
        self, ops: RSAOperations, public_key: Any, length: int
    ) -> None:
        with pytest.raises(PlainTextLengthNotSatisfiedError) as exc_info:
            ops.encrypt(b"a" * length, public_key, RSA1_5)

        assert exc_info.value.actual_size == length
        assert exc_info.value.block_size == 256
        assert exc_info.value.max_size == 244

    @pytest.mark.parametrize("length", [0, 1, 255, 257, 512])
    def test_ciphertext_wrong_length(
        self, ops: RSAOperations, private_key: Any, length: int
    ) -> None:
        with pytest.raises(CipherTextLengthNotSatisfiedError) as exc_info:
            ops.decrypt(b"\x00" * length, private_key, RSA1_5)

        assert exc_info.value.actual_size == length
        assert exc_info.value.expected_size == 256

    def test_plaintext_checked_before_delegation(self) -> None:
        provider = FakeProvider(block_size=64)
        ops = RSAOperations(provider)

        with pytest.raises(PlainTextLengthNotSatisfiedError):
            ops.encrypt(b"a" * 53, object(), RSA1_5)

        assert not provider.called("encrypt_data")

    def test_ciphertext_checked_before_delegation(self) -> None:
        provider = FakeProvider(block_size=64)
        ops = RSAOperations(provider)

        with pytest.raises(CipherTextLengthNotSatisfiedError):
            ops.decrypt(b"\x00" * 63, object(), RSA1_5)

        assert not provider.called("decrypt_data")


# ==============================================================================
# TEST: VERIFY OUTCOMES
# ==============================================================================


class TestVerifyOutcomes:
    """verify различает "подпись неверна" и "проверку нельзя выполнить"."""

    def test_flipped_bit_returns_false(
        self, ops: RSAOperations, private_key: Any, public_key: Any
    ) -> None:
        signature = bytearray(ops.sign(b"payload", private_key, RS512))
        signature[17] ^= 0x01

        assert ops.verify(b"payload", bytes(signature), public_key, RS512) is False

    @pytest.mark.parametrize(
        "mangle",
        [
            lambda sig: sig[:-1],
            lambda sig: b"",
            lambda sig: sig + b"\x00",
        ],
        ids=["truncated", "empty", "over-long"],
    )
    def test_malformed_signature_raises(
        self, ops: RSAOperations, private_key: Any, public_key: Any, mangle: Any
    ) -> None:
        """Подпись не в один блок ключа: проверку выполнить нельзя."""
        signature = mangle(ops.sign(b"payload", private_key, RS512))

        with pytest.raises(VerifyingFailedError) as exc_info:
            ops.verify(b"payload", signature, public_key, RS512)

        assert "does not match key size 256" in exc_info.value.description

    def test_provider_mismatch_returns_false(self) -> None:
        ops = RSAOperations(FakeProvider(result=False))
        assert ops.verify(b"data", b"sig", object(), RS512) is False

    def test_provider_match_returns_true(self) -> None:
        ops = RSAOperations(FakeProvider(result=True))
        assert ops.verify(b"data", b"sig", object(), RS512) is True

    def test_fault_with_description_raises(self) -> None:
        ops = RSAOperations(FakeProvider(fault=PrimitiveFault("malformed signature")))

        with pytest.raises(VerifyingFailedError) as exc_info:
            ops.verify(b"data", b"sig", object(), RS512)

        assert exc_info.value.description == "malformed signature"
        assert exc_info.value.algorithm == "RS512"

    def test_fault_without_description_still_raises(self) -> None:
        """Сбой без описания: это ошибка, а не False."""
        ops = RSAOperations(FakeProvider(fault=PrimitiveFault()))

        with pytest.raises(VerifyingFailedError) as exc_info:
            ops.verify(b"data", b"sig", object(), RS512)

        assert exc_info.value.description == NO_DESCRIPTION_AVAILABLE


# ==============================================================================
# TEST: UNSUPPORTED ALGORITHMS
# ==============================================================================


class TestAlgorithmNotSupported:
    """AlgorithmNotSupportedError для всех четырёх операций."""

    def test_sign_unmapped_algorithm(self, ops: RSAOperations, private_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError) as exc_info:
            ops.sign(b"data", private_key, FutureSignatureAlgorithm.PS256)  # type: ignore[arg-type]
        assert exc_info.value.operation == "sign"
        assert exc_info.value.algorithm == "PS256"

    def test_verify_unmapped_algorithm(self, ops: RSAOperations, public_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.verify(b"data", b"sig", public_key, FutureSignatureAlgorithm.PS256)  # type: ignore[arg-type]

    def test_encrypt_unmapped_algorithm(self, ops: RSAOperations, public_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.encrypt(b"data", public_key, FutureKeyAlgorithm.RSA_OAEP_256)  # type: ignore[arg-type]

    def test_decrypt_unmapped_algorithm(self, ops: RSAOperations, private_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.decrypt(b"\x00" * 256, private_key, FutureKeyAlgorithm.RSA_OAEP_256)  # type: ignore[arg-type]

    def test_cross_family_algorithm_rejected(self, ops: RSAOperations, public_key: Any) -> None:
        """Алгоритм подписи не может использоваться для шифрования."""
        with pytest.raises(AlgorithmNotSupportedError):
            ops.encrypt(b"data", public_key, RS512)  # type: ignore[arg-type]

    def test_plain_string_rejected(self, ops: RSAOperations, private_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.sign(b"data", private_key, "RS512")  # type: ignore[arg-type]

    def test_sign_with_public_key(self, ops: RSAOperations, public_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.sign(b"data", public_key, RS512)

    def test_verify_with_private_key(self, ops: RSAOperations, private_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.verify(b"data", b"\x00" * 256, private_key, RS512)

    def test_encrypt_with_private_key(self, ops: RSAOperations, private_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.encrypt(b"data", private_key, RSA1_5)

    def test_decrypt_with_public_key(self, ops: RSAOperations, public_key: Any) -> None:
        with pytest.raises(AlgorithmNotSupportedError):
            ops.decrypt(b"\x00" * 256, public_key, RSA1_5)

    @pytest.mark.parametrize(
        "call",
        [
            lambda ops: ops.sign(b"d", object(), RS512),
            lambda ops: ops.verify(b"d", b"s", object(), RS512),
            lambda ops: ops.encrypt(b"d", object(), RSA1_5),
            lambda ops: ops.decrypt(b"d" * 64, object(), RSA1_5),
        ],
    )
    def test_capability_rejected_no_delegation(self, call: Any) -> None:
        provider = FakeProvider(supported=False)

        with pytest.raises(AlgorithmNotSupportedError):
            call(RSAOperations(provider))

        assert [name for name, _ in provider.calls] == ["is_algorithm_supported"]

    def test_capability_query_fault(self) -> None:
        provider = FakeProvider(capability_fault=RuntimeError("enclave locked"))

        with pytest.raises(AlgorithmNotSupportedError) as exc_info:
            RSAOperations(provider).sign(b"data", object(), RS512)

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_capability_query_receives_operation_and_scheme(self) -> None:
        provider = FakeProvider()
        key = object()

        RSAOperations(provider).sign(b"data", key, RS512)

        name, args = provider.calls[0]
        assert name == "is_algorithm_supported"
        assert args == (key, OperationKind.SIGN, SchemeId.RSA_SIGNATURE_MESSAGE_PKCS1V15_SHA512)


# ==============================================================================
# TEST: PROVIDER FAULTS
# ==============================================================================


class TestProviderFaults:
    """Перевод сбоев провайдера в закрытую таксономию ошибок."""

    def test_signing_failed_with_description(self) -> None:
        fault = PrimitiveFault("key too small")
        ops = RSAOperations(FakeProvider(fault=fault))

        with pytest.raises(SigningFailedError) as exc_info:
            ops.sign(b"data", object(), RS512)

        assert exc_info.value.description == "key too small"
        assert exc_info.value.__cause__ is fault

    def test_signing_failed_without_description(self) -> None:
        ops = RSAOperations(FakeProvider(fault=PrimitiveFault()))

        with pytest.raises(SigningFailedError) as exc_info:
            ops.sign(b"data", object(), RS512)

        assert exc_info.value.description == NO_DESCRIPTION_AVAILABLE

    def test_encrypting_failed(self) -> None:
        ops = RSAOperations(FakeProvider(fault=PrimitiveFault("bad key")))

        with pytest.raises(EncryptingFailedError) as exc_info:
            ops.encrypt(b"data", object(), RSA1_5)

        assert exc_info.value.description == "bad key"

    def test_decrypting_failed(self) -> None:
        ops = RSAOperations(FakeProvider(fault=PrimitiveFault("padding error")))

        with pytest.raises(DecryptingFailedError) as exc_info:
            ops.decrypt(b"\x00" * 64, object(), RSA1_5)

        assert exc_info.value.description == "padding error"

    def test_foreign_exception_is_wrapped(self) -> None:
        """Сырое исключение провайдера не пересекает границу фасада."""
        ops = RSAOperations(FakeProvider(fault=RuntimeError("native error -50")))

        with pytest.raises(SigningFailedError) as exc_info:
            ops.sign(b"data", object(), RS512)

        assert exc_info.value.description == "native error -50"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_block_size_fault_wrapped(self) -> None:
        ops = RSAOperations(FakeProvider(block_size_fault=PrimitiveFault("no modulus")))

        with pytest.raises(EncryptingFailedError):
            ops.encrypt(b"data", object(), RSA1_5)

    def test_custom_missing_description(self) -> None:
        ops = RSAOperations(
            FakeProvider(fault=PrimitiveFault()), missing_description="n/a"
        )

        with pytest.raises(DecryptingFailedError) as exc_info:
            ops.decrypt(b"\x00" * 64, object(), RSA1_5)

        assert exc_info.value.description == "n/a"

    def test_output_returned_verbatim(self) -> None:
        output = b"\xde\xad\xbe\xef" * 16
        ops = RSAOperations(FakeProvider(result=output))

        assert ops.sign(b"data", object(), RS512) is output
        assert ops.encrypt(b"data", object(), RSA1_5) is output
        assert ops.decrypt(b"\x00" * 64, object(), RSA1_5) is output

    def test_input_passed_verbatim(self) -> None:
        provider = FakeProvider()
        key = object()

        RSAOperations(provider).encrypt(b"secret", key, RSA1_5)

        assert ("encrypt_data", (key, SchemeId.RSA_ENCRYPTION_PKCS1, b"secret")) in provider.calls


# ==============================================================================
# TEST: INPUT VALIDATION
# ==============================================================================


class TestInputValidation:
    """Валидация типов входных данных."""

    def test_provider_must_implement_protocol(self) -> None:
        with pytest.raises(TypeError):
            RSAOperations(object())  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", ["text", 123, None, bytearray(b"data")])
    def test_sign_rejects_non_bytes(self, value: Any) -> None:
        provider = FakeProvider()
        with pytest.raises(TypeError):
            RSAOperations(provider).sign(value, object(), RS512)
        assert provider.calls == []

    def test_verify_rejects_non_bytes_signature(self) -> None:
        with pytest.raises(TypeError):
            RSAOperations(FakeProvider()).verify(b"data", "sig", object(), RS512)  # type: ignore[arg-type]

    def test_encrypt_rejects_non_bytes(self) -> None:
        with pytest.raises(TypeError):
            RSAOperations(FakeProvider()).encrypt("hello", object(), RSA1_5)  # type: ignore[arg-type]

    def test_decrypt_rejects_non_bytes(self) -> None:
        with pytest.raises(TypeError):
            RSAOperations(FakeProvider()).decrypt([0] * 64, object(), RSA1_5)  # type: ignore[arg-type]


# ==============================================================================
# TEST: MODULE-LEVEL API
# ==============================================================================


class TestModuleLevelAPI:
    """Функции sign/verify/encrypt/decrypt уровня модуля."""

    def test_default_provider_round_trip(self, private_key: Any, public_key: Any) -> None:
        signature = sign(b"data", private_key, RS512)
        assert verify(b"data", signature, public_key, RS512) is True

        ciphertext = encrypt(b"hello", public_key, RSA1_5)
        assert decrypt(ciphertext, private_key, RSA1_5) == b"hello"

    def test_explicit_provider(self) -> None:
        provider = FakeProvider(result=True)

        assert verify(b"data", b"sig", object(), RS512, provider=provider) is True
        assert provider.called("verify_signature")

    def test_from_config(self, private_key: Any, public_key: Any) -> None:
        ops = RSAOperations.from_config(RSAConfig())

        assert isinstance(ops.provider, CryptographyProvider)
        assert ops.verify(b"x", ops.sign(b"x", private_key, RS512), public_key, RS512)

    def test_concurrent_calls(self, private_key: Any, public_key: Any) -> None:
        """Операции без состояния: параллельные вызовы не мешают друг другу."""
        from concurrent.futures import ThreadPoolExecutor

        ops = RSAOperations(CryptographyProvider())
        messages = [f"message-{i}".encode() for i in range(8)]

        with ThreadPoolExecutor(max_workers=4) as pool:
            signatures = list(pool.map(lambda m: ops.sign(m, private_key, RS512), messages))

        results: Dict[bytes, bool] = {
            m: ops.verify(m, s, public_key, RS512) for m, s in zip(messages, signatures)
        }
        assert all(results.values())


# ==============================================================================
# TEST: LOGGING
# ==============================================================================


class TestLogging:
    """Логи содержат длины и имена алгоритмов, но не данные."""

    def test_no_plaintext_in_logs(
        self,
        ops: RSAOperations,
        private_key: Any,
        public_key: Any,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        secret = b"TOP-SECRET-CONTENT"
        with caplog.at_level(logging.DEBUG, logger="jose_rsa"):
            ciphertext = ops.encrypt(secret, public_key, RSA1_5)
            ops.decrypt(ciphertext, private_key, RSA1_5)

        assert "TOP-SECRET-CONTENT" not in caplog.text
        assert "RSA1_5" in caplog.text

    def test_precondition_rejection_logged(
        self, ops: RSAOperations, public_key: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="jose_rsa"):
            with pytest.raises(PlainTextLengthNotSatisfiedError):
                ops.encrypt(b"a" * 300, public_key, RSA1_5)

        assert any(record.levelno == logging.WARNING for record in caplog.records)
