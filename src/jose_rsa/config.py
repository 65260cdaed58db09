# -*- coding: utf-8 -*-
"""
RU: Конфигурация RSA-слоя: выбор провайдера примитивов по профилю.
EN: RSA layer configuration: primitive provider selection by profile.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

from jose_rsa.core.exceptions import NO_DESCRIPTION_AVAILABLE
from jose_rsa.core.protocols import PrimitiveProvider
from jose_rsa.providers.cryptography_provider import CryptographyProvider


class ProviderProfile(str, Enum):
    """Predefined primitive provider backends."""

    # pyca/cryptography (OpenSSL), default
    CRYPTOGRAPHY = "cryptography"


@dataclass(frozen=True)
class RSAConfig:
    """
    RSA layer configuration.

    Attributes:
        provider_profile: Backend used to build the default provider.
        missing_description: Text reported when a provider fault carries
            no diagnostic.

    Examples:
        >>> config = RSAConfig.from_profile(ProviderProfile.CRYPTOGRAPHY)
        >>> config.missing_description
        'No description available.'

        >>> provider = RSAConfig().create_provider()
    """

    provider_profile: ProviderProfile = ProviderProfile.CRYPTOGRAPHY
    missing_description: str = NO_DESCRIPTION_AVAILABLE

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not isinstance(self.provider_profile, ProviderProfile):
            raise ValueError(
                f"provider_profile must be ProviderProfile, "
                f"got {type(self.provider_profile).__name__}"
            )
        if not self.missing_description or not self.missing_description.strip():
            raise ValueError("missing_description must not be empty")

    @staticmethod
    def from_profile(profile: ProviderProfile) -> "RSAConfig":
        """
        Create configuration from predefined profile.

        Args:
            profile: Provider backend.

        Returns:
            RSAConfig instance.
        """
        return _PROFILE_PARAMS[profile]

    def create_provider(self) -> PrimitiveProvider:
        """Instantiate the primitive provider for this profile."""
        return _PROVIDER_FACTORIES[self.provider_profile]()


_PROVIDER_FACTORIES: Final[dict[ProviderProfile, Callable[[], PrimitiveProvider]]] = {
    ProviderProfile.CRYPTOGRAPHY: CryptographyProvider,
}

# Predefined profiles
_PROFILE_PARAMS: Final[dict[ProviderProfile, RSAConfig]] = {
    ProviderProfile.CRYPTOGRAPHY: RSAConfig(
        provider_profile=ProviderProfile.CRYPTOGRAPHY,
    ),
}


__all__ = [
    "ProviderProfile",
    "RSAConfig",
]
