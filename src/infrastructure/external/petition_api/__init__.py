"""英国議会請願サイトAPIクライアントパッケージ."""

from .client import PetitionApiClient, PetitionApiError
from .service import PetitionDataSourceServiceImpl
from .types import ConstituencySignatureRecord, PetitionRecord


__all__ = [
    "ConstituencySignatureRecord",
    "PetitionApiClient",
    "PetitionApiError",
    "PetitionDataSourceServiceImpl",
    "PetitionRecord",
]
