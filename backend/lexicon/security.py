"""
Hachage des mots de passe via passlib.

pbkdf2_sha256 : salé, coûteux en calcul, vérification à temps constant.
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

# Hash de référence pour les utilisateurs inconnus : la vérification coûte
# alors autant qu'avec un vrai compte.
_DUMMY_HASH = pwd_context.hash("lexicon-dummy-password")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        # Hash illisible en base : traité comme un échec de vérification.
        return False


def dummy_verify(plain_password: str) -> None:
    pwd_context.verify(plain_password, _DUMMY_HASH)
