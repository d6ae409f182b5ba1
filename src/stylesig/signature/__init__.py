from stylesig.signature.errors import InvalidTokenError
from stylesig.signature.normalize import STAR, normalize, normalize_name
from stylesig.signature.depth import parse_depth
from stylesig.signature.cache import MatchCache
from stylesig.signature.signatures import SignatureList
from stylesig.signature.signature import Signature, matches

__all__ = [
    "InvalidTokenError",
    "STAR",
    "normalize",
    "normalize_name",
    "parse_depth",
    "MatchCache",
    "SignatureList",
    "Signature",
    "matches",
]
