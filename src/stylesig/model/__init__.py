"""stylesig model layer -- collaborator value types."""

from stylesig.model.sname import SName
from stylesig.model.stereotype import Stereostyles, Stereotype
from stylesig.model.style import Style
from stylesig.model.url import Url

__all__ = [
    "SName",
    "Stereotype",
    "Stereostyles",
    "Style",
    "Url",
]
