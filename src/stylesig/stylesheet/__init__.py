from stylesig.stylesheet.errors import StyleSheetError
from stylesig.stylesheet.model import StyleRule, StyleSheet
from stylesig.stylesheet.parser import parse_style_sheet, selector_signature
from stylesig.stylesheet.builder import StyleBuilder

__all__ = [
    "StyleSheetError",
    "StyleRule",
    "StyleSheet",
    "parse_style_sheet",
    "selector_signature",
    "StyleBuilder",
]
