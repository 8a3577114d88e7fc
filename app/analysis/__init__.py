from .assembler import assemble
from .lists import extract_items
from .response import split_response
from .scores import extract_category_score, extract_overall_score
from .sections import extract_section

__all__ = [
    "assemble",
    "extract_section",
    "extract_items",
    "extract_overall_score",
    "extract_category_score",
    "split_response",
]
