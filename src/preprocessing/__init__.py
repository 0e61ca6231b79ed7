"""
Pattern preprocessing tables for KMP and Boyer-Moore.

Tables are built once per pattern and never modified afterwards.
"""

from .bad_character import BadCharacterTable, build_bad_character_table
from .good_suffix import GoodSuffixTable, build_good_suffix_table
from .lps import LPSTable, build_lps

__all__ = [
    "BadCharacterTable",
    "GoodSuffixTable",
    "LPSTable",
    "build_bad_character_table",
    "build_good_suffix_table",
    "build_lps",
]
