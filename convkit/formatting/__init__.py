"""
ConvKit Formatting Utilities

Stateless leaf functions for rendering numbers and re-casing strings.
"""

from convkit.formatting.numbers import (
    number_with_commas,
    to_binary,
    to_binary_string,
    to_hex,
    to_hex_string,
    to_octal,
    to_octal_string,
    to_decimal,
    to_degrees,
    to_radians,
    convert_base,
    to_percentage,
    to_percentage_string,
    round_number,
    round_to,
)

from convkit.formatting.strings import (
    to_camel_case,
    to_snake_case,
    to_pascal_case,
    to_kebab_case,
    to_capitalized_case,
    to_title_case,
    to_sentence_case,
    to_constant_case,
    to_path_case,
    to_dot_case,
    to_alternating_case,
    to_inverse_case,
    reverse_string,
    to_leet_speak,
    shuffle_string,
)

__all__ = [
    # Numbers
    "number_with_commas",
    "to_binary",
    "to_binary_string",
    "to_hex",
    "to_hex_string",
    "to_octal",
    "to_octal_string",
    "to_decimal",
    "to_degrees",
    "to_radians",
    "convert_base",
    "to_percentage",
    "to_percentage_string",
    "round_number",
    "round_to",
    # Strings
    "to_camel_case",
    "to_snake_case",
    "to_pascal_case",
    "to_kebab_case",
    "to_capitalized_case",
    "to_title_case",
    "to_sentence_case",
    "to_constant_case",
    "to_path_case",
    "to_dot_case",
    "to_alternating_case",
    "to_inverse_case",
    "reverse_string",
    "to_leet_speak",
    "shuffle_string",
]
