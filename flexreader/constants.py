"""
Constants configuration for file reading.

This module contains configurable constants used throughout the reader,
particularly for flattening nested JSON objects into flat column paths and
rendering values as strings.
"""

# Delimiter for joining nested object keys into a header path
# Example: {"bank": {"account": "123"}} yields the header "bank.account"
NESTED_KEY_DELIMITER = "."

# Separators used when an array is rendered back into a single field
# Example: ["dog", "cat"] becomes '["dog","cat"]'
JSON_COMPACT_SEPARATORS = (",", ":")

# String renderings for JSON/Parquet booleans and nulls
TRUE_TEXT = "true"
FALSE_TEXT = "false"
NULL_TEXT = "null"

# Decimal point positions between which floats are written without an exponent
# Example: 1e15 renders as "1000000000000000.0", 1e16 as "1e16", 1e-5 as "0.00001"
DECIMAL_NOTATION_MAX_EXPONENT = 16
DECIMAL_NOTATION_MIN_EXPONENT = -5

# File extensions recognised by the encoding detector
DELIMITED_EXTENSIONS = (".csv", ".tsv")
JSON_EXTENSION = ".json"
PARQUET_EXTENSION = ".parquet"

# Text encoding for JSON sources; a leading BOM is tolerated
TEXT_ENCODING = "utf-8-sig"

"""
Rendering Rationale:

NESTED_KEY_DELIMITER ("."):
- Matches the dotted-path convention of most JSON tooling
- Only object nesting produces paths; arrays stay a single field

TRUE_TEXT / FALSE_TEXT / NULL_TEXT:
- JSON literal spelling, so a rendered record reads back as JSON scalars
- Shared by the JSON and Parquet renderers so both agree on the same values

DECIMAL_NOTATION_MAX_EXPONENT / DECIMAL_NOTATION_MIN_EXPONENT:
- Shortest round-tripping digits, with an exponent only outside this window
- Exponents carry no "+" sign or zero padding ("1e20", "1.5e-7")
"""
