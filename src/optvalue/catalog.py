"""
Catalog — плоский каталог конверсий по каждому скалярному kind

Для каждого kind <k> доступны:
- <k>_to_optional:            значение → Box
- <k>_from_optional:          Box | None → значение (zero value для None)
- <k>_to_optional_sequence:   список значений → список Box
- <k>_from_optional_sequence: список Box | None → список значений
- <k>_to_optional_mapping:    dict[str, значение] → dict[str, Box]
- <k>_from_optional_mapping:  dict[str, Box | None] → dict[str, значение]

Пример:
    >>> string_from_optional_sequence([string_to_optional("x"), None])
    ['x', '']
"""

from src.optvalue.kinds import (
    BOOL,
    BYTE,
    COMPLEX64,
    COMPLEX128,
    DURATION,
    FLOAT32,
    FLOAT64,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    RUNE,
    STRING,
    TIME,
    UINT,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
)


# =============================================================================
# БУЛЕВЫ
# =============================================================================

bool_to_optional = BOOL.to_optional
bool_from_optional = BOOL.from_optional
bool_to_optional_sequence = BOOL.to_optional_sequence
bool_from_optional_sequence = BOOL.from_optional_sequence
bool_to_optional_mapping = BOOL.to_optional_mapping
bool_from_optional_mapping = BOOL.from_optional_mapping


# =============================================================================
# БАЙТЫ
# =============================================================================

byte_to_optional = BYTE.to_optional
byte_from_optional = BYTE.from_optional
byte_to_optional_sequence = BYTE.to_optional_sequence
byte_from_optional_sequence = BYTE.from_optional_sequence
byte_to_optional_mapping = BYTE.to_optional_mapping
byte_from_optional_mapping = BYTE.from_optional_mapping


# =============================================================================
# UNICODE CODEPOINTS
# =============================================================================

rune_to_optional = RUNE.to_optional
rune_from_optional = RUNE.from_optional
rune_to_optional_sequence = RUNE.to_optional_sequence
rune_from_optional_sequence = RUNE.from_optional_sequence
rune_to_optional_mapping = RUNE.to_optional_mapping
rune_from_optional_mapping = RUNE.from_optional_mapping


# =============================================================================
# ЗНАКОВЫЕ ЦЕЛЫЕ
# =============================================================================

int_to_optional = INT.to_optional
int_from_optional = INT.from_optional
int_to_optional_sequence = INT.to_optional_sequence
int_from_optional_sequence = INT.from_optional_sequence
int_to_optional_mapping = INT.to_optional_mapping
int_from_optional_mapping = INT.from_optional_mapping

int8_to_optional = INT8.to_optional
int8_from_optional = INT8.from_optional
int8_to_optional_sequence = INT8.to_optional_sequence
int8_from_optional_sequence = INT8.from_optional_sequence
int8_to_optional_mapping = INT8.to_optional_mapping
int8_from_optional_mapping = INT8.from_optional_mapping

int16_to_optional = INT16.to_optional
int16_from_optional = INT16.from_optional
int16_to_optional_sequence = INT16.to_optional_sequence
int16_from_optional_sequence = INT16.from_optional_sequence
int16_to_optional_mapping = INT16.to_optional_mapping
int16_from_optional_mapping = INT16.from_optional_mapping

int32_to_optional = INT32.to_optional
int32_from_optional = INT32.from_optional
int32_to_optional_sequence = INT32.to_optional_sequence
int32_from_optional_sequence = INT32.from_optional_sequence
int32_to_optional_mapping = INT32.to_optional_mapping
int32_from_optional_mapping = INT32.from_optional_mapping

int64_to_optional = INT64.to_optional
int64_from_optional = INT64.from_optional
int64_to_optional_sequence = INT64.to_optional_sequence
int64_from_optional_sequence = INT64.from_optional_sequence
int64_to_optional_mapping = INT64.to_optional_mapping
int64_from_optional_mapping = INT64.from_optional_mapping


# =============================================================================
# БЕЗЗНАКОВЫЕ ЦЕЛЫЕ
# =============================================================================

uint_to_optional = UINT.to_optional
uint_from_optional = UINT.from_optional
uint_to_optional_sequence = UINT.to_optional_sequence
uint_from_optional_sequence = UINT.from_optional_sequence
uint_to_optional_mapping = UINT.to_optional_mapping
uint_from_optional_mapping = UINT.from_optional_mapping

uint8_to_optional = UINT8.to_optional
uint8_from_optional = UINT8.from_optional
uint8_to_optional_sequence = UINT8.to_optional_sequence
uint8_from_optional_sequence = UINT8.from_optional_sequence
uint8_to_optional_mapping = UINT8.to_optional_mapping
uint8_from_optional_mapping = UINT8.from_optional_mapping

uint16_to_optional = UINT16.to_optional
uint16_from_optional = UINT16.from_optional
uint16_to_optional_sequence = UINT16.to_optional_sequence
uint16_from_optional_sequence = UINT16.from_optional_sequence
uint16_to_optional_mapping = UINT16.to_optional_mapping
uint16_from_optional_mapping = UINT16.from_optional_mapping

uint32_to_optional = UINT32.to_optional
uint32_from_optional = UINT32.from_optional
uint32_to_optional_sequence = UINT32.to_optional_sequence
uint32_from_optional_sequence = UINT32.from_optional_sequence
uint32_to_optional_mapping = UINT32.to_optional_mapping
uint32_from_optional_mapping = UINT32.from_optional_mapping

uint64_to_optional = UINT64.to_optional
uint64_from_optional = UINT64.from_optional
uint64_to_optional_sequence = UINT64.to_optional_sequence
uint64_from_optional_sequence = UINT64.from_optional_sequence
uint64_to_optional_mapping = UINT64.to_optional_mapping
uint64_from_optional_mapping = UINT64.from_optional_mapping


# =============================================================================
# FLOAT
# =============================================================================

float32_to_optional = FLOAT32.to_optional
float32_from_optional = FLOAT32.from_optional
float32_to_optional_sequence = FLOAT32.to_optional_sequence
float32_from_optional_sequence = FLOAT32.from_optional_sequence
float32_to_optional_mapping = FLOAT32.to_optional_mapping
float32_from_optional_mapping = FLOAT32.from_optional_mapping

float64_to_optional = FLOAT64.to_optional
float64_from_optional = FLOAT64.from_optional
float64_to_optional_sequence = FLOAT64.to_optional_sequence
float64_from_optional_sequence = FLOAT64.from_optional_sequence
float64_to_optional_mapping = FLOAT64.to_optional_mapping
float64_from_optional_mapping = FLOAT64.from_optional_mapping


# =============================================================================
# COMPLEX
# =============================================================================

complex64_to_optional = COMPLEX64.to_optional
complex64_from_optional = COMPLEX64.from_optional
complex64_to_optional_sequence = COMPLEX64.to_optional_sequence
complex64_from_optional_sequence = COMPLEX64.from_optional_sequence
complex64_to_optional_mapping = COMPLEX64.to_optional_mapping
complex64_from_optional_mapping = COMPLEX64.from_optional_mapping

complex128_to_optional = COMPLEX128.to_optional
complex128_from_optional = COMPLEX128.from_optional
complex128_to_optional_sequence = COMPLEX128.to_optional_sequence
complex128_from_optional_sequence = COMPLEX128.from_optional_sequence
complex128_to_optional_mapping = COMPLEX128.to_optional_mapping
complex128_from_optional_mapping = COMPLEX128.from_optional_mapping


# =============================================================================
# СТРОКИ
# =============================================================================

string_to_optional = STRING.to_optional
string_from_optional = STRING.from_optional
string_to_optional_sequence = STRING.to_optional_sequence
string_from_optional_sequence = STRING.from_optional_sequence
string_to_optional_mapping = STRING.to_optional_mapping
string_from_optional_mapping = STRING.from_optional_mapping


# =============================================================================
# ВРЕМЯ И ДЛИТЕЛЬНОСТЬ
# =============================================================================

time_to_optional = TIME.to_optional
time_from_optional = TIME.from_optional
time_to_optional_sequence = TIME.to_optional_sequence
time_from_optional_sequence = TIME.from_optional_sequence
time_to_optional_mapping = TIME.to_optional_mapping
time_from_optional_mapping = TIME.from_optional_mapping

duration_to_optional = DURATION.to_optional
duration_from_optional = DURATION.from_optional
duration_to_optional_sequence = DURATION.to_optional_sequence
duration_from_optional_sequence = DURATION.from_optional_sequence
duration_to_optional_mapping = DURATION.to_optional_mapping
duration_from_optional_mapping = DURATION.from_optional_mapping


__all__ = [
    f"{kind}_{op}"
    for kind in (
        "bool",
        "byte",
        "rune",
        "int",
        "int8",
        "int16",
        "int32",
        "int64",
        "uint",
        "uint8",
        "uint16",
        "uint32",
        "uint64",
        "float32",
        "float64",
        "complex64",
        "complex128",
        "string",
        "time",
        "duration",
    )
    for op in (
        "to_optional",
        "from_optional",
        "to_optional_sequence",
        "from_optional_sequence",
        "to_optional_mapping",
        "from_optional_mapping",
    )
]
