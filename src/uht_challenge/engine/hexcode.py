"""Hex fingerprints of trait selections."""

from typing import AbstractSet, Set

from uht_challenge.catalog.traits import TraitCatalog

NIBBLE = 4
HEX_DIGITS = "0123456789ABCDEF"


def encode_selection(selected: AbstractSet[str], catalog: TraitCatalog) -> str:
    """
    Encode a trait selection as an uppercase hex string.

    Bit i is set when the i-th catalog trait is selected, first trait most
    significant. Bits are grouped into nibbles left to right and the last
    nibble is zero-padded on the right.

    Args:
        selected: Names of selected traits (names outside the catalog are ignored)
        catalog: Trait catalog defining the bit order

    Returns:
        Hex string of length ceil(len(catalog) / 4)
    """
    bits = "".join("1" if name in selected else "0" for name in catalog.get_names())
    if len(bits) % NIBBLE:
        bits += "0" * (NIBBLE - len(bits) % NIBBLE)

    return "".join(
        HEX_DIGITS[int(bits[i:i + NIBBLE], 2)] for i in range(0, len(bits), NIBBLE)
    )


def decode_selection(code: str, catalog: TraitCatalog) -> Set[str]:
    """
    Decode a hex string back into the set of selected trait names.

    Padding bits past the end of the catalog are ignored.

    Raises:
        ValueError: If the code has the wrong length or is not hexadecimal
    """
    names = catalog.get_names()
    expected_length = -(-len(names) // NIBBLE)
    if len(code) != expected_length:
        raise ValueError(
            f"Hex code must be {expected_length} characters for a "
            f"{len(names)}-trait catalog, got {len(code)}"
        )

    code = code.upper()
    if any(digit not in HEX_DIGITS for digit in code):
        raise ValueError(f"Invalid hex code: {code!r}")

    bits = "".join(format(HEX_DIGITS.index(digit), "04b") for digit in code)
    return {name for name, bit in zip(names, bits) if bit == "1"}
