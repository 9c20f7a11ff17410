"""fields package.

This package provides the encoding of texts as field elements.

Modules:
    - field_encoder: Maps byte sequences to sequences of field elements, one element per byte, and allocates the
    circuit wires holding them.

Usage example:
    >>> from zkcontains.fields.field_encoder import field_elements_to_bytes, string_to_field_elements
    >>> elements = string_to_field_elements("plonky2")
    >>> field_elements_to_bytes(elements)
    b'plonky2'
"""
