"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of radixnum: word
type descriptions, segmented number arithmetic and the JSON contract
validators for arithmetic scenarios.
"""
