"""Identifier casing normalization used for `{@code}` samples."""

from apexdocpy.casing.casing import (
    CodeNormalizer,
    normalize_annotation_name,
    normalize_code_casing,
    normalize_type_name,
)
from apexdocpy.casing.refs import APEX_ANNOTATIONS, PRIMITIVE_AND_COLLECTION_TYPES

__all__ = [
    "APEX_ANNOTATIONS",
    "PRIMITIVE_AND_COLLECTION_TYPES",
    "CodeNormalizer",
    "normalize_annotation_name",
    "normalize_code_casing",
    "normalize_type_name",
]
