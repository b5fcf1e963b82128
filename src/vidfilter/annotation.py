"""Annotation parser — the optional `(category:specifier)` justification."""

from dataclasses import dataclass

from .errors import AnnotationFormatError


@dataclass(frozen=True)
class Annotation:
    category: str = ""
    specifier: str = ""

    def __bool__(self) -> bool:
        return bool(self.category or self.specifier)

    def __str__(self) -> str:
        if self.specifier:
            return f"{self.category}:{self.specifier}"
        return self.category


def parse_annotation(text: str) -> Annotation:
    """Split 'category[:specifier]' into an Annotation.

    No vocabulary check is done on either part.

    Raises:
        AnnotationFormatError: More than one ':' separator.
    """
    text = text.strip()
    if not text:
        return Annotation()

    parts = text.split(":")
    if len(parts) == 1:
        return Annotation(category=parts[0].strip())
    if len(parts) == 2:
        return Annotation(category=parts[0].strip(), specifier=parts[1].strip())
    raise AnnotationFormatError(f"bad annotation format '{text}'")
