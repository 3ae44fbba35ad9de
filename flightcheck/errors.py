"""Error kinds raised (or returned) while reading a flight manifest."""

from __future__ import annotations

from typing import Optional


class InstructionError(Exception):
    """Base class for problems tied to a single manifest line."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self.line_number = line_number


class ClassificationError(InstructionError):
    """The line does not start an `add <kind>` instruction."""

    def __init__(self, line_number: int):
        super().__init__(
            f"Invalid instruction line ({line_number}). Only 'add route|aircraft|general|airline|loyalty' "
            "are permitted as a valid instruction.",
            line_number,
        )


class FormatError(InstructionError):
    """The kind is recognised but its fields do not fit the expected layout."""

    def __init__(self, line_number: int, kind: str, expected: str):
        super().__init__(f"Invalid instruction line ({line_number}). {expected}", line_number)
        self.kind = kind


class DuplicateDefinitionError(InstructionError):
    def __init__(self, line_number: int, section: str):
        super().__init__(f"Line {line_number}. Flight {section} already defined.", line_number)
        self.section = section


class MissingDefinitionError(InstructionError):
    def __init__(self, section: str):
        super().__init__(f"Flight {section} not defined.")
        self.section = section
