"""
Transformation options for fasta2tab.

Command-line flags are resolved once into an immutable TransformOptions
value. The precedence between overlapping flags (lowercase over uppercase,
reverse complement over reverse/complement, --gc over --bc) is settled here,
so the transformer only has to follow the resolved modes.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

SUBSEQ_PATTERN = re.compile(r"^(-?\d+)?,(-?\d+)?$")


class ConfigurationError(ValueError):
    """Raised when command-line options are invalid or contradictory."""


class CaseMode(str, Enum):
    """Case conversion applied to the sequence."""

    NONE = "none"
    LOWER = "lower"
    UPPER = "upper"


class OrientationMode(str, Enum):
    """How the sequence is reoriented."""

    INDEPENDENT = "independent"
    REVERSE_COMPLEMENT = "reverse_complement"


class ExtraColumnMode(str, Enum):
    """Which content columns follow the length columns."""

    NONE = "none"
    GC = "gc"
    BASE_CONTENTS = "base_contents"


@dataclass(frozen=True)
class SubseqRange:
    """1-based inclusive range; None means open on that side."""

    start: Optional[int] = None
    end: Optional[int] = None


def parse_subseq_range(token: str) -> SubseqRange:
    """
    Parse a --subseq argument such as "2,7", "-3," or ",-3".

    Args:
        token: Range string, "[-]INT?,[-]INT?"

    Returns:
        Parsed SubseqRange

    Raises:
        ConfigurationError: If the token is malformed, or both bounds are
            given and the end is less than the start
    """
    match = SUBSEQ_PATTERN.match(token.strip())
    if not match:
        raise ConfigurationError(
            f"invalid --subseq range {token!r}: expected START,END "
            f"with optional (possibly negative) integers, e.g. 2,7 or -3,"
        )

    start = int(match.group(1)) if match.group(1) is not None else None
    end = int(match.group(2)) if match.group(2) is not None else None

    if start is not None and end is not None and end < start:
        raise ConfigurationError(
            f"invalid --subseq range {token!r}: end ({end}) is before start ({start})"
        )

    return SubseqRange(start=start, end=end)


def split_base_content_specs(values: Optional[Iterable[str]]) -> tuple[str, ...]:
    """
    Flatten --bc arguments into individual base-set specs.

    "G,C" is two specs, "GC" is one. Empty items are ignored.

    Raises:
        ConfigurationError: If a --bc argument contains no base set at all
    """
    specs = []
    for value in values or []:
        parts = [part.strip() for part in value.split(",") if part.strip()]
        if not parts:
            raise ConfigurationError(f"invalid --bc value {value!r}: no bases given")
        specs.extend(parts)
    return tuple(specs)


@dataclass(frozen=True)
class TransformOptions:
    """
    Resolved, read-only configuration for the record transformer.

    Build it with from_flags() or from_args() rather than directly, so
    that flag precedence is applied consistently.
    """

    trim: bool = False
    subseq: Optional[SubseqRange] = None
    orientation: OrientationMode = OrientationMode.INDEPENDENT
    reverse: bool = False
    complement: bool = False
    case: CaseMode = CaseMode.NONE
    report_length: bool = False
    report_length2: bool = False
    extra_columns: ExtraColumnMode = ExtraColumnMode.NONE
    base_content_specs: tuple[str, ...] = ()
    content_digits: int = 2

    @classmethod
    def from_flags(
        cls,
        reverse: bool = False,
        complement: bool = False,
        reverse_complement: bool = False,
        subseq: Optional[str] = None,
        trim: bool = False,
        lowercase: bool = False,
        uppercase: bool = False,
        length: bool = False,
        length2: bool = False,
        base_contents: Optional[Iterable[str]] = None,
        gc: bool = False,
        content_digits: int = 2,
    ) -> "TransformOptions":
        """
        Resolve raw flag values into a TransformOptions.

        Raises:
            ConfigurationError: If --subseq or --bc is malformed
        """
        subseq_range = parse_subseq_range(subseq) if subseq is not None else None
        specs = split_base_content_specs(base_contents)

        if reverse_complement:
            orientation = OrientationMode.REVERSE_COMPLEMENT
            reverse = complement = False
        else:
            orientation = OrientationMode.INDEPENDENT

        if lowercase:
            case = CaseMode.LOWER
        elif uppercase:
            case = CaseMode.UPPER
        else:
            case = CaseMode.NONE

        if gc:
            extra_columns = ExtraColumnMode.GC
            specs = ()
        elif specs:
            extra_columns = ExtraColumnMode.BASE_CONTENTS
        else:
            extra_columns = ExtraColumnMode.NONE

        return cls(
            trim=trim,
            subseq=subseq_range,
            orientation=orientation,
            reverse=reverse,
            complement=complement,
            case=case,
            report_length=length,
            report_length2=length2,
            extra_columns=extra_columns,
            base_content_specs=specs,
            content_digits=content_digits,
        )

    @classmethod
    def from_args(cls, args, content_digits: int = 2) -> "TransformOptions":
        """Build options from an argparse namespace produced by fasta2tab."""
        return cls.from_flags(
            reverse=args.reverse,
            complement=args.complement,
            reverse_complement=args.reverse_complement,
            subseq=args.subseq,
            trim=args.trim,
            lowercase=args.lowercase,
            uppercase=args.uppercase,
            length=args.length,
            length2=args.length2,
            base_contents=args.base_contents,
            gc=args.gc,
            content_digits=content_digits,
        )
