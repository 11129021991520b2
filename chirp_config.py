"""Settings for the CHIRP formatter.

The module-level constants are the defaults; `ChirpConfig` bundles them into a
frozen object that gets passed to the shortener and the row normalizer.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

CHIRP_HEADERS = (
    "Location",
    "Name",
    "Frequency",
    "Duplex",
    "Offset",
    "Tone",
    "rToneFreq",
    "cToneFreq",
    "DtcsCode",
    "DtcsPolarity",
    "Mode",
    "TStep",
    "Skip",
    "Comment",
)

# Order matters: each pair is applied to the result of the previous ones.
DEFAULT_SUBSTITUTIONS = (
    ("Hudson Valley", "HudVal"),
    ("Orange County", "OrngCo"),
    ("New York", "NY"),
    ("Beacon", "Beacn"),
    ("Cornwall", "Cornw"),
    ("Dispatch", "Disp"),
    ("Repeater", "Rpt"),
    ("Fireground", "FG"),
    ("Command", "Cmd"),
    ("Emergency", "Emerg"),
    ("Operations", "Ops"),
    ("Tactical", "Tac"),
    ("Department", "Dept"),
    ("Public Safety", "PS"),
    ("Paging", "Pgng"),
    ("Simplex", "Smplx"),
    ("Highway", "Hwy"),
)

NAME_LIMIT = 10
SHORT_NAME_LIMIT = 8
NAME_LIMITS = (SHORT_NAME_LIMIT, NAME_LIMIT)

LISTEN_ONLY_MARKER = "listen only"
LISTEN_ONLY_PREFIX = "!"

VALID_TONES = ("Tone", "TSQL", "DTCS", "Cross")
DEFAULT_TSTEP = "5.00"
DEFAULT_OFFSET = "0.000"

INPUT_FIELDS = (
    "region",
    "location",
    "name",
    "frequency",
    "duplex",
    "offset",
    "tone",
    "mode",
    "type",
    "tag",
    "notes",
)

DEFAULT_INPUT_PATH = "frequencies.csv"
DEFAULT_OUTPUT_PATH = "chirp_formatted.csv"


@dataclass(frozen=True)
class ChirpConfig:
    name_limit: int = NAME_LIMIT
    substitutions: Tuple[Tuple[str, str], ...] = DEFAULT_SUBSTITUTIONS
    listen_only_marker: str = LISTEN_ONLY_MARKER
    listen_only_prefix: str = LISTEN_ONLY_PREFIX
    headers: Tuple[str, ...] = CHIRP_HEADERS
    valid_tones: Tuple[str, ...] = VALID_TONES
    tstep: str = DEFAULT_TSTEP
    default_offset: str = DEFAULT_OFFSET

    def __post_init__(self):
        if self.name_limit < 1:
            raise ValueError(f"name_limit must be positive, got {self.name_limit}")
        # accept a dict or any iterable of pairs but store it as tuples
        subs = self.substitutions
        if isinstance(subs, dict):
            subs = subs.items()
        object.__setattr__(self, "substitutions", tuple((str(k), str(v)) for k, v in subs))

    def with_name_limit(self, limit: int) -> "ChirpConfig":
        return replace(self, name_limit=limit)


DEFAULT_CONFIG = ChirpConfig()
