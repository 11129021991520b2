# chirp_formatter.py
# Reformat a frequency spreadsheet export into a CSV that CHIRP can import.
#
# Input (frequencies.csv) columns, in order:
#   Region,Location,Name,Frequency,Duplex,Offset,Tone,Mode,Type,Tag,Notes
# Lines are split on ',' with no quote handling, so fields must not contain
# commas. The first line is a header and is skipped.
#
# Output (chirp_formatted.csv) uses the CHIRP memory layout. Location is the
# memory slot and always runs 1..N in input order; the input's own Location
# column is ignored. Names are shortened to fit the radio display (see
# name_shortener.py) and listen-only channels are marked with '!'.
# Output fields are never quoted; a '"' inside a field is written as '\"'.


import re
import csv
import sys
import argparse
from decimal import Decimal, InvalidOperation

import pandas as pd

from chirp_config import (
    DEFAULT_CONFIG,
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    INPUT_FIELDS,
    NAME_LIMIT,
    NAME_LIMITS,
)
from name_shortener import is_listen_only, shorten_name

TONE_KEYWORDS = {
    'CTCSS': 'Tone',
    'TONE': 'Tone',
    'PL': 'Tone',
    'TSQL': 'TSQL',
    'DTCS': 'DTCS',
    'CROSS': 'Cross',
}


class MalformedRowError(ValueError):
    """A line that cannot be turned into a CHIRP row. Aborts the run."""

    def __init__(self, message, line_number=None):
        if line_number is not None:
            message = f'line {line_number}: {message}'
        super().__init__(message)
        self.line_number = line_number


def parse_decimal(value):
    """Parse `value` as a Decimal.

    Returns None when the value is missing, not a number, or not finite. A
    real zero comes back as Decimal('0'), so callers must compare against
    None rather than test truthiness.
    """
    if value is None:
        return None
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not d.is_finite():
        return None
    return d


def format_decimal(value, places, default=''):
    d = parse_decimal(value)
    if d is None:
        return default
    return f'{d:.{places}f}'


def parse_int(value, default=0):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def parse_tone(tone_text):
    """Map the spreadsheet's tone column to (Tone, rToneFreq, cToneFreq).

    'CTCSS', 'Tone' or 'PL' mean an encode tone; 'TSQL' means tone squelch.
    'DTCS' and 'Cross' are passed on without tone frequencies, since the
    DTCS code columns are left empty.
    A number in the field ('CTCSS 100.0', '88.5 Hz') is taken as the tone
    frequency, and a bare number implies 'Tone'. Anything else maps to
    'None', which normalize_row() later clears.
    """
    if not tone_text:
        return ('None', '', '')
    t = tone_text.strip()
    words = [w.upper() for w in re.findall(r'[A-Za-z]+', t) if w.upper() != 'HZ']
    m = re.search(r'([0-9]+\.?[0-9]*)', t)
    freq = m.group(1) if m else ''

    label = None
    for w in words:
        if w in TONE_KEYWORDS:
            label = TONE_KEYWORDS[w]
            break
    if label is None:
        label = 'Tone' if (freq and not words) else 'None'

    rtone = freq if label in ('Tone', 'TSQL') else ''
    ctone = freq if label == 'TSQL' else ''
    return (label, rtone, ctone)


def build_chirp_row(fields, slot, config=DEFAULT_CONFIG, line_number=None):
    """Turn one split input line into a candidate CHIRP row.

    Values are copied mostly as-is; normalize_row() does the coercion.
    """
    if len(fields) < len(INPUT_FIELDS):
        raise MalformedRowError(
            f'expected {len(INPUT_FIELDS)} fields, got {len(fields)}', line_number)
    # extra trailing fields are ignored
    record = dict(zip(INPUT_FIELDS, (f.strip() for f in fields)))

    tone, rtone, ctone = parse_tone(record['tone'])
    return {
        'Location': slot,
        'Name': shorten_name(record['name'], record['notes'], config),
        'Frequency': record['frequency'],
        'Duplex': record['duplex'],
        'Offset': record['offset'] or config.default_offset,
        'Tone': tone,
        'rToneFreq': rtone,
        'cToneFreq': ctone,
        'DtcsCode': '',
        'DtcsPolarity': '',
        'Mode': record['mode'],
        'TStep': config.tstep,
        'Skip': '',
        'Comment': record['notes'],
    }


def clamp_name(name, limit, listen_only=False, prefix='!'):
    # the listen-only prefix does not count against the limit
    if listen_only and prefix and name.startswith(prefix):
        return prefix + name[len(prefix):][:limit]
    return name[:limit]


def normalize_row(row, config=DEFAULT_CONFIG):
    """Coerce every field of a candidate row into its CHIRP form.

    Unparseable fields fall back to their defaults. A missing Comment is the
    one thing that is not defaulted: it raises MalformedRowError.
    """
    comment = row.get('Comment')
    if comment is None:
        raise MalformedRowError(f'slot {row.get("Location")}: missing notes/comment field')

    tone = row.get('Tone')
    if tone not in config.valid_tones:
        tone = ''
    duplex = str(row.get('Duplex') or '')
    if duplex.lower() == 'simplex':
        duplex = 'off'
    elif duplex != '+':
        duplex = '-'
    mode = str(row.get('Mode') or '')

    return {
        'Location': parse_int(row.get('Location'), 0),
        'Name': clamp_name(str(row.get('Name') or ''), config.name_limit,
                           is_listen_only(comment, config.listen_only_marker), config.listen_only_prefix),
        'Frequency': format_decimal(row.get('Frequency'), 6),
        'Duplex': duplex,
        'Offset': format_decimal(row.get('Offset'), 3, config.default_offset),
        'Tone': tone,
        'rToneFreq': format_decimal(row.get('rToneFreq'), 1) if tone else '',
        'cToneFreq': format_decimal(row.get('cToneFreq'), 1) if tone else '',
        'DtcsCode': '',
        'DtcsPolarity': '',
        'Mode': 'FM' if mode.upper() == 'FM' else 'NFM',
        'TStep': config.tstep,
        'Skip': str(row.get('Skip') or ''),
        'Comment': comment.strip(),
    }


def iter_input_rows(input_path):
    """Yield (line_number, fields) for every line after the header."""
    with open(input_path, newline='', encoding='utf-8') as fh:
        for line_number, line in enumerate(fh, start=1):
            if line_number == 1:
                continue
            yield line_number, line.rstrip('\r\n').split(',')


def read_chirp_rows(input_path, config=DEFAULT_CONFIG):
    rows = []
    slot = 1
    for line_number, fields in iter_input_rows(input_path):
        row = build_chirp_row(fields, slot, config, line_number)
        rows.append(normalize_row(row, config))
        slot += 1
    return rows


def build_frame(rows, config=DEFAULT_CONFIG):
    """DataFrame in CHIRP column order, indexed by Location."""
    df = pd.DataFrame(list(rows), columns=list(config.headers), dtype=object)
    return df.set_index('Location')


def write_chirp_csv(frame, output_path):
    # plain comma-joined rows; a stray double quote is backslash-escaped
    frame.to_csv(output_path, quoting=csv.QUOTE_NONE, escapechar='\\')


def reformat_for_chirp(input_path=DEFAULT_INPUT_PATH, output_path=DEFAULT_OUTPUT_PATH,
                       config=DEFAULT_CONFIG):
    rows = read_chirp_rows(input_path, config)
    frame = build_frame(rows, config)
    write_chirp_csv(frame, output_path)
    return frame


def main(argv=None):
    parser = argparse.ArgumentParser(description='Reformat a frequency spreadsheet CSV for CHIRP import')
    parser.add_argument('--input', '-i', default=DEFAULT_INPUT_PATH, help='Input CSV file')
    parser.add_argument('--output', '-o', default=DEFAULT_OUTPUT_PATH, help='Output CSV file')
    parser.add_argument('--name-limit', type=int, choices=NAME_LIMITS, default=NAME_LIMIT,
                        help='Maximum channel name length on the radio display')
    args = parser.parse_args(argv)

    config = DEFAULT_CONFIG.with_name_limit(args.name_limit)

    try:
        rows = read_chirp_rows(args.input, config)
    except MalformedRowError as e:
        print(f'ERROR: could not transform {args.input}: {e}')
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f'ERROR: could not read {args.input}: {e}')
        sys.exit(1)

    frame = build_frame(rows, config)
    try:
        write_chirp_csv(frame, args.output)
    except OSError as e:
        print(f'ERROR: writing CSV failed: {e}')
        sys.exit(1)
    print(f'Reformatted data saved to {args.output} ({len(frame)} rows)')


if __name__ == "__main__":
    main()
