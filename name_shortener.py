"""Shorten channel names so they fit the radio's label limit.

Names already within the limit are kept. Longer names go through the
abbreviation table first; if that is not enough, the original name is reduced
to an acronym. Listen-only channels get a '!' in front.
"""
import re

from chirp_config import DEFAULT_CONFIG


def apply_substitutions(name, substitutions):
    """Replace every case-insensitive occurrence of each key, in table order."""
    for key, abbrev in substitutions:
        name = re.sub(re.escape(key), lambda _m, a=abbrev: a, name, flags=re.I)
    return name


def create_acronym(name):
    # 'Hudson Valley Dispatch' -> 'HVD'
    return ''.join(word[0].upper() for word in name.split())


def is_listen_only(notes, marker=DEFAULT_CONFIG.listen_only_marker):
    return marker.lower() in notes.lower()


def shorten_name(name, notes, config=DEFAULT_CONFIG):
    name = name.strip()
    limit = config.name_limit
    shortened = name
    if len(shortened) > limit:
        shortened = apply_substitutions(name, config.substitutions)
        if len(shortened) > limit:
            # acronym comes from the untouched name, not the abbreviated one
            shortened = create_acronym(name)
        shortened = shortened[:limit]

    if is_listen_only(notes, config.listen_only_marker):
        shortened = config.listen_only_prefix + shortened
    return shortened
