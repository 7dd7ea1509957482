import importlib.resources
import logging
import re

import pandas as pd

from .errors import FormatError

logger = logging.getLogger(__name__)

with importlib.resources.files('copepod').joinpath('fields.csv').open('r') as f:
    fields = pd.read_csv(f, keep_default_na=False).set_index("name")

# Columns read as floats. TIMEgmt, GEAR, MOD, LIF and SEX only show up in the
# long-format export but are harmless here.
NUMERIC_FIELDS = frozenset(fields.index[fields.kind == "numeric"])

ANCHOR_PREFIX = "VALUE"
UNITS_TOKEN = "UNITS"
SCIENTIFIC_NAME_TOKEN = "SCIENTIFIC NAME"
SCIENTIFIC_NAME = "SCIENTIFIC_NAME"

flag_pattern = re.compile(r'^F[0-9]$')
invalid_chars = re.compile(r'[^A-Za-z0-9_]')


def split_header(header_line, delimiter=","):
    """Split a header line into tokens, with hyphens turned into underscores."""
    return [token.strip().replace("-", "_") for token in header_line.split(delimiter)]


def sanitize(name):
    """Delete every character that can't appear in an identifier."""
    name = invalid_chars.sub("", name)
    if not name or not name[0].isalpha():
        name = "x" + name
    return name


def disambiguate_headers(tokens, require_scientific_name=True):
    """Rename repeated qualifier columns after the VALUE column they describe.

    A UNITS or F1..F9 column belongs to the nearest VALUE* column to its
    left, so `VALUE_per_volu,UNITS,F1` becomes
    `VALUE_per_volu,VALUE_per_volu_UNITS,VALUE_per_volu_F1`. The
    SCIENTIFIC NAME column becomes SCIENTIFIC_NAME and everything is then
    stripped down to identifier characters. Already disambiguated headers
    come back unchanged.
    """
    headers = list(tokens)

    anchor = None
    for pos, token in enumerate(tokens):
        if token.startswith(ANCHOR_PREFIX):
            anchor = token
        elif token == UNITS_TOKEN or flag_pattern.match(token):
            if anchor is None:
                raise FormatError(f"{token} column has no preceding {ANCHOR_PREFIX} column", column=pos + 1)
            headers[pos] = f"{anchor}_{token}"
            logger.debug("Renamed column %d %s -> %s", pos + 1, token, headers[pos])

    names = [pos for pos, token in enumerate(tokens) if SCIENTIFIC_NAME_TOKEN in token]
    if len(names) > 1:
        raise FormatError(f"{SCIENTIFIC_NAME_TOKEN} appears {len(names)} times in header",
                          column=", ".join(str(pos + 1) for pos in names))
    if names:
        headers[names[0]] = SCIENTIFIC_NAME
    elif require_scientific_name and headers.count(SCIENTIFIC_NAME) != 1:
        raise FormatError(f"No {SCIENTIFIC_NAME_TOKEN} column in header")

    result = []
    seen = set()
    for header in headers:
        name = sanitize(header)
        if name in seen:
            n = 1
            while f"{name}_{n}" in seen:
                n += 1
            logger.warning("Column %r collides with an earlier column, renamed to %s_%d", header, name, n)
            name = f"{name}_{n}"
        seen.add(name)
        result.append(name)
    return result


def field_types(headers):
    """Map each header to float if it is a known numeric field, otherwise str."""
    return {header: float if header in NUMERIC_FIELDS else str for header in headers}
