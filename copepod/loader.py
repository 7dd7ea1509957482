import csv
import logging
from dataclasses import dataclass, field
from itertools import islice
from typing import List

import pandas as pd

from .errors import FormatError
from . import headers as hdr

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"
DELIMITER = ","
SCAN_LINES = 20  # comment blocks in COPEPOD exports are only a few lines long
NULL_TOKENS = ("null",)
number_pattern = r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"


@dataclass
class HeaderBlock:
    count: int
    header_line: str
    has_trailing_delimiter: bool
    comments: List[str] = field(default_factory=list)


def scan_header_block(f, max_lines=SCAN_LINES):
    """Find the comment block at the top of f and the header line inside it.

    The header is the second-to-last comment line; the last one is a
    separator. Reads at most max_lines lines of f.
    """
    comments = [line[len(COMMENT_MARKER):].rstrip("\r\n")
                for line in islice(iter(f.readline, ""), max_lines)
                if line.startswith(COMMENT_MARKER)]

    if len(comments) < 2:
        raise FormatError(f"Expected at least 2 comment lines in the first {max_lines} lines, found {len(comments)}")

    header_line = comments[-2]
    logger.debug("Found %d comment lines, header is comment %d", len(comments), len(comments) - 1)
    return HeaderBlock(
        count=len(comments),
        header_line=header_line,
        has_trailing_delimiter=header_line.rstrip().endswith(DELIMITER),
        comments=comments)


def to_float(values, lines, column):
    """Convert a column of strings to float64, with empty and null fields as NaN."""
    values = values.str.strip()
    missing = values.isin(("",) + NULL_TOKENS)
    bad = ~missing & ~values.str.fullmatch(number_pattern)
    if bad.any():
        pos = bad.to_numpy().argmax()
        raise FormatError(f"Non-numeric value {values.iloc[pos]!r}", line=lines[pos], column=column)
    return pd.to_numeric(values.where(~missing)).astype(float)


def read_rows(f, headers, types, skip=0, has_trailing_delimiter=False):
    """Parse the data lines of f into a frame with one column per header.

    Columns are labelled by position; assemble_table names them. Numeric
    columns become float64 with NaN for empty or null fields, text columns
    keep the raw strings with null read as "".
    """
    for _ in range(skip):
        f.readline()

    ncols = len(headers)
    rows = []
    lines = []

    reader = csv.reader(f, delimiter=DELIMITER)
    for row in reader:
        lineno = skip + reader.line_num
        if not row or row[0].startswith(COMMENT_MARKER):
            continue
        if len(row) == ncols - 1 and has_trailing_delimiter:
            row.append("")
        if len(row) != ncols:
            raise FormatError(f"Expected {ncols} fields, found {len(row)}", line=lineno)
        rows.append(row)
        lines.append(lineno)

    logger.debug("Read %d data rows", len(rows))
    df = pd.DataFrame(rows, columns=range(ncols), dtype=object)
    for pos, header in enumerate(headers):
        if types[header] is float:
            df[pos] = to_float(df[pos], lines, header)
        else:
            df[pos] = df[pos].where(~df[pos].isin(NULL_TOKENS), "")
    return df


def assemble_table(df, headers, has_trailing_delimiter=False):
    """Name the columns of df, dropping the empty column a trailing delimiter leaves behind."""
    df = df.copy()
    df.columns = list(headers)
    if has_trailing_delimiter:
        logger.debug("Dropping empty trailing column %s", df.columns[-1])
        df = df.iloc[:, :-1]
    return df


def read(f):
    """Parse an open, seekable short-format stream.

    Returns (df, block, raw_headers) where raw_headers are the header tokens
    before disambiguation.
    """
    try:
        block = scan_header_block(f)
        raw_headers = hdr.split_header(block.header_line, DELIMITER)
        headers = hdr.disambiguate_headers(raw_headers)
        logger.debug("Header has %d columns", len(headers))

        f.seek(0)
        df = read_rows(f, headers, hdr.field_types(headers),
                       skip=block.count, has_trailing_delimiter=block.has_trailing_delimiter)
    except UnicodeDecodeError as e:
        raise FormatError(f"File is not valid {e.encoding}: {e.reason} at byte {e.start}") from e
    return assemble_table(df, headers, block.has_trailing_delimiter), block, raw_headers


def parse(filepath):
    """Read a COPEPOD short-format file into a DataFrame."""
    with open(filepath, 'r', encoding='utf-8') as f:
        df, _, _ = read(f)
    return df
