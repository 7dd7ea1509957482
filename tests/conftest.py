import pytest

HEADER = [
    "SHP-CRUISE", "YEAR", "MON", "DAY", "TIMEloc", "LATITUDE", "LONGITDE", "UPPER_Z", "LOWER_Z",
    "T", "MESH", "NMFS_PGC", "ITIS_TSN", "PSC", "V", "Original-VALUE", "Orig-UNITS",
    "VALUE-per-volu", "UNITS", "F1", "F2", "F3", "F4",
    "VALUE-per-area", "UNITS", "F1", "F2", "F3", "F4",
    "SCIENTIFIC NAME", "RECORD-ID", "DATASET-ID", "SHIP", "PROJ",
]

COLUMNS = [
    "SHP_CRUISE", "YEAR", "MON", "DAY", "TIMEloc", "LATITUDE", "LONGITDE", "UPPER_Z", "LOWER_Z",
    "T", "MESH", "NMFS_PGC", "ITIS_TSN", "PSC", "V", "Original_VALUE", "Orig_UNITS",
    "VALUE_per_volu", "VALUE_per_volu_UNITS",
    "VALUE_per_volu_F1", "VALUE_per_volu_F2", "VALUE_per_volu_F3", "VALUE_per_volu_F4",
    "VALUE_per_area", "VALUE_per_area_UNITS",
    "VALUE_per_area_F1", "VALUE_per_area_F2", "VALUE_per_area_F3", "VALUE_per_area_F4",
    "SCIENTIFIC_NAME", "RECORD_ID", "DATASET_ID", "SHIP", "PROJ",
]

ROWS = [
    ["31-1234567", "1995", "7", "14", "10.5", "45.25", "-124.5", "0", "100",
     "V", "333", "4000000", "85272", "1", "C", "12.5", "#/m3",
     "12.5", "#/m3", "0", "0", "0", "0",
     "1250", "#/m2", "0", "0", "0", "0",
     "Calanus finmarchicus", "1001", "55", "31", "7"],
    ["31-1234567", "1995", "7", "14", "null", "45.25", "-124.5", "0", "100",
     "V", "333", "4000000", "85272", "1", "C", "", "null",
     "3.2", "#/m3", "", "", "", "",
     "320", "#/m2", "0", "1", "0", "0",
     "null", "1002", "55", "31", "7"],
]

COMMENTS = [
    "NMFS-COPEPOD short-format export",
    "Data set 55: example cruise",
]


def short_format_text(header=HEADER, rows=ROWS, comments=COMMENTS, trailing=True):
    end = "," if trailing else ""
    lines = ["#" + c for c in comments]
    lines.append("#" + ",".join(header) + end)
    lines.append("#" + "-" * 40)
    lines += [",".join(row) + end for row in rows]
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_short_format(tmp_path):
    def write(text=None, name="copepod-2012__short.csv", **kw):
        path = tmp_path / name
        path.write_text(short_format_text(**kw) if text is None else text, encoding="utf-8")
        return str(path)
    return write


@pytest.fixture
def sample_path(write_short_format):
    return write_short_format()
