from .errors import FormatError
from .loader import parse as parse_short_format
from .copdata import CopepodData
