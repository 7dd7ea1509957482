class FormatError(ValueError):
    """Structural problem in a COPEPOD short-format file.

    line is the 1-based line number in the file, column the 1-based column
    position or the column name, when known.
    """

    def __init__(self, message, line=None, column=None):
        self.line = line
        self.column = column
        where = []
        if line is not None:
            where.append(f"line {line}")
        if column is not None:
            where.append(f"column {column}")
        if where:
            message = f"{message} ({', '.join(where)})"
        super().__init__(message)
