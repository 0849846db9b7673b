"""Row source for bulk import from a CSV export of the voucher spreadsheet."""

import csv
from collections.abc import Iterator
from pathlib import Path

# The header line is skipped, so the first data row is spreadsheet row 2
FIRST_DATA_ROW = 2


def read_csv_rows(path: Path | str, delimiter: str | None = None) -> Iterator[list[str | None]]:
    """
    Yield the data rows of a CSV file, header excluded.

    Cells are stripped and empty cells become None so trailing optional
    columns read as absent. When no delimiter is given it is sniffed from
    the header line (comma or semicolon).
    """
    with open(path, newline="", encoding="utf-8-sig") as handle:
        if delimiter is None:
            sample = handle.readline()
            delimiter = ";" if sample.count(";") > sample.count(",") else ","
            handle.seek(0)

        reader = csv.reader(handle, delimiter=delimiter)
        next(reader, None)
        for raw in reader:
            yield [cell.strip() or None for cell in raw]
