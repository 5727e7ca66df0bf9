"""CSV backup format for the product collection.

Layout::

    id,name,stock,minStock,barcode
    1,Widget,5,10,111

Fields containing a comma, quote or line break are quoted the standard
CSV way, so any product survives an export/import round trip. Parsing
validates the whole file up front and raises CsvParseError on the first
bad line; it never returns a partial result.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Sequence
from datetime import date

from smartstock.domain.exceptions import CsvParseError, ValidationError
from smartstock.domain.model.product import Product

logger = logging.getLogger(__name__)

HEADERS = ("id", "name", "stock", "minStock", "barcode")
REQUIRED_HEADERS = ("id", "name")
NUMERIC_HEADERS = ("stock", "minStock")


def backup_filename(day: date) -> str:
    return f"smartstock_backup_{day.isoformat()}.csv"


def export_products(products: Sequence[Product]) -> str:
    """Serialize products to CSV text (header first, no trailing newline)."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    # minimal quoting leaves a bare \r unquoted when the terminator is \n
    quoting_writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_ALL)
    writer.writerow(HEADERS)
    for p in products:
        row = [p.id, p.name, p.stock, p.min_stock, p.barcode]
        if any("\r" in text for text in (p.id, p.name, p.barcode)):
            quoting_writer.writerow(row)
        else:
            writer.writerow(row)
    return buffer.getvalue()[:-1]


def parse_products(text: str) -> list[Product]:
    """Parse backup text into products, reordering columns by the header.

    Missing trailing cells fall back to ``""`` (text) or ``0`` (numbers).
    Blank lines are skipped.
    """
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    try:
        header = next(reader, None)
        if header is None or not any(cell.strip() for cell in header):
            raise CsvParseError("File is empty or has no header line", 1)
        columns = _map_columns(header)

        products: list[Product] = []
        seen_ids: set[str] = set()
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            line = reader.line_num
            if len(row) > len(header):
                raise CsvParseError(
                    f"Expected at most {len(header)} values, found {len(row)}", line
                )
            product = _row_to_product(row, columns, line)
            if product.id in seen_ids:
                raise CsvParseError(f"Duplicate product id '{product.id}'", line)
            seen_ids.add(product.id)
            products.append(product)
    except csv.Error as exc:
        raise CsvParseError(f"Malformed CSV: {exc}", reader.line_num) from exc

    logger.debug("Parsed %d products from backup", len(products))
    return products


def _map_columns(header: list[str]) -> dict[str, int]:
    columns: dict[str, int] = {}
    for index, raw_name in enumerate(header):
        name = raw_name.strip()
        if name in columns:
            raise CsvParseError(f"Column '{name}' appears twice in the header", 1)
        if name not in HEADERS:
            logger.debug("Ignoring unknown backup column %r", name)
            continue
        columns[name] = index
    missing = [name for name in REQUIRED_HEADERS if name not in columns]
    if missing:
        raise CsvParseError(f"Header is missing column(s): {', '.join(missing)}", 1)
    return columns


def _row_to_product(row: list[str], columns: dict[str, int], line: int) -> Product:
    values: dict[str, object] = {}
    for name in HEADERS:
        index = columns.get(name)
        cell = row[index] if index is not None and index < len(row) else None
        if name in NUMERIC_HEADERS:
            values[name] = _parse_count(name, cell, line)
        else:
            values[name] = cell if cell is not None else ""
    try:
        return Product(
            id=values["id"],
            name=values["name"],
            stock=values["stock"],
            min_stock=values["minStock"],
            barcode=values["barcode"],
        )
    except ValidationError as exc:
        raise CsvParseError(str(exc), line) from exc


def _parse_count(column: str, cell: str | None, line: int) -> int:
    if cell is None:
        return 0
    text = cell.strip()
    if not (text.isascii() and text.isdigit()):
        raise CsvParseError(
            f"Column '{column}' must be a non-negative whole number, got '{cell}'",
            line,
        )
    return int(text)
