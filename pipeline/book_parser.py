# File: pipeline/book_parser.py
# Reads book records from a delimited file and feeds them to a hash table.
# The file is loaded into a pandas DataFrame; each row is validated into a Book model.

import logging
from typing import Iterator, Tuple

import pandas as pd
from pydantic import ValidationError

from pipeline.book_models import Book
from utils.data_structures.hash_table_adt import HashTableADT
from utils.exceptions import BookParseError

logger = logging.getLogger(__name__)

# Columns every source file must provide
REQUIRED_COLUMNS = ["book_id", "title", "authors"]
# Columns copied onto the Book model when present
BOOK_COLUMNS = REQUIRED_COLUMNS + [
    "original_publication_year",
    "language_code",
    "publisher",
    "pages",
]


def _clean(value):
    """Strip strings and map blank cells to None."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    value = str(value).strip()
    return value or None


def parse_books(csv_path, sep: str = ",") -> Iterator[Tuple[str, Book]]:
    """
    Yield (key, Book) pairs from a delimited file, in file order.

    Args:
        csv_path: Path to the source file.
        sep: Field delimiter.

    Yields:
        Tuple[str, Book]: The book's key and the validated record.

    Raises:
        BookParseError: If required columns are missing or a row fails validation.
    """
    # Everything is read as text so ISBNs keep their leading zeros
    df = pd.read_csv(csv_path, sep=sep, dtype=str, keep_default_na=False)
    df.columns = [column.strip() for column in df.columns]

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise BookParseError(csv_path, f"missing required columns {missing}")

    columns = [column for column in BOOK_COLUMNS if column in df.columns]
    logger.info(f"Parsing {len(df)} rows from {csv_path}.")

    # Row numbers are 1-based and count the header line
    for row_number, row in enumerate(df[columns].to_dict(orient="records"), start=2):
        fields = {column: _clean(value) for column, value in row.items()}
        if fields["book_id"] is None:
            logger.warning(f"Skipping row {row_number} of {csv_path}: blank book_id.")
            continue
        try:
            book = Book(**fields)
        except ValidationError as e:
            raise BookParseError(csv_path, str(e), row_number) from e
        yield book.key, book


def load_books(csv_path, table: HashTableADT, sep: str = ",") -> int:
    """
    Insert every book from a source file into a table.

    Returns:
        int: The number of books inserted.
    """
    count = 0
    for key, book in parse_books(csv_path, sep=sep):
        table.insert(key, book)
        count += 1
    logger.info(f"Loaded {count} books into {table!r}.")
    return count
