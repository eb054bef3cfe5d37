import argparse
import logging
import os
import sys

# Allow running as `python scripts/build_book_table.py` from the project root
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config.logger_config import configure_logger
from config.table_config import create_table, load_table_settings
from pipeline.book_parser import load_books
from utils.config_utils import ConfigLoaderError
from utils.exceptions import BookParseError, HashTableError, KeyNotFoundError

DEFAULT_CSV = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "resources", "books.csv")


def build_book_table(csv_path, config_path=None, lookups=()):
    """
    Load books from csv_path into a new table and look up the requested keys.

    Returns:
        HashTable: The populated table.
    """
    logger = logging.getLogger("build_book_table")

    settings = load_table_settings(config_path)
    table = create_table(settings)
    count = load_books(csv_path, table)

    logger.info(f"Inserted {count} books; capacity={table.get_capacity()}, "
                f"num_keys={table.num_keys()}, load_factor={table.load_factor():.3f}")

    for key in lookups:
        try:
            book = table.get(key)
            logger.info(f"{key}: {book.title} by {book.authors}")
        except KeyNotFoundError:
            logger.info(f"{key}: not found")
    return table


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Load book records from a CSV file into a chained hash table and report its state."
    )
    parser.add_argument("--csv", default=DEFAULT_CSV, help="Path to the books CSV file.")
    parser.add_argument("--config", default=None, help="Path to a YAML table settings file.")
    parser.add_argument("--lookup", action="append", default=[], metavar="KEY",
                        help="Key to look up after loading (repeatable).")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level for console output.")
    args = parser.parse_args(argv)

    # Library modules log under their own names; configure the root logger once
    configure_logger(level=getattr(logging, args.log_level), output="console")

    try:
        build_book_table(args.csv, args.config, args.lookup)
    except (ConfigLoaderError, BookParseError, HashTableError) as e:
        logging.getLogger("build_book_table").error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
