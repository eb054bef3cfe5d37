# tests/conftest.py
import pytest
import sys
import os

# Add the parent directory to the system path to ensure correct module import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from pipeline.book_models import Book
from utils.data_structures.hash_table import HashTable

# Initial settings of the shared small table; two inserts cross the threshold
INIT_CAPACITY = 2
LOAD_FACTOR_THRESHOLD = 0.49

RESOURCES_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'resources'))


@pytest.fixture(scope="session")
def books():
    """
    Fixture providing 600 distinct Book records with 13-digit keys.
    """
    return [
        Book(
            book_id=f"978{i:010d}",
            title=f"Title {i}",
            authors=f"Author {i % 37}",
            original_publication_year=1900 + i % 120,
            language_code="eng",
            publisher=f"Publisher {i % 11}",
            pages=100 + i,
        )
        for i in range(600)
    ]


@pytest.fixture
def table():
    """
    Fixture providing an empty HashTable with capacity 2 and threshold 0.49.
    """
    return HashTable(INIT_CAPACITY, LOAD_FACTOR_THRESHOLD)


@pytest.fixture
def books_csv():
    """
    Path to the sample books file shipped in resources/.
    """
    return os.path.join(RESOURCES_DIR, "books.csv")
