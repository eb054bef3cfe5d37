# File: pipeline/book_models.py
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """
    Pydantic model for a book record stored in the hash table.

    Attributes:
        book_id: The ISBN-13 of the book; used as the table key.
        title: The title of the book.
        authors: Author names as they appear in the source, comma separated.
        original_publication_year: Year of first publication, if known.
        language_code: Language of the edition (e.g., "eng").
        publisher: Publisher of the edition.
        pages: Page count of the edition.
    """
    model_config = ConfigDict(frozen=True)

    book_id: str = Field(min_length=1)
    title: str
    authors: str
    original_publication_year: Optional[int] = None
    language_code: Optional[str] = None
    publisher: Optional[str] = None
    pages: Optional[int] = Field(default=None, ge=0)

    @property
    def key(self) -> str:
        return self.book_id
