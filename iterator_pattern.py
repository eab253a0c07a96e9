from dataclasses import dataclass
from typing import Iterator, List


@dataclass(frozen=True)
class Book:
    title: str
    author: str


class BookShelfIterator:
    """Walks a shelf front to back, or back to front when reverse is set"""

    def __init__(self, books: List[Book], reverse: bool = False):
        self._books = books
        self._step = -1 if reverse else 1
        self._index = len(books) - 1 if reverse else 0

    def has_next(self) -> bool:
        return 0 <= self._index < len(self._books)

    def next(self) -> Book:
        if not self.has_next():
            raise StopIteration
        book = self._books[self._index]
        self._index += self._step
        return book

    def __iter__(self):
        return self

    def __next__(self) -> Book:
        return self.next()


class BookShelf:
    def __init__(self):
        self._books: List[Book] = []

    def add(self, book: Book):
        self._books.append(book)

    def __len__(self):
        return len(self._books)

    def __iter__(self) -> BookShelfIterator:
        return BookShelfIterator(self._books)

    def reverse_iterator(self) -> BookShelfIterator:
        return BookShelfIterator(self._books, reverse=True)

    def by_author(self, author: str) -> Iterator[Book]:
        for book in self._books:
            if book.author == author:
                yield book


def main():
    print("=== Iterator Demo ===\n")

    shelf = BookShelf()
    shelf.add(Book("Design Patterns", "Gamma"))
    shelf.add(Book("Refactoring", "Fowler"))
    shelf.add(Book("Patterns of Enterprise Application Architecture", "Fowler"))

    print("Front to back:")
    iterator = iter(shelf)
    while iterator.has_next():
        print(f"  {iterator.next().title}")

    print("Back to front:")
    for book in shelf.reverse_iterator():
        print(f"  {book.title}")

    print("By Fowler:")
    for book in shelf.by_author("Fowler"):
        print(f"  {book.title}")


if __name__ == "__main__":
    main()
