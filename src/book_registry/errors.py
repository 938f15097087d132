"""Error taxonomy for the book registry."""

from enum import Enum


class ErrorCode(str, Enum):
    """Reasons a registry operation can be rejected."""

    EMPTY_TITLE = "EmptyTitle"
    NON_UNIQUE_TITLE = "NonUniqueTitle"
    LANGUAGE_CODE_NOT_2_CHARS = "LanguageCodeNot2Chars"
    EMPTY_AUTHORS_LIST = "EmptyAuthorsList"
    DUPLICATE_AUTHOR = "DuplicateAuthor"
    NON_POSITIVE_EDITION = "NonPositiveEdition"
    BOOK_NOT_FOUND = "BookNotFound"
    DERIVED_BEFORE_ORIGINAL = "DerivedBeforeOriginal"
    TRANSLATED_TO_SAME_LANGUAGE = "TranslatedToSameLanguage"
    REVISED_EDITION_LESS_EQU = "RevisedEditionLessEqu"
    NOT_A_DERIVED_BOOK = "NotADerivedBook"

    @property
    def message(self) -> str:
        return MESSAGES[self]


MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.EMPTY_TITLE: "Book title is empty",
    ErrorCode.NON_UNIQUE_TITLE: "Book title must be unique",
    ErrorCode.LANGUAGE_CODE_NOT_2_CHARS: "Language code must consist exactly of 2 characters",
    ErrorCode.EMPTY_AUTHORS_LIST: "List of authors should not be empty",
    ErrorCode.DUPLICATE_AUTHOR: "Same author was already specified for this book",
    ErrorCode.NON_POSITIVE_EDITION: "Edition number must be positive",
    ErrorCode.BOOK_NOT_FOUND: "Book with the specified title & edition was not previously registered",
    ErrorCode.DERIVED_BEFORE_ORIGINAL: "Derived book cannot be published earlier than original",
    ErrorCode.TRANSLATED_TO_SAME_LANGUAGE: "Language of translation should be different from original language",
    ErrorCode.REVISED_EDITION_LESS_EQU: "Revised edition number should be greater than original edition number",
    ErrorCode.NOT_A_DERIVED_BOOK: "The book is not derived (translated, revised) from any other book",
}


class BookRegistryError(Exception):
    """Raised when a registry operation is rejected.

    Attributes:
        code: Which rule was violated
        detail: Optional context (usually the offending key or value)
    """

    def __init__(self, code: ErrorCode, detail: str | None = None):
        self.code = code
        self.detail = detail
        message = code.message if detail is None else f"{code.message}: {detail}"
        super().__init__(message)

    @property
    def message(self) -> str:
        return self.code.message
