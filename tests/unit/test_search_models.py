"""Tests for search models and the error taxonomy."""

from dataclasses import FrozenInstanceError

import pytest

from title_index import (
    BatchError,
    Document,
    EmptyQueryError,
    EmptyTitleError,
    NilDocumentError,
    NotFoundError,
    RankedResult,
    TitleIndexError,
)


class TestModels:
    def test_document_is_frozen(self):
        document = Document(title="Movie", payload=1)

        with pytest.raises(FrozenInstanceError):
            document.title = "Other"

    def test_ranked_result_to_dict(self):
        result = RankedResult(title="Movie", payload={"id": 1}, similarity=0.5)

        assert result.to_dict() == {"title": "Movie", "payload": {"id": 1}, "similarity": 0.5}


class TestErrors:
    @pytest.mark.parametrize(
        ("error_type", "message"),
        [
            (EmptyTitleError, "title is empty"),
            (EmptyQueryError, "query is empty"),
            (NilDocumentError, "document is nil"),
            (NotFoundError, "not found"),
        ],
    )
    def test_default_messages(self, error_type, message):
        error = error_type()

        assert isinstance(error, TitleIndexError)
        assert str(error) == message

    def test_kinds_are_distinguishable(self):
        with pytest.raises(NotFoundError):
            raise NotFoundError()
        assert not issubclass(NotFoundError, EmptyQueryError)

    def test_batch_error_keeps_positions(self):
        error = BatchError([(0, NilDocumentError()), (4, TypeError("bad"))])

        assert [position for position, _ in error.failures] == [0, 4]
        assert str(error) == "2 document(s) failed in batch (positions: 0, 4)"
