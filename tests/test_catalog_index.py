import pytest

from iam_actions.catalog import CatalogEntry, CatalogIndex


def _index() -> CatalogIndex:
    return CatalogIndex.from_document(
        [
            {"service": "s3", "url": "https://ref.example/s3.json"},
            {"service": "ec2", "url": "https://ref.example/ec2.json"},
            {"service": "Lambda", "url": "https://ref.example/lambda.json"},
        ]
    )


def test_resolve_is_case_insensitive() -> None:
    index = _index()

    assert index.resolve("S3") == index.resolve("s3") == "https://ref.example/s3.json"
    assert index.resolve("lambda") == "https://ref.example/lambda.json"


def test_resolve_returns_none_for_unknown_service() -> None:
    assert _index().resolve("s4") is None


def test_first_entry_wins_for_duplicate_service_names() -> None:
    index = CatalogIndex(
        [
            CatalogEntry(service="s3", url="https://ref.example/first.json"),
            CatalogEntry(service="S3", url="https://ref.example/second.json"),
        ]
    )

    assert len(index) == 1
    assert index.resolve("s3") == "https://ref.example/first.json"


def test_service_names_are_sorted() -> None:
    assert _index().service_names() == ["Lambda", "ec2", "s3"]


def test_from_document_rejects_non_list_payload() -> None:
    with pytest.raises(ValueError, match="must be a JSON list"):
        CatalogIndex.from_document({"service": "s3"})
