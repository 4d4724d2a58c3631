import pytest

from type_provider.documents import candidate_names, load_document_text


def test_candidate_names():
    assert candidate_names("Movie-Schema")[:3] == ["Movie-Schema", "Movie-Schema.json", "Movie-Schema.schema.json"]
    assert "movie_schema.schema.json" in candidate_names("Movie-Schema")


def test_load_by_path(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text('{"a": 1}', encoding="utf-8")
    assert load_document_text(str(path)) == '{"a": 1}'


def test_load_by_name(tmp_path):
    (tmp_path / "movie.schema.json").write_text("{}", encoding="utf-8")
    assert load_document_text("movie", [str(tmp_path)]) == "{}"


def test_text_is_not_parsed(tmp_path):
    (tmp_path / "broken.json").write_text("{ not json", encoding="utf-8")
    assert load_document_text("broken", [str(tmp_path)]) == "{ not json"


def test_missing_document(tmp_path):
    with pytest.raises(FileNotFoundError) as exc_info:
        load_document_text("absent", [str(tmp_path)])
    assert "absent.schema.json" in str(exc_info.value)
