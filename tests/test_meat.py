import pytest

from logicdrills.meat import FileMeta, ProcessFileService, count_words, split_words


def test_split_on_separators():
    assert split_words("T-bone, fatback.pastrami..jowl  ham") == [
        "T-bone",
        "fatback",
        "pastrami",
        "jowl",
        "ham",
    ]


def test_split_empty_and_separator_only():
    assert split_words("") == []
    assert split_words(" ., .. ,\t") == []


def test_split_keeps_other_punctuation():
    assert split_words("bacon-ipsum;sirloin") == ["bacon-ipsum;sirloin"]


def test_count_words_totals_match():
    words = split_words("beef beef pork, chicken. beef")
    counts = count_words(words)
    assert sum(counts.values()) == len(words)
    assert set(counts) == set(words)
    assert counts["beef"] == words.count("beef")


def test_count_words_empty():
    assert count_words([]) == {}


def test_file_meta_location(tmp_path):
    meta = FileMeta("file.txt", str(tmp_path), "txt")
    assert meta.location == tmp_path / "file.txt"


def test_get_meat_list(tmp_path):
    text = "T-bone fatback, pastrami..\nT-bone jowl.\n\nfatback T-bone\r\n"
    (tmp_path / "file.txt").write_text(text, encoding="utf-8")
    service = ProcessFileService(FileMeta("file.txt", str(tmp_path), "txt"))
    result = service.get_meat_list()
    assert result == count_words(split_words(text))
    assert result["T-bone"] == text.count("T-bone")
    assert set(result) == {"T-bone", "fatback", "pastrami", "jowl"}


def test_get_meat_list_empty_file(tmp_path):
    (tmp_path / "file.txt").write_text("", encoding="utf-8")
    service = ProcessFileService(FileMeta("file.txt", str(tmp_path), "txt"))
    assert service.get_meat_list() == {}


def test_get_meat_list_missing_file(tmp_path):
    service = ProcessFileService(FileMeta("absent.txt", str(tmp_path), "txt"))
    with pytest.raises(FileNotFoundError):
        service.get_meat_list()