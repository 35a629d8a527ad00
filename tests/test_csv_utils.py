from procsentry.csv_utils import read_csv


def _write(tmp_path, text):
    path = tmp_path / "config.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_key_column_in_middle(tmp_path):
    path = _write(tmp_path, "evil.exe,C:\\evil.exe,abc\n")
    assert read_csv(path, 1) == {"C:\\evil.exe": ["evil.exe", "abc"]}


def test_default_key_column_is_first(tmp_path):
    path = _write(tmp_path, "k1,a,b\nk2,c,d\n")
    assert read_csv(path) == {"k1": ["a", "b"], "k2": ["c", "d"]}


def test_empty_key_is_skipped(tmp_path):
    path = _write(tmp_path, ",x,y\nk,v\n")
    assert read_csv(path, 0) == {"k": ["v"]}


def test_trailing_separator_does_not_add_field(tmp_path):
    path = _write(tmp_path, "k,a,\n")
    assert read_csv(path, 0) == {"k": ["a"]}


def test_empty_middle_field_is_kept(tmp_path):
    path = _write(tmp_path, "k,,b\n")
    assert read_csv(path, 0) == {"k": ["", "b"]}


def test_key_column_beyond_row_is_skipped(tmp_path):
    path = _write(tmp_path, "a,b\nc,d,e,f\n")
    assert read_csv(path, 3) == {"f": ["c", "d", "e"]}


def test_duplicate_key_last_wins(tmp_path):
    path = _write(tmp_path, "k,first\nk,second\n")
    assert read_csv(path, 0) == {"k": ["second"]}


def test_blank_lines_and_crlf(tmp_path):
    path = tmp_path / "config.csv"
    path.write_bytes(b"k,a\r\n\r\nj,b\r\n")
    assert read_csv(path, 0) == {"k": ["a"], "j": ["b"]}


def test_missing_file_gives_empty_mapping(tmp_path):
    assert read_csv(tmp_path / "absent.csv", 0) == {}