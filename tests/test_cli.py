import pytest

import huffman_cli
from huffman_service import HuffmanService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
	for name in ("HUFFMAN_ENCODING", "HUFFMAN_STRICT_DECODE", "HUFFMAN_LOG_LEVEL"):
		monkeypatch.delenv(name, raising=False)


def test_reports_sizes_and_decoded_text(tmp_path, capsys):
	text = "it was the best of times\nit was the worst of times\n"
	path = tmp_path / "tale.txt"
	path.write_text(text, encoding="utf-8")
	with HuffmanService.open(path) as coder:
		expected_bytes = len(coder.encode()) // 8

	assert huffman_cli.main([str(path)]) == 0
	out = capsys.readouterr().out
	assert f"File is {len(text.encode('utf-8'))} bytes" in out
	assert f"Encoded value has {expected_bytes} bytes" in out
	assert f"Decoded value is {text}" in out


def test_no_decoded_and_show_codes(tmp_path, capsys):
	path = tmp_path / "short.txt"
	path.write_text("aaab\n", encoding="utf-8")
	assert huffman_cli.main([str(path), "--no-decoded", "--show-codes"]) == 0
	out = capsys.readouterr().out
	assert "Decoded value is" not in out
	assert "'a'" in out
	assert "'\\n'" in out


def test_format_code_table_orders_by_count():
	from bitarray import bitarray
	table = huffman_cli.format_code_table(
		{"a": 3, "b": 1}, {"a": bitarray("1"), "b": bitarray("0")}
	)
	lines = table.splitlines()
	assert "'a'" in lines[2]
	assert "'b'" in lines[3]


def test_missing_file_returns_error(tmp_path, capsys):
	assert huffman_cli.main([str(tmp_path / "nope.txt")]) == 1
	assert "ERROR" in capsys.readouterr().err


def test_empty_file_returns_error(tmp_path, capsys):
	path = tmp_path / "empty.txt"
	path.write_text("", encoding="utf-8")
	assert huffman_cli.main([str(path)]) == 1
	captured = capsys.readouterr()
	assert "File is 0 bytes" in captured.out
	assert "empty" in captured.err


def test_bad_strict_decode_env_returns_error(tmp_path, capsys, monkeypatch):
	path = tmp_path / "short.txt"
	path.write_text("abc\n", encoding="utf-8")
	monkeypatch.setenv("HUFFMAN_STRICT_DECODE", "maybe")
	assert huffman_cli.main([str(path)]) == 1
	captured = capsys.readouterr()
	assert "HUFFMAN_STRICT_DECODE" in captured.err
	assert "File is" not in captured.out


def test_unknown_log_level_returns_error(tmp_path, capsys):
	path = tmp_path / "short.txt"
	path.write_text("abc\n", encoding="utf-8")
	assert huffman_cli.main([str(path), "--log-level", "chatty"]) == 1
	assert "unknown log level 'CHATTY'" in capsys.readouterr().err


def test_log_level_option_is_accepted(tmp_path, capsys):
	path = tmp_path / "short.txt"
	path.write_text("abc\n", encoding="utf-8")
	assert huffman_cli.main([str(path), "--log-level", "debug"]) == 0
	assert "Decoded value is abc\n" in capsys.readouterr().out


def test_lenient_flag_is_not_offered(tmp_path):
	path = tmp_path / "short.txt"
	path.write_text("abc\n", encoding="utf-8")
	with pytest.raises(SystemExit):
		huffman_cli.main([str(path), "--lenient"])


def test_undecodable_file_reports_error_once(tmp_path, capsys):
	path = tmp_path / "binary.txt"
	path.write_bytes(b"ab\xff\n")
	assert huffman_cli.main([str(path)]) == 1
	err = capsys.readouterr().err
	assert err.count("ERROR") == 1
	assert "utf-8" in err
