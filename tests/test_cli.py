import io

from huffzip.cli import main
from huffzip.compress import compress


def _run(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([])


def test_quit(monkeypatch, capsys):
    assert _run(monkeypatch, "3\n") == 0
    assert "Encerrando o programa..." in capsys.readouterr().out


def test_invalid_option(monkeypatch, capsys):
    _run(monkeypatch, "7\n3\n")
    assert "Opcao invalida! Por favor, tente novamente." in capsys.readouterr().out


def test_end_of_input_stops(monkeypatch, capsys):
    assert _run(monkeypatch, "") == 0
    assert "=== Menu ===" in capsys.readouterr().out


def test_compress_then_decompress(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    data = b"hello huffman world, hello again"
    (tmp_path / "in.bin").write_bytes(data)
    _run(monkeypatch, "1\nin.bin out.huf\n2\nout.huf back.bin\n3\n")
    out = capsys.readouterr().out
    assert "Arquivo compactado com sucesso!" in out
    assert "Arquivo descompactado com sucesso!" in out
    assert (tmp_path / "out.huf").read_bytes() == compress(data)
    assert (tmp_path / "back.bin").read_bytes() == data


def test_compress_missing_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    _run(monkeypatch, "1\nmissing.bin out.huf\n3\n")
    assert "Erro ao contar frequencias do arquivo." in capsys.readouterr().out
    assert not (tmp_path / "out.huf").exists()


def test_compress_empty_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "empty.bin").write_bytes(b"")
    _run(monkeypatch, "1\nempty.bin out.huf\n3\n")
    assert "Erro ao criar fila de prioridade." in capsys.readouterr().out


def test_decompress_corrupt_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "bad.huf").write_bytes(b"\x00\x00")
    _run(monkeypatch, "2\nbad.huf out.bin\n3\n")
    out = capsys.readouterr().out
    assert "Erro ao ler fila de prioridade." in out
    assert "Erro ao descompactar o arquivo." in out


def test_decompress_missing_file(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    _run(monkeypatch, "2\nnope.huf out.bin\n3\n")
    assert "Erro ao descompactar o arquivo." in capsys.readouterr().out