import io
import random

import pytest

from tapesort.datasets import (
    compact_spaces,
    generate_files,
    main,
    parse_provao,
    read_binary,
    save_binary,
)
from tapesort.records import Record


def line(registration, grade, state, city, course):
    return f"{registration} {grade:.1f} {state} {city:<50} {course:<30}\n"


def sample_text(count, seed=0):
    rng = random.Random(seed)
    return "".join(
        line(f"{i:08d}", rng.randint(0, 1000) / 10, "SP", f"Cidade  {i}", "Medicina")
        for i in range(count)
    )


def test_compact_spaces_example():
    assert compact_spaces("  a  b  ") == "a b "


@pytest.mark.parametrize("text", ["", "   ", "x", "  Sao   Jose  dos Campos   "])
def test_compact_spaces_invariants(text):
    result = compact_spaces(text)
    assert "  " not in result
    assert not result.startswith(" ")
    assert compact_spaces(result) == result
    assert result.replace(" ", "") == text.replace(" ", "")


def test_parse_provao_reads_fixed_width_fields():
    text = line("12345678", 55.5, "SP", "Sao Paulo", "Engenharia Civil")
    text += line("87654321", 70.0, "RJ", "Rio de Janeiro", "Direito")
    records = parse_provao(io.StringIO(text))
    assert [r.registration for r in records] == ["12345678", "87654321"]
    assert [r.grade for r in records] == [55.5, 70.0]
    assert records[0].state == "SP"
    assert records[0].city.rstrip() == "Sao Paulo"
    assert records[1].course.rstrip() == "Direito"
    assert "  " not in records[0].city


def test_parse_provao_stops_at_malformed_text():
    text = line("12345678", 55.5, "SP", "Sao Paulo", "Letras") + "garbage"
    assert len(parse_provao(io.StringIO(text))) == 1


def test_parse_provao_empty():
    assert parse_provao(io.StringIO("")) == []


def test_save_binary_round_trip(tmp_path):
    records = [Record("00000001", 1.5, "AM", "Manaus", "Fisica")]
    path = save_binary(tmp_path / "aleatorio.bin", records)
    assert read_binary(1, tmp_path) == records
    assert path == tmp_path / "aleatorio.bin"


def test_generate_files(tmp_path):
    source = tmp_path / "PROVAO.TXT"
    source.write_text(sample_text(15, 1), encoding="latin-1")
    paths = generate_files(source, tmp_path)
    assert [p.name for p in paths] == ["aleatorio.bin", "crescente.bin", "decrescente.bin"]
    original = read_binary(1, tmp_path)
    ascending = read_binary(2, tmp_path)
    descending = read_binary(3, tmp_path)
    assert [r.registration for r in original] == [f"{i:08d}" for i in range(15)]
    grades = [r.grade for r in original]
    assert [r.grade for r in ascending] == sorted(grades)
    assert [r.grade for r in descending] == sorted(grades, reverse=True)


def test_read_binary_invalid_situation(tmp_path):
    with pytest.raises(ValueError):
        read_binary(5, tmp_path)


def test_read_binary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_binary(2, tmp_path)


def test_main_generates_and_reads(tmp_path, monkeypatch, capsys):
    (tmp_path / "PROVAO.TXT").write_text(sample_text(6, 2), encoding="latin-1")
    monkeypatch.chdir(tmp_path)
    assert main(["gerar"]) == 0
    assert "Arquivo aleatorio.bin gerado com sucesso!" in capsys.readouterr().out
    assert main(["ler", "2"]) == 0
    out = capsys.readouterr().out.splitlines()
    ascending = read_binary(2, tmp_path)
    assert len(out) == len(ascending)
    assert out[0].startswith(ascending[0].registration)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "gerar" in capsys.readouterr().out


def test_main_unknown_option(capsys):
    assert main(["xyz"]) == 0
    assert "Opção inválida!" in capsys.readouterr().out


def test_main_missing_source(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["gerar"]) == 1
    assert "Erro ao abrir PROVAO.TXT" in capsys.readouterr().out