import pytest

import main
import visualize
from tests.tables import MEALY_MIN_TEXT, MEALY_TEXT, MOORE_MIN_TEXT, MOORE_TEXT


def test_minimize_mealy_file(write_table, tmp_path, capsys):
    src = write_table("mealy.csv", MEALY_TEXT)
    dst = tmp_path / "out.csv"
    assert main.main(["mealy", str(src), str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == MEALY_MIN_TEXT
    out, err = capsys.readouterr()
    assert "Минимизация автомата Мили завершена: 5 -> 2 состояний" in out
    assert err == ""


def test_minimize_moore_file_quiet(write_table, tmp_path, capsys):
    src = write_table("moore.csv", MOORE_TEXT)
    dst = tmp_path / "out.csv"
    assert main.main(["moore", str(src), str(dst), "--quiet"]) == 0
    assert dst.read_text(encoding="utf-8") == MOORE_MIN_TEXT
    assert capsys.readouterr() == ("", "")


def test_rename_option(write_table, tmp_path):
    src = write_table("moore.csv", MOORE_TEXT)
    dst = tmp_path / "out.csv"
    assert main.main(["moore", str(src), str(dst), "--rename", "s", "-q"]) == 0
    assert dst.read_text(encoding="utf-8").splitlines()[1] == ";s0;s1"


def test_flavor_mismatch_warns(write_table, tmp_path, capsys):
    src = write_table("moore.csv", MOORE_TEXT)
    dst = tmp_path / "out.csv"
    assert main.main(["mealy", str(src), str(dst)]) == 1
    err = capsys.readouterr().err
    assert "Предупреждение: задан тип mealy, а файл определён как moore." in err
    assert "Ошибка: строка 1:" in err
    assert not dst.exists()


def test_missing_input(tmp_path, capsys):
    assert main.main(["mealy", str(tmp_path / "nope.csv"), str(tmp_path / "out.csv")]) == 1
    assert "Ошибка: не удалось прочитать входной файл" in capsys.readouterr().err


def test_unwritable_output(write_table, tmp_path, capsys):
    src = write_table("mealy.csv", MEALY_TEXT)
    assert main.main(["mealy", str(src), str(tmp_path / "missing" / "out.csv")]) == 1
    assert "Ошибка: не удалось записать выходной файл" in capsys.readouterr().err


def test_malformed_cell(write_table, tmp_path, capsys):
    src = write_table("bad.csv", ";S0;S1\nx;S1/0;S0\n")
    dst = tmp_path / "out.csv"
    assert main.main(["mealy", str(src), str(dst)]) == 1
    assert "нет разделителя '/'" in capsys.readouterr().err
    assert not dst.exists()


@pytest.mark.parametrize("argv", [
    [],
    ["mealy", "in.csv"],
    ["dfa", "in.csv", "out.csv"],
    ["mealy", "in.csv", "out.csv", "extra"],
])
def test_bad_arguments(argv, capsys):
    with pytest.raises(SystemExit) as info:
        main.main(argv)
    assert info.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_dot_option(write_table, tmp_path, monkeypatch):
    rendered = []
    monkeypatch.setattr(visualize, "render",
                        lambda machine, path, fmt: rendered.append((machine.states, path, fmt)))
    src = write_table("moore.csv", MOORE_TEXT)
    dst = tmp_path / "out.csv"
    graph = str(tmp_path / "graph")
    assert main.main(["moore", str(src), str(dst), "--dot", graph, "--format", "svg", "-q"]) == 0
    assert rendered == [(["q0", "q1"], graph, "svg")]


def test_oversized_cell(write_table, tmp_path, capsys):
    src = write_table("huge.csv", ";S0\nx;S0/" + "y" * 200000 + "\n")
    dst = tmp_path / "out.csv"
    assert main.main(["mealy", str(src), str(dst)]) == 1
    assert capsys.readouterr().err.startswith("Ошибка: строка 2:")
    assert not dst.exists()
