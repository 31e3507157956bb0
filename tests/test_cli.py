import io

import pytest

from sortbench.cli import main, run_dataset, show_menu
from sortbench.search import read_floats, save_floats

SAMPLE = [3.5, -1.25, 7.0, 0.5, 2.0, -8.0, 4.25]

RESULT_FILES = [
    "SelectionPequeno.bin",
    "SelectionOptPequeno.bin",
    "BubblePequeno.bin",
    "BubbleOptPequeno.bin",
    "InsertionPequeno.bin",
]


@pytest.fixture
def dirs(tmp_path):
    data_dir = tmp_path / "dados"
    results_dir = tmp_path / "resultados"
    data_dir.mkdir()
    results_dir.mkdir()
    return data_dir, results_dir, tmp_path / "resultados.csv"


def test_show_menu_lists_options(capsys):
    show_menu()
    out = capsys.readouterr().out
    assert "MENU PRINCIPAL" in out
    assert "5. Sair" in out
    assert out.endswith("Escolha uma opção: ")


def test_run_dataset_saves_sorted_results(dirs):
    data_dir, results_dir, csv_path = dirs
    save_floats(data_dir / "pequeno.bin", SAMPLE)
    run_dataset("pequeno", data_dir, results_dir, csv_path)
    for name in RESULT_FILES:
        assert read_floats(results_dir / name) == sorted(SAMPLE)


def test_run_dataset_writes_csv_in_algorithm_order(dirs):
    data_dir, results_dir, csv_path = dirs
    save_floats(data_dir / "pequeno.bin", SAMPLE)
    reports, _, _ = run_dataset("pequeno", data_dir, results_dir, csv_path)
    lines = csv_path.read_text(encoding="utf-8").splitlines()
    names = [line.split(",")[0] for line in lines]
    assert names == [
        "SelectionSort",
        "SelectionSortOptimized",
        "BubbleSort",
        "BubbleSortOptimized",
        "InsertionSort",
    ]
    assert [r.name for r in reports] == names
    assert all(line.split(",")[1] == str(data_dir / "pequeno.bin") for line in lines)


def test_run_dataset_searches_find_middle_value(dirs, capsys):
    data_dir, results_dir, csv_path = dirs
    save_floats(data_dir / "pequeno.bin", SAMPLE)
    _, sequential, binary = run_dataset("pequeno", data_dir, results_dir, csv_path)
    target = SAMPLE[len(SAMPLE) // 2]
    ordered = sorted(SAMPLE)
    assert ordered[sequential.position] == target
    assert ordered[binary.position] == target
    assert sequential.comparisons == sequential.position + 1
    out = capsys.readouterr().out
    assert "BUSCA SEQUENCIAL" in out
    assert "BUSCA BINÁRIA" in out


def test_run_dataset_empty_file_raises(dirs):
    data_dir, results_dir, csv_path = dirs
    (data_dir / "pequeno.bin").write_bytes(b"")
    with pytest.raises(ValueError):
        run_dataset("pequeno", data_dir, results_dir, csv_path)


def test_run_dataset_missing_file_raises(dirs):
    data_dir, results_dir, csv_path = dirs
    with pytest.raises(FileNotFoundError):
        run_dataset("medio", data_dir, results_dir, csv_path)


def _args(dirs):
    data_dir, results_dir, csv_path = dirs
    return [
        "--data-dir", str(data_dir),
        "--results-dir", str(results_dir),
        "--csv", str(csv_path),
    ]


def test_main_exit_option(dirs, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main(_args(dirs)) == 0
    assert "Programa encerrado" in capsys.readouterr().out


def test_main_end_of_input_exits(dirs, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(_args(dirs)) == 0
    assert "Finalizando sessão" in capsys.readouterr().out


def test_main_ignores_invalid_input(dirs, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n9\n5\n"))
    assert main(_args(dirs)) == 0
    assert capsys.readouterr().out.count("MENU PRINCIPAL") == 3


def test_main_runs_small_dataset(dirs, monkeypatch):
    data_dir, results_dir, csv_path = dirs
    save_floats(data_dir / "pequeno.bin", SAMPLE)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n"))
    assert main(_args(dirs)) == 0
    assert sorted(p.name for p in results_dir.iterdir()) == sorted(RESULT_FILES)
    assert len(csv_path.read_text(encoding="utf-8").splitlines()) == 5


def test_main_missing_dataset_reports_error(dirs, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n5\n"))
    assert main(_args(dirs)) == 1
    err = capsys.readouterr().err
    assert "Erro ao abrir o arquivo" in err
    assert "medio.bin" in err


def test_main_generates_files(dirs, monkeypatch):
    data_dir, _, _ = dirs
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n5\n"))
    assert main(_args(dirs)) == 0
    assert sorted(p.name for p in data_dir.iterdir()) == ["grande.bin", "medio.bin", "pequeno.bin"]
    assert len(read_floats(data_dir / "pequeno.bin")) == 25_000